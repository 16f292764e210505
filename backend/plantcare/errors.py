"""Domain exceptions raised by the service layer.

Routers never build HTTP errors themselves; the handlers registered in
``plantcare.main`` turn these into ``{"detail": ...}`` responses.
"""


class PlantCareError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PlantCareError):
    """Bad input, broken business rule or failed persistence."""

    status_code = 400


class ConflictError(ValidationError):
    """Duplicate key, or delete blocked by dependent records."""

    status_code = 409


class NotFoundError(PlantCareError):
    status_code = 404
