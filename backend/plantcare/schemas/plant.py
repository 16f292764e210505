import datetime as dt
from typing import Optional
from uuid import UUID

from pydantic import ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from plantcare.models.plant import HealthStatus
from plantcare.schemas.common import RequestModel, ResponseModel, reject_null
from plantcare.schemas.location import LocationSummary
from plantcare.schemas.species import SpeciesSummary
from plantcare.utils.validators import check_image, check_letters_name, check_required_text


class PlantCreate(RequestModel):
    """Species and location are referenced by name and resolved server-side."""
    name: str
    species_name: str
    location_name: str
    purchase_date: str
    notes: str
    photo: Optional[str] = None
    health_status: HealthStatus = HealthStatus.HEALTHY

    @field_validator("name")
    @classmethod
    def validate_name(cls, value):
        return check_letters_name(value, "name")

    @field_validator("species_name", "location_name", "purchase_date")
    @classmethod
    def validate_references(cls, value, info: ValidationInfo):
        return check_required_text(value, to_camel(info.field_name))

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, value):
        return check_required_text(value, "notes")

    @field_validator("photo")
    @classmethod
    def validate_photo(cls, value):
        return check_image(value)


class PlantUpdate(RequestModel):
    name: Optional[str] = None
    species_name: Optional[str] = None
    location_name: Optional[str] = None
    purchase_date: Optional[str] = None
    notes: Optional[str] = None
    photo: Optional[str] = None
    health_status: Optional[HealthStatus] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value):
        return check_letters_name(reject_null(value, "name"), "name")

    @field_validator("species_name", "location_name", "purchase_date")
    @classmethod
    def validate_references(cls, value, info: ValidationInfo):
        return check_required_text(reject_null(value, info.field_name), to_camel(info.field_name))

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, value):
        return check_required_text(reject_null(value, "notes"), "notes")

    @field_validator("health_status")
    @classmethod
    def validate_health_status(cls, value):
        return reject_null(value, "health_status")

    @field_validator("photo")
    @classmethod
    def validate_photo(cls, value):
        return check_image(value)


class PlantSummary(ResponseModel):
    id: UUID
    name: str


class PlantResponse(ResponseModel):
    id: UUID
    name: str
    species_id: UUID
    location_id: UUID
    purchase_date: dt.date
    notes: str
    photo: Optional[str] = None
    health_status: HealthStatus
    species: Optional[SpeciesSummary] = None
    location: Optional[LocationSummary] = None
    created_at: dt.datetime
    updated_at: dt.datetime
