import datetime as dt
from typing import Annotated, Any, Optional
from uuid import UUID

from pydantic import Field, StrictBool, StrictInt, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from plantcare.models.care_reminder import ReminderType
from plantcare.schemas.common import RequestModel, ResponseModel, reject_null
from plantcare.schemas.plant import PlantSummary
from plantcare.utils.validators import check_required_text

Frequency = Annotated[StrictInt, Field(ge=1, le=99)]


class CareReminderCreate(RequestModel):
    plant_name: str
    type: ReminderType
    frequency: Frequency
    last_done: str
    next_due: str
    notes: str
    is_active: StrictBool = True

    @field_validator("plant_name", "last_done", "next_due")
    @classmethod
    def validate_required(cls, value, info: ValidationInfo):
        return check_required_text(value, to_camel(info.field_name))

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, value):
        return check_required_text(value, "notes")


class CareReminderUpdate(RequestModel):
    """
    Partial update of a reminder.

    plantName, type and nextDue identify the reminder and cannot change; they
    are declared here only so the service can reject them with a clear message.
    """
    plant_name: Optional[Any] = None
    type: Optional[Any] = None
    next_due: Optional[Any] = None

    frequency: Optional[Frequency] = None
    last_done: Optional[str] = None
    notes: Optional[str] = None
    is_active: Optional[StrictBool] = None

    @field_validator("frequency", "is_active")
    @classmethod
    def validate_not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info.field_name)

    @field_validator("last_done")
    @classmethod
    def validate_last_done(cls, value):
        return check_required_text(reject_null(value, "last_done"), "lastDone")

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, value):
        return check_required_text(reject_null(value, "notes"), "notes")


class CareReminderResponse(ResponseModel):
    id: UUID
    plant_id: UUID
    plant: Optional[PlantSummary] = None
    type: ReminderType
    frequency: int
    last_done: dt.date
    next_due: dt.date
    notes: str
    is_active: bool
    created_at: dt.datetime
    updated_at: dt.datetime
