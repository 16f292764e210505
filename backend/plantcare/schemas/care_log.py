import datetime as dt
from typing import Any, Optional
from uuid import UUID

from pydantic import StrictBool, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from plantcare.models.care_log import CareLogType
from plantcare.schemas.common import RequestModel, ResponseModel, reject_null
from plantcare.schemas.plant import PlantSummary
from plantcare.utils.validators import check_image, check_required_text


class CareLogCreate(RequestModel):
    plant_name: str
    type: CareLogType
    date: str
    notes: str
    photo: Optional[str] = None
    success: StrictBool

    @field_validator("plant_name", "date")
    @classmethod
    def validate_required(cls, value, info: ValidationInfo):
        return check_required_text(value, to_camel(info.field_name))

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, value):
        return check_required_text(value, "notes")

    @field_validator("photo")
    @classmethod
    def validate_photo(cls, value):
        return check_image(value)


class CareLogUpdate(RequestModel):
    """plantName, type and date identify the log and are rejected by the service."""
    plant_name: Optional[Any] = None
    type: Optional[Any] = None
    date: Optional[Any] = None

    notes: Optional[str] = None
    photo: Optional[str] = None
    success: Optional[StrictBool] = None

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, value):
        return check_required_text(reject_null(value, "notes"), "notes")

    @field_validator("success")
    @classmethod
    def validate_success(cls, value):
        return reject_null(value, "success")

    @field_validator("photo")
    @classmethod
    def validate_photo(cls, value):
        return check_image(value)


class CareLogResponse(ResponseModel):
    id: UUID
    plant_id: UUID
    plant: Optional[PlantSummary] = None
    type: CareLogType
    date: dt.date
    notes: str
    photo: Optional[str] = None
    success: bool
    created_at: dt.datetime
    updated_at: dt.datetime


class CareStat(ResponseModel):
    type: CareLogType
    count: int
