from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import ValidationInfo, field_validator

from plantcare.models.location import HumidityLevel, LocationType, SunlightLevel
from plantcare.schemas.common import RequestModel, ResponseModel, reject_null
from plantcare.utils.validators import check_alphanumeric_name, check_image, check_required_text


class LocationCreate(RequestModel):
    name: str
    type: LocationType
    sunlight: SunlightLevel
    humidity: HumidityLevel
    description: str
    photo: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value):
        return check_alphanumeric_name(value, "name")

    @field_validator("description")
    @classmethod
    def validate_description(cls, value):
        return check_required_text(value, "description")

    @field_validator("photo")
    @classmethod
    def validate_photo(cls, value):
        return check_image(value)


class LocationUpdate(RequestModel):
    name: Optional[str] = None
    type: Optional[LocationType] = None
    sunlight: Optional[SunlightLevel] = None
    humidity: Optional[HumidityLevel] = None
    description: Optional[str] = None
    photo: Optional[str] = None

    @field_validator("type", "sunlight", "humidity")
    @classmethod
    def validate_levels(cls, value, info: ValidationInfo):
        return reject_null(value, info.field_name)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value):
        return check_alphanumeric_name(reject_null(value, "name"), "name")

    @field_validator("description")
    @classmethod
    def validate_description(cls, value):
        return check_required_text(reject_null(value, "description"), "description")

    @field_validator("photo")
    @classmethod
    def validate_photo(cls, value):
        return check_image(value)


class LocationSummary(ResponseModel):
    id: UUID
    name: str
    type: LocationType


class LocationResponse(ResponseModel):
    id: UUID
    name: str
    type: LocationType
    sunlight: SunlightLevel
    humidity: HumidityLevel
    description: str
    photo: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class LocationStat(ResponseModel):
    location_id: UUID
    location_name: str
    plant_count: int
