from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from plantcare.models.species import LightRequirement, WaterFrequency
from plantcare.schemas.common import RequestModel, ResponseModel, reject_null
from plantcare.utils.validators import check_image_data_uri, check_letters_name, check_required_text


class SpeciesCreate(RequestModel):
    """Schema for creating a new species."""
    name: str
    common_name: str
    description: str
    care_instructions: str
    ideal_conditions: str
    photo: Optional[str] = None
    light_requirements: Optional[LightRequirement] = None
    water_frequency: Optional[WaterFrequency] = None

    @field_validator("name", "common_name")
    @classmethod
    def validate_names(cls, value, info: ValidationInfo):
        return check_letters_name(value, to_camel(info.field_name))

    @field_validator("description", "care_instructions", "ideal_conditions")
    @classmethod
    def validate_texts(cls, value, info: ValidationInfo):
        return check_required_text(value, to_camel(info.field_name))

    @field_validator("photo")
    @classmethod
    def validate_photo(cls, value):
        return check_image_data_uri(value)


class SpeciesUpdate(RequestModel):
    """Schema for updating a species; only the fields sent are validated."""
    name: Optional[str] = None
    common_name: Optional[str] = None
    description: Optional[str] = None
    care_instructions: Optional[str] = None
    ideal_conditions: Optional[str] = None
    photo: Optional[str] = None
    light_requirements: Optional[LightRequirement] = None
    water_frequency: Optional[WaterFrequency] = None

    @field_validator("name", "common_name")
    @classmethod
    def validate_names(cls, value, info: ValidationInfo):
        return check_letters_name(reject_null(value, info.field_name), to_camel(info.field_name))

    @field_validator("description", "care_instructions", "ideal_conditions")
    @classmethod
    def validate_texts(cls, value, info: ValidationInfo):
        return check_required_text(reject_null(value, info.field_name), to_camel(info.field_name))

    @field_validator("photo")
    @classmethod
    def validate_photo(cls, value):
        return check_image_data_uri(value)


class SpeciesSummary(ResponseModel):
    id: UUID
    name: str
    common_name: str


class SpeciesResponse(ResponseModel):
    id: UUID
    name: str
    common_name: str
    description: str
    care_instructions: str
    ideal_conditions: str
    photo: Optional[str] = None
    light_requirements: Optional[LightRequirement] = None
    water_frequency: Optional[WaterFrequency] = None
    created_at: datetime
    updated_at: datetime


class LightRequirementStat(ResponseModel):
    light_requirements: Optional[LightRequirement] = None
    count: int


class WaterFrequencyStat(ResponseModel):
    water_frequency: Optional[WaterFrequency] = None
    count: int


class CanRemoveResponse(ResponseModel):
    can_be_removed: bool
    plant_count: int
