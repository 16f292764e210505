"""Pydantic schemas for API request/response validation."""
from pydantic import BaseModel

from plantcare.schemas.species import (
    SpeciesCreate, SpeciesUpdate, SpeciesResponse, SpeciesSummary,
    LightRequirementStat, WaterFrequencyStat, CanRemoveResponse,
)
from plantcare.schemas.location import (
    LocationCreate, LocationUpdate, LocationResponse, LocationSummary, LocationStat,
)
from plantcare.schemas.plant import PlantCreate, PlantUpdate, PlantResponse, PlantSummary
from plantcare.schemas.care_reminder import CareReminderCreate, CareReminderUpdate, CareReminderResponse
from plantcare.schemas.care_log import CareLogCreate, CareLogUpdate, CareLogResponse, CareStat


class HealthResponse(BaseModel):
    status: str
    database: str
    timestamp: str


__all__ = [
    "SpeciesCreate", "SpeciesUpdate", "SpeciesResponse", "SpeciesSummary",
    "LightRequirementStat", "WaterFrequencyStat", "CanRemoveResponse",
    "LocationCreate", "LocationUpdate", "LocationResponse", "LocationSummary", "LocationStat",
    "PlantCreate", "PlantUpdate", "PlantResponse", "PlantSummary",
    "CareReminderCreate", "CareReminderUpdate", "CareReminderResponse",
    "CareLogCreate", "CareLogUpdate", "CareLogResponse", "CareStat",
    "HealthResponse",
]
