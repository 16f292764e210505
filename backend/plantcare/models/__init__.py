"""All SQLAlchemy models – re-exported for app use and ``create_all``."""

from plantcare.models.species import Species, LightRequirement, WaterFrequency
from plantcare.models.location import Location, LocationType, SunlightLevel, HumidityLevel
from plantcare.models.plant import Plant, HealthStatus
from plantcare.models.care_reminder import CareReminder, ReminderType
from plantcare.models.care_log import CareLog, CareLogType

__all__ = [
    "Species", "LightRequirement", "WaterFrequency",
    "Location", "LocationType", "SunlightLevel", "HumidityLevel",
    "Plant", "HealthStatus",
    "CareReminder", "ReminderType",
    "CareLog", "CareLogType",
]
