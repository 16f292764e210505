import enum

from sqlalchemy import Column, Enum, String, Text
from sqlalchemy.orm import relationship

from plantcare.database import Base
from plantcare.models.mixins import TimestampedMixin, enum_values


class LocationType(str, enum.Enum):
    INDOOR = "indoor"
    OUTDOOR = "outdoor"
    BALCONY = "balcony"
    GARDEN = "garden"
    TERRACE = "terrace"


class SunlightLevel(str, enum.Enum):
    FULL = "full"
    PARTIAL = "partial"
    SHADE = "shade"


class HumidityLevel(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Location(TimestampedMixin, Base):
    __tablename__ = "locations"

    name = Column(String(100), nullable=False, index=True)
    type = Column(Enum(LocationType, name="location_type", values_callable=enum_values), nullable=False)
    sunlight = Column(Enum(SunlightLevel, name="sunlight_level", values_callable=enum_values), nullable=False)
    humidity = Column(Enum(HumidityLevel, name="humidity_level", values_callable=enum_values), nullable=False)
    description = Column(String(500), nullable=False)
    photo = Column(Text, nullable=True)

    plants = relationship("Plant", back_populates="location")

    def __repr__(self):
        return f"<Location(id={self.id}, name='{self.name}')>"
