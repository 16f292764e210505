import enum

from sqlalchemy import Column, Enum, String, Text
from sqlalchemy.orm import relationship

from plantcare.database import Base
from plantcare.models.mixins import TimestampedMixin, enum_values


class LightRequirement(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class WaterFrequency(str, enum.Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"


class Species(TimestampedMixin, Base):
    """Plant species in the catalog."""

    __tablename__ = "species"

    name = Column(String(100), nullable=False, unique=True, index=True)
    common_name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False)
    care_instructions = Column(String(500), nullable=False)
    ideal_conditions = Column(String(500), nullable=False)
    photo = Column(Text, nullable=True)
    light_requirements = Column(
        Enum(LightRequirement, name="light_requirement", values_callable=enum_values),
        nullable=True,
    )
    water_frequency = Column(
        Enum(WaterFrequency, name="water_frequency", values_callable=enum_values),
        nullable=True,
    )

    plants = relationship("Plant", back_populates="species")

    def __repr__(self):
        return f"<Species(id={self.id}, name='{self.name}')>"
