import enum

from sqlalchemy import Column, Date, Enum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship

from plantcare.database import Base
from plantcare.models.mixins import TimestampedMixin, enum_values


class HealthStatus(str, enum.Enum):
    HEALTHY = "healthy"
    NEEDS_CARE = "needs_care"
    SICK = "sick"


class Plant(TimestampedMixin, Base):
    __tablename__ = "plants"

    name = Column(String(100), nullable=False, index=True)
    species_id = Column(Uuid, ForeignKey("species.id"), nullable=False, index=True)
    location_id = Column(Uuid, ForeignKey("locations.id"), nullable=False, index=True)
    purchase_date = Column(Date, nullable=False)
    notes = Column(String(500), nullable=False)
    photo = Column(Text, nullable=True)
    health_status = Column(
        Enum(HealthStatus, name="health_status", values_callable=enum_values),
        nullable=False,
        default=HealthStatus.HEALTHY,
    )

    species = relationship("Species", back_populates="plants")
    location = relationship("Location", back_populates="plants")
    reminders = relationship("CareReminder", back_populates="plant", cascade="all, delete-orphan")
    care_logs = relationship("CareLog", back_populates="plant", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Plant(id={self.id}, name='{self.name}')>"
