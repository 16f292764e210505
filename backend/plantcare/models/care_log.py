import enum

from sqlalchemy import Boolean, Column, Date, Enum, ForeignKey, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from plantcare.database import Base
from plantcare.models.mixins import TimestampedMixin, enum_values


class CareLogType(str, enum.Enum):
    WATERING = "watering"
    FERTILIZING = "fertilizing"
    PRUNING = "pruning"
    REPOTTING = "repotting"
    CLEANING = "cleaning"
    OTHER = "other"


class CareLog(TimestampedMixin, Base):
    __tablename__ = "care_logs"
    __table_args__ = (
        UniqueConstraint("plant_id", "type", "date", name="uq_care_log_plant_type_date"),
    )

    plant_id = Column(Uuid, ForeignKey("plants.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(Enum(CareLogType, name="care_log_type", values_callable=enum_values), nullable=False)
    date = Column(Date, nullable=False, index=True)
    notes = Column(String(500), nullable=False)
    photo = Column(Text, nullable=True)
    success = Column(Boolean, nullable=False)

    plant = relationship("Plant", back_populates="care_logs")
