import enum

from sqlalchemy import Boolean, Column, Date, Enum, ForeignKey, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from plantcare.database import Base
from plantcare.models.mixins import TimestampedMixin, enum_values


class ReminderType(str, enum.Enum):
    WATERING = "watering"
    FERTILIZING = "fertilizing"
    PRUNING = "pruning"
    SUNLIGHT = "sunlight"
    OTHER = "other"


class CareReminder(TimestampedMixin, Base):
    __tablename__ = "care_reminders"
    __table_args__ = (
        UniqueConstraint("plant_id", "type", "next_due", name="uq_care_reminder_plant_type_next_due"),
    )

    plant_id = Column(Uuid, ForeignKey("plants.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(Enum(ReminderType, name="reminder_type", values_callable=enum_values), nullable=False)
    frequency = Column(Integer, nullable=False)  # days
    last_done = Column(Date, nullable=False)
    next_due = Column(Date, nullable=False, index=True)
    notes = Column(String(500), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    plant = relationship("Plant", back_populates="reminders")
