"""
Care reminders: recurring care schedules per plant.

A reminder is identified by (plant, type, next_due). Those three fields are
fixed at creation; everything else may be updated.
"""
import logging
from datetime import date, timedelta
from typing import Any, List, Optional
from uuid import UUID

from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session, joinedload

from plantcare.errors import ConflictError, NotFoundError, ValidationError
from plantcare.models import CareReminder, ReminderType
from plantcare.schemas import CareReminderCreate, CareReminderUpdate
from plantcare.services.common import commit_or_raise
from plantcare.services.plant_service import resolve_plant
from plantcare.utils.dates import format_date, parse_local_date, today

logger = logging.getLogger(__name__)

IMMUTABLE_FIELDS = ("plant_name", "type", "next_due")


def _parse_date(value: Any, field: str) -> date:
    parsed = parse_local_date(value)
    if parsed is None:
        raise ValidationError(f"{field} must be a valid date (YYYY-MM-DD)")
    return parsed


def _base_query(db: Session):
    return db.query(CareReminder).options(joinedload(CareReminder.plant))


def _find_by_key(
    db: Session, plant_id: UUID, reminder_type: ReminderType, next_due: date
) -> Optional[CareReminder]:
    return (
        _base_query(db)
        .filter(
            CareReminder.plant_id == plant_id,
            CareReminder.type == reminder_type,
            CareReminder.next_due == next_due,
        )
        .first()
    )


def create_reminder(db: Session, data: CareReminderCreate) -> CareReminder:
    last_done = _parse_date(data.last_done, "lastDone")
    next_due = _parse_date(data.next_due, "nextDue")

    current = today()
    if last_done > current:
        raise ValidationError("lastDone must be today or a past date")
    if next_due <= current:
        raise ValidationError("nextDue must be a future date (after today)")
    if next_due <= last_done:
        raise ValidationError("nextDue must be after lastDone")

    plant = resolve_plant(db, data.plant_name)

    if _find_by_key(db, plant.id, data.type, next_due):
        raise ConflictError(
            f"A {data.type.value} reminder for plant '{plant.name}' "
            f"due on {format_date(next_due)} already exists"
        )

    reminder = CareReminder(
        plant_id=plant.id,
        type=data.type,
        frequency=data.frequency,
        last_done=last_done,
        next_due=next_due,
        notes=data.notes,
        is_active=data.is_active,
    )
    db.add(reminder)
    commit_or_raise(db, "Creating care reminder")
    logger.info(f"Created care reminder {reminder.id} for plant {plant.id}")
    return get_reminder(db, reminder.id)


def get_reminder(db: Session, reminder_id: UUID) -> CareReminder:
    reminder = _base_query(db).filter(CareReminder.id == reminder_id).first()
    if not reminder:
        raise NotFoundError(f"Care reminder with id {reminder_id} not found")
    return reminder


def get_reminder_by_key(
    db: Session, plant_name: str, reminder_type: ReminderType, next_due: str
) -> CareReminder:
    plant = resolve_plant(db, plant_name)
    due = _parse_date(next_due, "nextDue")
    reminder = _find_by_key(db, plant.id, reminder_type, due)
    if not reminder:
        raise NotFoundError(
            f"No {reminder_type.value} reminder for plant '{plant.name}' due on {format_date(due)}"
        )
    return reminder


def update_reminder(db: Session, reminder_id: UUID, data: CareReminderUpdate) -> CareReminder:
    changes = data.model_dump(exclude_unset=True)
    locked = [to_camel(field) for field in IMMUTABLE_FIELDS if field in changes]
    if locked:
        raise ValidationError(
            f"{', '.join(locked)} cannot be changed; create a new reminder instead"
        )

    reminder = get_reminder(db, reminder_id)

    if "last_done" in changes:
        last_done = _parse_date(changes.pop("last_done"), "lastDone")
        if last_done > today():
            raise ValidationError("lastDone must be today or a past date")
        if last_done >= reminder.next_due:
            raise ValidationError("lastDone must be before nextDue")
        reminder.last_done = last_done

    for field, value in changes.items():
        setattr(reminder, field, value)

    commit_or_raise(db, "Updating care reminder")
    return get_reminder(db, reminder_id)


def mark_reminder_done(db: Session, reminder_id: UUID) -> CareReminder:
    """Record the care as done today and schedule the next occurrence."""
    reminder = get_reminder(db, reminder_id)
    done_on = today()
    next_due = done_on + timedelta(days=reminder.frequency)

    clash = _find_by_key(db, reminder.plant_id, reminder.type, next_due)
    if clash and clash.id != reminder.id:
        raise ConflictError(
            f"A {reminder.type.value} reminder for plant '{reminder.plant.name}' "
            f"due on {format_date(next_due)} already exists"
        )

    reminder.last_done = done_on
    reminder.next_due = next_due
    commit_or_raise(db, "Marking care reminder as done")
    return get_reminder(db, reminder_id)


def delete_reminder(db: Session, reminder_id: UUID) -> None:
    reminder = get_reminder(db, reminder_id)
    db.delete(reminder)
    commit_or_raise(db, "Removing care reminder")
    logger.info(f"Removed care reminder {reminder_id}")


def delete_reminder_by_key(
    db: Session, plant_name: str, reminder_type: ReminderType, next_due: str
) -> None:
    reminder = get_reminder_by_key(db, plant_name, reminder_type, next_due)
    delete_reminder(db, reminder.id)


def list_reminders(
    db: Session,
    plant_id: Optional[UUID] = None,
    reminder_type: Optional[ReminderType] = None,
) -> List[CareReminder]:
    query = _base_query(db)
    if plant_id is not None:
        query = query.filter(CareReminder.plant_id == plant_id)
    if reminder_type is not None:
        query = query.filter(CareReminder.type == reminder_type)
    return query.order_by(CareReminder.next_due).all()


def find_by_plant_id(db: Session, plant_id: UUID) -> List[CareReminder]:
    return list_reminders(db, plant_id=plant_id)


def find_by_type(db: Session, reminder_type: ReminderType) -> List[CareReminder]:
    return list_reminders(db, reminder_type=reminder_type)


def find_active(db: Session) -> List[CareReminder]:
    return (
        _base_query(db)
        .filter(CareReminder.is_active.is_(True))
        .order_by(CareReminder.next_due)
        .all()
    )


def find_overdue(db: Session) -> List[CareReminder]:
    """Active reminders whose last_done is today or earlier."""
    return (
        _base_query(db)
        .filter(CareReminder.is_active.is_(True), CareReminder.last_done <= today())
        .order_by(CareReminder.last_done)
        .all()
    )


def find_upcoming(db: Session) -> List[CareReminder]:
    """Active reminders due any day after today."""
    return (
        _base_query(db)
        .filter(CareReminder.is_active.is_(True), CareReminder.next_due > today())
        .order_by(CareReminder.next_due)
        .all()
    )
