"""
Care logs: one record per care action performed on a plant.

A log is identified by (plant, type, date); those fields cannot be updated.
"""
import logging
from datetime import date, timedelta
from typing import Any, List, Optional
from uuid import UUID

from pydantic.alias_generators import to_camel
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from plantcare.errors import ConflictError, NotFoundError, ValidationError
from plantcare.models import CareLog, CareLogType
from plantcare.schemas import CareLogCreate, CareLogUpdate
from plantcare.services.common import commit_or_raise
from plantcare.services.plant_service import resolve_plant
from plantcare.utils.dates import format_date, is_not_future, parse_local_date, today

logger = logging.getLogger(__name__)

IMMUTABLE_FIELDS = ("plant_name", "type", "date")
RECENT_DAYS = 30


def _parse_date(value: Any, field: str) -> date:
    parsed = parse_local_date(value)
    if parsed is None:
        raise ValidationError(f"{field} must be a valid date (YYYY-MM-DD)")
    return parsed


def _base_query(db: Session):
    return db.query(CareLog).options(joinedload(CareLog.plant))


def _find_by_key(db: Session, plant_id: UUID, log_type: CareLogType, on: date) -> Optional[CareLog]:
    return (
        _base_query(db)
        .filter(CareLog.plant_id == plant_id, CareLog.type == log_type, CareLog.date == on)
        .first()
    )


def create_log(db: Session, data: CareLogCreate) -> CareLog:
    performed_on = _parse_date(data.date, "date")
    if not is_not_future(performed_on):
        raise ValidationError("date must be today or a past date")

    plant = resolve_plant(db, data.plant_name)

    if _find_by_key(db, plant.id, data.type, performed_on):
        raise ConflictError(
            f"A {data.type.value} log for plant '{plant.name}' "
            f"on {format_date(performed_on)} already exists"
        )

    care_log = CareLog(
        plant_id=plant.id,
        type=data.type,
        date=performed_on,
        notes=data.notes,
        photo=data.photo,
        success=data.success,
    )
    db.add(care_log)
    commit_or_raise(db, "Creating care log")
    logger.info(f"Created care log {care_log.id} for plant {plant.id}")
    return get_log(db, care_log.id)


def get_log(db: Session, log_id: UUID) -> CareLog:
    care_log = _base_query(db).filter(CareLog.id == log_id).first()
    if not care_log:
        raise NotFoundError(f"Care log with id {log_id} not found")
    return care_log


def get_log_by_key(db: Session, plant_name: str, log_type: CareLogType, on: str) -> CareLog:
    plant = resolve_plant(db, plant_name)
    performed_on = _parse_date(on, "date")
    care_log = _find_by_key(db, plant.id, log_type, performed_on)
    if not care_log:
        raise NotFoundError(
            f"No {log_type.value} log for plant '{plant.name}' on {format_date(performed_on)}"
        )
    return care_log


def update_log(db: Session, log_id: UUID, data: CareLogUpdate) -> CareLog:
    changes = data.model_dump(exclude_unset=True)
    locked = [to_camel(field) for field in IMMUTABLE_FIELDS if field in changes]
    if locked:
        raise ValidationError(
            f"{', '.join(locked)} cannot be changed; create a new care log instead"
        )

    care_log = get_log(db, log_id)
    for field, value in changes.items():
        setattr(care_log, field, value)

    commit_or_raise(db, "Updating care log")
    return get_log(db, log_id)


def delete_log(db: Session, log_id: UUID) -> None:
    care_log = get_log(db, log_id)
    db.delete(care_log)
    commit_or_raise(db, "Removing care log")
    logger.info(f"Removed care log {log_id}")


def delete_log_by_key(db: Session, plant_name: str, log_type: CareLogType, on: str) -> None:
    care_log = get_log_by_key(db, plant_name, log_type, on)
    delete_log(db, care_log.id)


def list_logs(
    db: Session,
    plant_id: Optional[UUID] = None,
    log_type: Optional[CareLogType] = None,
) -> List[CareLog]:
    query = _base_query(db)
    if plant_id is not None:
        query = query.filter(CareLog.plant_id == plant_id)
    if log_type is not None:
        query = query.filter(CareLog.type == log_type)
    return query.order_by(CareLog.date.desc(), CareLog.created_at.desc()).all()


def find_by_plant_id(db: Session, plant_id: UUID) -> List[CareLog]:
    return list_logs(db, plant_id=plant_id)


def find_by_type(db: Session, log_type: CareLogType) -> List[CareLog]:
    return list_logs(db, log_type=log_type)


def find_successful(db: Session) -> List[CareLog]:
    return (
        _base_query(db)
        .filter(CareLog.success.is_(True))
        .order_by(CareLog.date.desc())
        .all()
    )


def find_by_date_range(db: Session, start: Any, end: Any) -> List[CareLog]:
    start_date = _parse_date(start, "startDate")
    end_date = _parse_date(end, "endDate")
    if start_date > end_date:
        raise ValidationError("startDate must not be after endDate")
    return (
        _base_query(db)
        .filter(CareLog.date.between(start_date, end_date))
        .order_by(CareLog.date.desc())
        .all()
    )


def find_recent(db: Session, days: int = RECENT_DAYS) -> List[CareLog]:
    """Logs from the last ``days`` days, today included."""
    current = today()
    return find_by_date_range(db, current - timedelta(days=days), current)


def care_stats(db: Session) -> List[dict]:
    rows = (
        db.query(CareLog.type, func.count(CareLog.id))
        .group_by(CareLog.type)
        .order_by(CareLog.type)
        .all()
    )
    return [{"type": log_type, "count": count} for log_type, count in rows]
