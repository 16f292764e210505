"""Plants registry: CRUD, name resolution and bulk reset."""
import logging
from datetime import date
from typing import Any, List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from plantcare.errors import NotFoundError, ValidationError
from plantcare.models import CareLog, CareReminder, Location, Plant, Species
from plantcare.schemas import PlantCreate, PlantUpdate
from plantcare.services.common import commit_or_raise
from plantcare.services.location_service import find_location_by_name, get_location
from plantcare.services.species_service import find_species_by_name, get_species
from plantcare.utils.dates import is_not_future, parse_local_date
from plantcare.utils.validators import normalize_name

logger = logging.getLogger(__name__)


def _with_relations(query):
    return query.options(joinedload(Plant.species), joinedload(Plant.location))


def list_plants(db: Session) -> List[Plant]:
    return _with_relations(db.query(Plant)).order_by(Plant.name).all()


def list_plants_by_location(db: Session, location_id: UUID) -> List[Plant]:
    get_location(db, location_id)
    return (
        _with_relations(db.query(Plant))
        .filter(Plant.location_id == location_id)
        .order_by(Plant.name)
        .all()
    )


def list_plants_by_species(db: Session, species_id: UUID) -> List[Plant]:
    get_species(db, species_id)
    return (
        _with_relations(db.query(Plant))
        .filter(Plant.species_id == species_id)
        .order_by(Plant.name)
        .all()
    )


def get_plant(db: Session, plant_id: UUID) -> Plant:
    plant = _with_relations(db.query(Plant)).filter(Plant.id == plant_id).first()
    if not plant:
        raise NotFoundError(f"Plant with id {plant_id} not found")
    return plant


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def find_by_name(db: Session, name: Optional[str]) -> Optional[Plant]:
    """
    Resolve a human-entered plant name to a plant.

    Tries, in order:
    1. case-insensitive exact match
    2. case-insensitive substring match
    3. accent- and whitespace-insensitive comparison over every plant

    The oldest matching plant wins. Returns None when nothing matches.
    """
    wanted = (name or "").strip()
    if not wanted:
        return None

    ordered = db.query(Plant).order_by(Plant.created_at, Plant.id)

    plant = ordered.filter(func.lower(Plant.name) == wanted.lower()).first()
    if plant:
        return plant

    pattern = f"%{_escape_like(wanted.lower())}%"
    plant = ordered.filter(func.lower(Plant.name).like(pattern, escape="\\")).first()
    if plant:
        return plant

    target = normalize_name(wanted)
    for candidate in ordered.all():
        if normalize_name(candidate.name) == target:
            return candidate
    return None


def resolve_plant(db: Session, plant_name: str) -> Plant:
    plant = find_by_name(db, plant_name)
    if not plant:
        raise NotFoundError(f"Plant '{plant_name}' not found")
    return plant


def _resolve_species(db: Session, name: str) -> Species:
    species = find_species_by_name(db, name)
    if not species:
        raise NotFoundError(f"Species '{name}' not found")
    return species


def _resolve_location(db: Session, name: str) -> Location:
    location = find_location_by_name(db, name)
    if not location:
        raise NotFoundError(f"Location '{name}' not found")
    return location


def _parse_purchase_date(value: Any) -> date:
    parsed = parse_local_date(value)
    if parsed is None:
        raise ValidationError("purchaseDate must be a valid date (YYYY-MM-DD)")
    if not is_not_future(parsed):
        raise ValidationError("purchaseDate cannot be in the future")
    return parsed


def create_plant(db: Session, data: PlantCreate) -> Plant:
    purchase_date = _parse_purchase_date(data.purchase_date)
    species = _resolve_species(db, data.species_name)
    location = _resolve_location(db, data.location_name)

    plant = Plant(
        name=data.name,
        species=species,
        location=location,
        purchase_date=purchase_date,
        notes=data.notes,
        photo=data.photo,
        health_status=data.health_status,
    )
    db.add(plant)
    commit_or_raise(db, "Creating plant")
    logger.info(f"Created plant {plant.id} ({plant.name})")
    return get_plant(db, plant.id)


def update_plant(db: Session, plant_id: UUID, data: PlantUpdate) -> Plant:
    plant = get_plant(db, plant_id)
    changes = data.model_dump(exclude_unset=True)

    if "purchase_date" in changes:
        plant.purchase_date = _parse_purchase_date(changes.pop("purchase_date"))
    if "species_name" in changes:
        plant.species = _resolve_species(db, changes.pop("species_name"))
    if "location_name" in changes:
        plant.location = _resolve_location(db, changes.pop("location_name"))

    for field, value in changes.items():
        setattr(plant, field, value)

    commit_or_raise(db, "Updating plant")
    return get_plant(db, plant_id)


def delete_plant(db: Session, plant_id: UUID) -> None:
    """Delete one plant; its reminders and logs go with it."""
    plant = get_plant(db, plant_id)
    db.delete(plant)
    commit_or_raise(db, "Removing plant")
    logger.info(f"Removed plant {plant_id}")


def remove_all(db: Session) -> int:
    """
    Delete every plant together with all reminders and logs.

    Children go first so no foreign key is ever violated, and the three
    deletes share one transaction: either everything goes or nothing does.
    """
    try:
        reminders = db.query(CareReminder).delete(synchronize_session=False)
        logs = db.query(CareLog).delete(synchronize_session=False)
        plants = db.query(Plant).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Removing all plants failed")
        raise ValidationError(f"Removing all plants failed: {exc}") from exc

    db.expire_all()
    logger.info(f"Removed {plants} plants, {reminders} reminders and {logs} care logs")
    return plants
