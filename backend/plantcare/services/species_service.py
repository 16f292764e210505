"""Species catalog: CRUD, guarded delete, filters and stats."""
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, func, or_
from sqlalchemy.orm import Session

from plantcare.errors import ConflictError, NotFoundError
from plantcare.models import LightRequirement, Plant, Species, WaterFrequency
from plantcare.schemas import SpeciesCreate, SpeciesUpdate
from plantcare.services.common import commit_or_raise

logger = logging.getLogger(__name__)

# (water frequency, light requirement) pairs considered low-maintenance
EASY_CARE_COMBINATIONS = [
    (WaterFrequency.WEEKLY, LightRequirement.LOW),
    (WaterFrequency.BIWEEKLY, LightRequirement.LOW),
    (WaterFrequency.BIWEEKLY, LightRequirement.MEDIUM),
]


def list_species(
    db: Session,
    light_requirements: Optional[LightRequirement] = None,
    water_frequency: Optional[WaterFrequency] = None,
) -> List[Species]:
    query = db.query(Species)
    if light_requirements is not None:
        query = query.filter(Species.light_requirements == light_requirements)
    if water_frequency is not None:
        query = query.filter(Species.water_frequency == water_frequency)
    return query.order_by(Species.name).all()


def get_species(db: Session, species_id: UUID) -> Species:
    species = db.query(Species).filter(Species.id == species_id).first()
    if not species:
        raise NotFoundError(f"Species with id {species_id} not found")
    return species


def find_species_by_name(db: Session, name: str) -> Optional[Species]:
    """Exact name lookup used to resolve plant references."""
    return db.query(Species).filter(Species.name == name.strip()).first()


def _ensure_unique_name(db: Session, name: str, exclude_id: Optional[UUID] = None) -> None:
    query = db.query(Species).filter(func.lower(Species.name) == name.lower())
    if exclude_id is not None:
        query = query.filter(Species.id != exclude_id)
    if query.first():
        raise ConflictError(f"A species named '{name}' already exists")


def create_species(db: Session, data: SpeciesCreate) -> Species:
    _ensure_unique_name(db, data.name)

    species = Species(**data.model_dump())
    db.add(species)
    commit_or_raise(db, "Creating species")
    db.refresh(species)
    logger.info(f"Created species {species.id} ({species.name})")
    return species


def update_species(db: Session, species_id: UUID, data: SpeciesUpdate) -> Species:
    species = get_species(db, species_id)
    changes = data.model_dump(exclude_unset=True)

    if "name" in changes and changes["name"].lower() != species.name.lower():
        _ensure_unique_name(db, changes["name"], exclude_id=species.id)

    for field, value in changes.items():
        setattr(species, field, value)

    commit_or_raise(db, "Updating species")
    db.refresh(species)
    return species


def count_plants(db: Session, species_id: UUID) -> int:
    return db.query(func.count(Plant.id)).filter(Plant.species_id == species_id).scalar()


def delete_species(db: Session, species_id: UUID) -> None:
    species = get_species(db, species_id)
    plant_count = count_plants(db, species.id)
    if plant_count > 0:
        raise ConflictError(
            f"Cannot remove species '{species.name}': {plant_count} plant(s) are associated with it"
        )

    db.delete(species)
    commit_or_raise(db, "Removing species")
    logger.info(f"Removed species {species_id}")


def can_remove_species(db: Session, species_id: UUID) -> dict:
    species = get_species(db, species_id)
    plant_count = count_plants(db, species.id)
    return {"can_be_removed": plant_count == 0, "plant_count": plant_count}


def light_requirements_stats(db: Session) -> List[dict]:
    rows = (
        db.query(Species.light_requirements, func.count(Species.id))
        .group_by(Species.light_requirements)
        .all()
    )
    return [{"light_requirements": value, "count": count} for value, count in rows]


def water_frequency_stats(db: Session) -> List[dict]:
    rows = (
        db.query(Species.water_frequency, func.count(Species.id))
        .group_by(Species.water_frequency)
        .all()
    )
    return [{"water_frequency": value, "count": count} for value, count in rows]


def easy_care_species(db: Session) -> List[Species]:
    conditions = [
        and_(Species.water_frequency == water, Species.light_requirements == light)
        for water, light in EASY_CARE_COMBINATIONS
    ]
    return (
        db.query(Species)
        .filter(or_(*conditions))
        .order_by(Species.water_frequency, Species.name)
        .all()
    )
