"""Locations catalog: CRUD, guarded delete, plant-count stats."""
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from plantcare.errors import ConflictError, NotFoundError
from plantcare.models import Location, LocationType, Plant
from plantcare.schemas import LocationCreate, LocationUpdate
from plantcare.services.common import commit_or_raise

logger = logging.getLogger(__name__)


def list_locations(db: Session, location_type: Optional[LocationType] = None) -> List[Location]:
    query = db.query(Location)
    if location_type is not None:
        query = query.filter(Location.type == location_type)
    return query.order_by(Location.name).all()


def get_location(db: Session, location_id: UUID) -> Location:
    location = db.query(Location).filter(Location.id == location_id).first()
    if not location:
        raise NotFoundError(f"Location with id {location_id} not found")
    return location


def find_location_by_name(db: Session, name: str) -> Optional[Location]:
    return db.query(Location).filter(Location.name == name.strip()).first()


def create_location(db: Session, data: LocationCreate) -> Location:
    location = Location(**data.model_dump())
    db.add(location)
    commit_or_raise(db, "Creating location")
    db.refresh(location)
    logger.info(f"Created location {location.id} ({location.name})")
    return location


def update_location(db: Session, location_id: UUID, data: LocationUpdate) -> Location:
    location = get_location(db, location_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(location, field, value)

    commit_or_raise(db, "Updating location")
    db.refresh(location)
    return location


def count_plants(db: Session, location_id: UUID) -> int:
    return db.query(func.count(Plant.id)).filter(Plant.location_id == location_id).scalar()


def delete_location(db: Session, location_id: UUID) -> None:
    location = get_location(db, location_id)
    plant_count = count_plants(db, location.id)
    if plant_count > 0:
        raise ConflictError(
            f"Cannot remove location '{location.name}': {plant_count} plant(s) are associated with it"
        )

    db.delete(location)
    commit_or_raise(db, "Removing location")
    logger.info(f"Removed location {location_id}")


def is_location_empty(db: Session, location_id: UUID) -> bool:
    location = get_location(db, location_id)
    return count_plants(db, location.id) == 0


def location_stats(db: Session) -> List[dict]:
    """Plant count per location, busiest first; empty locations included."""
    plant_count = func.count(Plant.id)
    rows = (
        db.query(Location.id, Location.name, plant_count)
        .outerjoin(Plant, Plant.location_id == Location.id)
        .group_by(Location.id, Location.name)
        .order_by(plant_count.desc(), Location.name)
        .all()
    )
    return [
        {"location_id": location_id, "location_name": name, "plant_count": count}
        for location_id, name, count in rows
    ]
