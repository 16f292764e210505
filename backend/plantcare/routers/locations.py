"""Locations catalog endpoints."""
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from plantcare.database import get_db
from plantcare.models import LocationType
from plantcare.schemas import LocationCreate, LocationResponse, LocationStat, LocationUpdate
from plantcare.services import location_service

router = APIRouter(prefix="/locations", tags=["locations"])


@router.post("", response_model=LocationResponse, status_code=201)
def create_location(data: LocationCreate, db: Session = Depends(get_db)):
    return location_service.create_location(db, data)


@router.get("", response_model=List[LocationResponse])
def list_locations(
    location_type: Optional[LocationType] = Query(None, alias="type"),
    db: Session = Depends(get_db),
):
    return location_service.list_locations(db, location_type=location_type)


@router.get("/stats", response_model=List[LocationStat])
def location_stats(db: Session = Depends(get_db)):
    """Number of plants per location."""
    return location_service.location_stats(db)


@router.get("/{location_id}", response_model=LocationResponse)
def get_location(location_id: UUID, db: Session = Depends(get_db)):
    return location_service.get_location(db, location_id)


@router.get("/{location_id}/is-empty", response_model=bool)
def is_location_empty(location_id: UUID, db: Session = Depends(get_db)):
    return location_service.is_location_empty(db, location_id)


@router.patch("/{location_id}", response_model=LocationResponse)
def update_location(location_id: UUID, data: LocationUpdate, db: Session = Depends(get_db)):
    return location_service.update_location(db, location_id, data)


@router.delete("/{location_id}", status_code=204)
def delete_location(location_id: UUID, db: Session = Depends(get_db)):
    location_service.delete_location(db, location_id)
    return Response(status_code=204)
