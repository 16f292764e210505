"""Species catalog endpoints."""
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from plantcare.database import get_db
from plantcare.models import LightRequirement, WaterFrequency
from plantcare.schemas import (
    CanRemoveResponse, LightRequirementStat, SpeciesCreate, SpeciesResponse,
    SpeciesUpdate, WaterFrequencyStat,
)
from plantcare.services import species_service

router = APIRouter(prefix="/species", tags=["species"])


@router.post("", response_model=SpeciesResponse, status_code=201)
def create_species(data: SpeciesCreate, db: Session = Depends(get_db)):
    return species_service.create_species(db, data)


@router.get("", response_model=List[SpeciesResponse])
def list_species(
    light_requirements: Optional[LightRequirement] = Query(None, alias="lightRequirements"),
    water_frequency: Optional[WaterFrequency] = Query(None, alias="waterFrequency"),
    db: Session = Depends(get_db),
):
    """List species, optionally filtered by light requirement and/or watering frequency."""
    return species_service.list_species(
        db, light_requirements=light_requirements, water_frequency=water_frequency
    )


@router.get("/stats/light-requirements", response_model=List[LightRequirementStat])
def light_requirements_stats(db: Session = Depends(get_db)):
    return species_service.light_requirements_stats(db)


@router.get("/stats/water-frequency", response_model=List[WaterFrequencyStat])
def water_frequency_stats(db: Session = Depends(get_db)):
    return species_service.water_frequency_stats(db)


@router.get("/easy-care", response_model=List[SpeciesResponse])
def easy_care_species(db: Session = Depends(get_db)):
    """Species that need little light and infrequent watering."""
    return species_service.easy_care_species(db)


@router.get("/{species_id}", response_model=SpeciesResponse)
def get_species(species_id: UUID, db: Session = Depends(get_db)):
    return species_service.get_species(db, species_id)


@router.get("/{species_id}/can-remove", response_model=CanRemoveResponse)
def can_remove_species(species_id: UUID, db: Session = Depends(get_db)):
    return species_service.can_remove_species(db, species_id)


@router.patch("/{species_id}", response_model=SpeciesResponse)
def update_species(species_id: UUID, data: SpeciesUpdate, db: Session = Depends(get_db)):
    return species_service.update_species(db, species_id, data)


@router.delete("/{species_id}", status_code=204)
def delete_species(species_id: UUID, db: Session = Depends(get_db)):
    """Delete a species. Refused with 409 while plants still reference it."""
    species_service.delete_species(db, species_id)
    return Response(status_code=204)
