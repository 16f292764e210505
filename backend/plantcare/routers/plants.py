"""Plant registry endpoints."""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from plantcare.database import get_db
from plantcare.schemas import PlantCreate, PlantResponse, PlantUpdate
from plantcare.services import plant_service

router = APIRouter(prefix="/plants", tags=["plants"])


@router.post("", response_model=PlantResponse, status_code=201)
def create_plant(data: PlantCreate, db: Session = Depends(get_db)):
    """Register a plant; species and location are looked up by name."""
    return plant_service.create_plant(db, data)


@router.get("", response_model=List[PlantResponse])
def list_plants(db: Session = Depends(get_db)):
    return plant_service.list_plants(db)


@router.delete("", status_code=204)
def remove_all_plants(db: Session = Depends(get_db)):
    """Remove every plant together with its reminders and care logs."""
    plant_service.remove_all(db)
    return Response(status_code=204)


@router.get("/location/{location_id}", response_model=List[PlantResponse])
def list_plants_by_location(location_id: UUID, db: Session = Depends(get_db)):
    return plant_service.list_plants_by_location(db, location_id)


@router.get("/species/{species_id}", response_model=List[PlantResponse])
def list_plants_by_species(species_id: UUID, db: Session = Depends(get_db)):
    return plant_service.list_plants_by_species(db, species_id)


@router.get("/{plant_id}", response_model=PlantResponse)
def get_plant(plant_id: UUID, db: Session = Depends(get_db)):
    return plant_service.get_plant(db, plant_id)


@router.patch("/{plant_id}", response_model=PlantResponse)
def update_plant(plant_id: UUID, data: PlantUpdate, db: Session = Depends(get_db)):
    return plant_service.update_plant(db, plant_id, data)


@router.delete("/{plant_id}", status_code=204)
def delete_plant(plant_id: UUID, db: Session = Depends(get_db)):
    plant_service.delete_plant(db, plant_id)
    return Response(status_code=204)
