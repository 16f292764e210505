"""Care log endpoints."""
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from plantcare.database import get_db
from plantcare.errors import ValidationError
from plantcare.models import CareLogType
from plantcare.schemas import CareLogCreate, CareLogResponse, CareLogUpdate, CareStat
from plantcare.services import care_log_service

router = APIRouter(prefix="/care-logs", tags=["care-logs"])


@router.post("", response_model=CareLogResponse, status_code=201)
def create_log(data: CareLogCreate, db: Session = Depends(get_db)):
    return care_log_service.create_log(db, data)


@router.get("", response_model=List[CareLogResponse])
def list_logs(
    plant_id: Optional[UUID] = Query(None, alias="plantId"),
    log_type: Optional[CareLogType] = Query(None, alias="type"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
):
    """
    List care logs, newest first.

    ``startDate`` and ``endDate`` must be given together and take precedence
    over the other filters.
    """
    if start_date is not None or end_date is not None:
        if start_date is None or end_date is None:
            raise ValidationError("startDate and endDate must be provided together")
        return care_log_service.find_by_date_range(db, start_date, end_date)
    return care_log_service.list_logs(db, plant_id=plant_id, log_type=log_type)


@router.get("/stats", response_model=List[CareStat])
def care_stats(db: Session = Depends(get_db)):
    """Number of logs per care type."""
    return care_log_service.care_stats(db)


@router.get("/recent", response_model=List[CareLogResponse])
def recent_logs(db: Session = Depends(get_db)):
    return care_log_service.find_recent(db)


@router.get("/successful", response_model=List[CareLogResponse])
def successful_logs(db: Session = Depends(get_db)):
    return care_log_service.find_successful(db)


@router.get("/{log_id}", response_model=CareLogResponse)
def get_log(log_id: UUID, db: Session = Depends(get_db)):
    return care_log_service.get_log(db, log_id)


@router.patch("/{log_id}", response_model=CareLogResponse)
def update_log(log_id: UUID, data: CareLogUpdate, db: Session = Depends(get_db)):
    return care_log_service.update_log(db, log_id, data)


@router.delete("/{log_id}", status_code=204)
def delete_log(log_id: UUID, db: Session = Depends(get_db)):
    care_log_service.delete_log(db, log_id)
    return Response(status_code=204)


@router.get("/{plant_name}/{log_type}/{date}", response_model=CareLogResponse)
def get_log_by_key(plant_name: str, log_type: CareLogType, date: str, db: Session = Depends(get_db)):
    return care_log_service.get_log_by_key(db, plant_name, log_type, date)


@router.delete("/{plant_name}/{log_type}/{date}", status_code=204)
def delete_log_by_key(plant_name: str, log_type: CareLogType, date: str, db: Session = Depends(get_db)):
    care_log_service.delete_log_by_key(db, plant_name, log_type, date)
    return Response(status_code=204)


@router.patch("/{plant_name}/{log_type}/{date}", response_model=CareLogResponse)
def update_log_by_key(
    plant_name: str, log_type: CareLogType, date: str, data: CareLogUpdate, db: Session = Depends(get_db)
):
    care_log = care_log_service.get_log_by_key(db, plant_name, log_type, date)
    return care_log_service.update_log(db, care_log.id, data)
