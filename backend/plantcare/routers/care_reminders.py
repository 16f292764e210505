"""Care reminder endpoints."""
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from plantcare.database import get_db
from plantcare.models import ReminderType
from plantcare.schemas import CareReminderCreate, CareReminderResponse, CareReminderUpdate
from plantcare.services import care_reminder_service

router = APIRouter(prefix="/care-reminders", tags=["care-reminders"])


@router.post("", response_model=CareReminderResponse, status_code=201)
def create_reminder(data: CareReminderCreate, db: Session = Depends(get_db)):
    return care_reminder_service.create_reminder(db, data)


@router.get("", response_model=List[CareReminderResponse])
def list_reminders(
    plant_id: Optional[UUID] = Query(None, alias="plantId"),
    reminder_type: Optional[ReminderType] = Query(None, alias="type"),
    db: Session = Depends(get_db),
):
    return care_reminder_service.list_reminders(db, plant_id=plant_id, reminder_type=reminder_type)


@router.get("/overdue", response_model=List[CareReminderResponse])
def overdue_reminders(db: Session = Depends(get_db)):
    return care_reminder_service.find_overdue(db)


@router.get("/upcoming", response_model=List[CareReminderResponse])
def upcoming_reminders(db: Session = Depends(get_db)):
    return care_reminder_service.find_upcoming(db)


@router.get("/active", response_model=List[CareReminderResponse])
def active_reminders(db: Session = Depends(get_db)):
    return care_reminder_service.find_active(db)


@router.get("/{reminder_id}", response_model=CareReminderResponse)
def get_reminder(reminder_id: UUID, db: Session = Depends(get_db)):
    return care_reminder_service.get_reminder(db, reminder_id)


@router.patch("/{reminder_id}", response_model=CareReminderResponse)
def update_reminder(reminder_id: UUID, data: CareReminderUpdate, db: Session = Depends(get_db)):
    return care_reminder_service.update_reminder(db, reminder_id, data)


@router.patch("/{reminder_id}/mark-done", response_model=CareReminderResponse)
def mark_reminder_done(reminder_id: UUID, db: Session = Depends(get_db)):
    """Set lastDone to today and push nextDue forward by the reminder frequency."""
    return care_reminder_service.mark_reminder_done(db, reminder_id)


@router.delete("/{reminder_id}", status_code=204)
def delete_reminder(reminder_id: UUID, db: Session = Depends(get_db)):
    care_reminder_service.delete_reminder(db, reminder_id)
    return Response(status_code=204)


@router.get("/{plant_name}/{reminder_type}/{next_due}", response_model=CareReminderResponse)
def get_reminder_by_key(
    plant_name: str, reminder_type: ReminderType, next_due: str, db: Session = Depends(get_db)
):
    return care_reminder_service.get_reminder_by_key(db, plant_name, reminder_type, next_due)


@router.delete("/{plant_name}/{reminder_type}/{next_due}", status_code=204)
def delete_reminder_by_key(
    plant_name: str, reminder_type: ReminderType, next_due: str, db: Session = Depends(get_db)
):
    care_reminder_service.delete_reminder_by_key(db, plant_name, reminder_type, next_due)
    return Response(status_code=204)


@router.patch("/{plant_name}/{reminder_type}/{next_due}", response_model=CareReminderResponse)
def update_reminder_by_key(
    plant_name: str,
    reminder_type: ReminderType,
    next_due: str,
    data: CareReminderUpdate,
    db: Session = Depends(get_db),
):
    reminder = care_reminder_service.get_reminder_by_key(db, plant_name, reminder_type, next_due)
    return care_reminder_service.update_reminder(db, reminder.id, data)


@router.patch("/{plant_name}/{reminder_type}/{next_due}/mark-done", response_model=CareReminderResponse)
def mark_reminder_done_by_key(
    plant_name: str, reminder_type: ReminderType, next_due: str, db: Session = Depends(get_db)
):
    reminder = care_reminder_service.get_reminder_by_key(db, plant_name, reminder_type, next_due)
    return care_reminder_service.mark_reminder_done(db, reminder.id)
