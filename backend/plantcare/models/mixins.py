"""Columns shared by every table."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Uuid


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampedMixin:
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


def enum_values(enum_cls) -> list:
    return [member.value for member in enum_cls]
