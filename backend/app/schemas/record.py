import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class StudyRecord(BaseModel):
    """One logged study session, as persisted."""

    date: datetime.date
    subject: str
    hours: float = Field(ge=0, allow_inf_nan=False)


class StudyRecordCreate(BaseModel):
    """Record form input. Presence is checked by the handler, not the schema."""

    date: Optional[datetime.date] = None
    subject: Optional[str] = None
    hours: Optional[float] = None

    # Blank form fields arrive as "" and count as missing
    @field_validator("date", "hours", mode="before")
    @classmethod
    def _empty_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class StudyRecordRead(StudyRecord):
    """Record as listed to the frontend; `position` is the delete handle."""

    position: int


class WeeklyHoursPoint(BaseModel):
    week: str  # "YYYY-MM-DD ~ YYYY-MM-DD"
    total_hours: float
