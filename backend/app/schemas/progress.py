from datetime import date
from typing import Optional

from pydantic import BaseModel


class Progress(BaseModel):
    """This week's hours against the goal."""

    week_start: date
    week_end: date
    total_hours: float
    goal_hours: float
    progress_percent: float  # 0..100, two decimals


class ProgressRead(BaseModel):
    """Progress bar payload. `goal_set` is False when no goal exists yet."""

    goal_set: bool
    text: str
    progress_percent: float = 0.0
    total_hours: Optional[float] = None
    goal_hours: Optional[float] = None
    week_start: Optional[date] = None
    week_end: Optional[date] = None
