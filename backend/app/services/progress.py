from datetime import date
from typing import Iterable, Optional

from app.core.time_utils import format_hours, week_bounds
from app.schemas.goal import Goal
from app.schemas.progress import Progress
from app.schemas.record import StudyRecord

NO_GOAL_TEXT = "Please set a goal."


def compute_progress(
    goal: Optional[Goal],
    records: Iterable[StudyRecord],
    today: Optional[date] = None,
) -> Optional[Progress]:
    """
    Hours logged in the current Sunday-Saturday week versus the goal.

    Returns None when no goal is set. A goal of 0 hours yields 0%
    instead of dividing by zero. The percent is capped at 100 and
    rounded to two decimals.
    """
    if goal is None:
        return None

    today = today or date.today()
    start, end = week_bounds(today)

    total_hours = sum(r.hours for r in records if start <= r.date <= end)

    if goal.goal_hours <= 0:
        percent = 0.0
    else:
        percent = round(min(total_hours / goal.goal_hours * 100, 100), 2)

    return Progress(
        week_start=start,
        week_end=end,
        total_hours=total_hours,
        goal_hours=goal.goal_hours,
        progress_percent=percent,
    )


def progress_text(progress: Optional[Progress]) -> str:
    if progress is None:
        return NO_GOAL_TEXT
    return (
        f"This week's study time: {format_hours(progress.total_hours)} hours"
        f" / Goal: {format_hours(progress.goal_hours)} hours"
        f" ({progress.progress_percent:.2f}%)"
    )
