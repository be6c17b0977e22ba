from typing import Iterable

from app.core.time_utils import week_label
from app.schemas.record import StudyRecord, WeeklyHoursPoint


def group_by_week(records: Iterable[StudyRecord]) -> dict[str, float]:
    """
    Sum hours per Sunday-Saturday week, keyed by 'YYYY-MM-DD ~ YYYY-MM-DD'.

    Keys keep the order in which their weeks first appear in `records`;
    sort the records first for a chronological result.
    """
    weeks: dict[str, float] = {}
    for record in records:
        label = week_label(record.date)
        weeks[label] = weeks.get(label, 0.0) + record.hours
    return weeks


def weekly_hours(records: Iterable[StudyRecord]) -> list[WeeklyHoursPoint]:
    """Chart series: weekly totals, oldest week first. Does not reorder the input."""
    ordered = sorted(records, key=lambda r: r.date)
    return [
        WeeklyHoursPoint(week=week, total_hours=total)
        for week, total in group_by_week(ordered).items()
    ]
