from datetime import date, timedelta


def sunday_of(d: date) -> date:
    """
    Return the Sunday at or before `d`.
    Example: 2024-03-06 (Wed) -> 2024-03-03
    """
    # date.weekday(): Monday = 0, Sunday = 6
    return d - timedelta(days=(d.weekday() + 1) % 7)


def week_bounds(d: date) -> tuple[date, date]:
    """Inclusive (Sunday, Saturday) of the week containing `d`."""
    start = sunday_of(d)
    return start, start + timedelta(days=6)


def week_label(d: date) -> str:
    """
    Label for the week containing `d` as 'YYYY-MM-DD ~ YYYY-MM-DD'.
    Example: 2024-03-04 -> '2024-03-03 ~ 2024-03-09'
    """
    start, end = week_bounds(d)
    return f"{start.isoformat()} ~ {end.isoformat()}"


def format_hours(hours: float) -> str:
    """Format an hour count without a trailing '.0' (4.0 -> '4', 2.5 -> '2.5')."""
    return f"{hours:g}"
