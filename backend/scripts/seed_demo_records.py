from datetime import date, timedelta
import random

from loguru import logger

from app.core.config import settings
from app.core.logger import setup_logger
from app.db import Base, SessionLocal, engine
from app.models.kv_entry import KeyValueEntry  # noqa: F401
from app.schemas.goal import Goal
from app.schemas.record import StudyRecord
from app.services.goals import GoalStore
from app.services.records import RecordStore
from app.storage import SqlKeyValueStore


SUBJECTS = ["Mathematics", "English", "Physics", "History", "Programming"]


def seed_demo_records(records: RecordStore, goals: GoalStore, weeks: int = 12) -> int:
    """Replace all records with `weeks` weeks of demo sessions (Tue, Thu, Sat)."""
    records.clear()

    today = date.today()
    start_day = today - timedelta(weeks=weeks - 1)

    count = 0
    for week in range(weeks):
        week_start = start_day + timedelta(weeks=week)
        for offset in (1, 3, 5):
            d = week_start + timedelta(days=offset)
            # Skip future days
            if d > today:
                continue
            records.append(
                StudyRecord(
                    date=d,
                    subject=random.choice(SUBJECTS),
                    hours=round(random.uniform(0.5, 3.0), 1),
                )
            )
            count += 1

    goals.set(Goal(goal="Steady weekly study", goal_hours=6))
    return count


if __name__ == "__main__":
    setup_logger(level=settings.log_level)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        storage = SqlKeyValueStore(db)
        n = seed_demo_records(
            RecordStore(storage, key=settings.records_key),
            GoalStore(storage, key=settings.goal_key),
        )
        logger.info(f"Seeded {n} demo records")
    finally:
        db.close()
