from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db import get_db
from app.services.goals import GoalStore
from app.services.records import RecordStore
from app.storage import SqlKeyValueStore


def get_record_store(db: Session = Depends(get_db)) -> RecordStore:
    return RecordStore(SqlKeyValueStore(db), key=settings.records_key)


def get_goal_store(db: Session = Depends(get_db)) -> GoalStore:
    return GoalStore(SqlKeyValueStore(db), key=settings.goal_key)
