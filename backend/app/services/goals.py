import math
from typing import Optional

from loguru import logger
from pydantic import ValidationError

from app.core.time_utils import format_hours
from app.schemas.goal import Goal, GoalUpsert
from app.storage import KeyValueStore

GOAL_FORM_ERROR = "Please enter a goal and the target study hours."


def validate_goal_form(payload: GoalUpsert) -> Goal:
    goal = (payload.goal or "").strip()
    hours = payload.goal_hours
    if not goal or hours is None or not math.isfinite(hours) or hours <= 0:
        raise ValueError(GOAL_FORM_ERROR)
    return Goal(goal=goal, goal_hours=hours)


def describe_goal(goal: Goal) -> str:
    return f"Goal: {goal.goal} | Target: {format_hours(goal.goal_hours)} hours"


class GoalStore:
    """Holds the single active goal. Setting a goal replaces the previous one."""

    def __init__(self, storage: KeyValueStore, key: str = "goal"):
        self.storage = storage
        self.key = key

    def get(self) -> Optional[Goal]:
        raw = self.storage.get(self.key)
        if raw is None:
            return None
        try:
            return Goal.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring unreadable '{self.key}' blob ({e.error_count()} errors)")
            return None

    def set(self, goal: Goal) -> None:
        self.storage.set(self.key, goal.model_dump_json())
        logger.debug(f"Goal set: {goal.goal} ({goal.goal_hours} h)")
