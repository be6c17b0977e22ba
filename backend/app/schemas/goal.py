from typing import Optional
from pydantic import BaseModel, Field, field_validator


class Goal(BaseModel):
    goal: str
    goal_hours: float = Field(ge=0, allow_inf_nan=False)


class GoalUpsert(BaseModel):
    goal: Optional[str] = None
    goal_hours: Optional[float] = None

    # Blank form fields arrive as "" and count as missing
    @field_validator("goal_hours", mode="before")
    @classmethod
    def _empty_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class GoalRead(Goal):
    summary: str  # e.g. "Goal: Finish calculus | Target: 10 hours"
