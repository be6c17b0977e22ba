from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from app.api.deps import get_goal_store
from app.schemas.goal import GoalRead, GoalUpsert
from app.services.goals import GoalStore, describe_goal, validate_goal_form


router = APIRouter(prefix="/goals", tags=["goals"])


@router.get("/", response_model=GoalRead)
def get_goal(store: GoalStore = Depends(get_goal_store)):
    goal = store.get()
    if goal is None:
        raise HTTPException(status_code=404, detail="Goal not set")
    return GoalRead(summary=describe_goal(goal), **goal.model_dump())


@router.put("/", response_model=GoalRead)
def set_goal(payload: GoalUpsert, store: GoalStore = Depends(get_goal_store)):
    try:
        goal = validate_goal_form(payload)
    except ValueError as e:
        logger.info(f"Rejected goal form: {payload}")
        raise HTTPException(status_code=422, detail=str(e))

    store.set(goal)
    return GoalRead(summary=describe_goal(goal), **goal.model_dump())
