from fastapi import APIRouter, Depends

from app.api.deps import get_goal_store, get_record_store
from app.schemas.progress import ProgressRead
from app.services.goals import GoalStore
from app.services.progress import compute_progress, progress_text
from app.services.records import RecordStore

router = APIRouter(tags=["progress"])


@router.get("/progress", response_model=ProgressRead)
def get_progress(
    records: RecordStore = Depends(get_record_store),
    goals: GoalStore = Depends(get_goal_store),
):
    progress = compute_progress(goals.get(), records.list())
    if progress is None:
        # Frontend shows the prompt and an empty bar
        return ProgressRead(goal_set=False, text=progress_text(None))

    return ProgressRead(
        goal_set=True,
        text=progress_text(progress),
        **progress.model_dump(),
    )
