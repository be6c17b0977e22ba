from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from app.api.deps import get_record_store
from app.schemas.record import StudyRecordCreate, StudyRecordRead, WeeklyHoursPoint
from app.services.records import RecordStore, validate_record_form
from app.services.weekly import weekly_hours

router = APIRouter(prefix="/records", tags=["records"])


@router.post("/", response_model=StudyRecordRead)
def create_record(payload: StudyRecordCreate, store: RecordStore = Depends(get_record_store)):
    try:
        record = validate_record_form(payload)
    except ValueError as e:
        logger.info(f"Rejected record form: {payload}")
        raise HTTPException(status_code=422, detail=str(e))

    position = store.append(record)
    return StudyRecordRead(position=position, **record.model_dump())


@router.get("/", response_model=list[StudyRecordRead])
def list_records(store: RecordStore = Depends(get_record_store)):
    """
    All records in the order they were logged.

    `position` is what the delete button sends back:
      DELETE /records/{position}
    """
    return [
        StudyRecordRead(position=i, **record.model_dump())
        for i, record in enumerate(store.list())
    ]


@router.get("/weekly", response_model=list[WeeklyHoursPoint])
def get_weekly_hours(store: RecordStore = Depends(get_record_store)):
    """Weekly totals (Sunday–Saturday), oldest week first, for the chart."""
    return weekly_hours(store.list())


@router.delete("/{position}")
def delete_record(position: int, store: RecordStore = Depends(get_record_store)):
    # Positions that no longer exist are ignored rather than reported
    deleted = store.delete_at(position)
    return {"deleted": deleted}
