from __future__ import annotations

import math

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from app.schemas.record import StudyRecord, StudyRecordCreate
from app.storage import KeyValueStore

RECORD_FORM_ERROR = "Please enter a date, a subject and the study hours."

_records_adapter = TypeAdapter(list[StudyRecord])


def validate_record_form(payload: StudyRecordCreate) -> StudyRecord:
    """Turn record form input into a StudyRecord, or raise ValueError."""
    subject = (payload.subject or "").strip()
    hours = payload.hours
    if payload.date is None or not subject or hours is None:
        raise ValueError(RECORD_FORM_ERROR)
    if not math.isfinite(hours) or hours <= 0:
        raise ValueError(RECORD_FORM_ERROR)
    return StudyRecord(date=payload.date, subject=subject, hours=hours)


class RecordStore:
    """Ordered study records persisted as one JSON array.

    A record's identity is its position in the array; every mutation
    rewrites the whole array.
    """

    def __init__(self, storage: KeyValueStore, key: str = "records"):
        self.storage = storage
        self.key = key

    def list(self) -> list[StudyRecord]:
        raw = self.storage.get(self.key)
        if raw is None:
            return []
        try:
            return _records_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring unreadable '{self.key}' blob ({e.error_count()} errors)")
            return []

    def append(self, record: StudyRecord) -> int:
        """Store `record` at the end and return its position."""
        records = self.list()
        records.append(record)
        self._write(records)
        position = len(records) - 1
        logger.debug(f"Appended record #{position}: {record.date} {record.subject}")
        return position

    def delete_at(self, position: int) -> bool:
        """Remove the record at `position`. Out-of-range positions are a no-op."""
        records = self.list()
        if not 0 <= position < len(records):
            logger.debug(f"delete_at({position}) ignored, {len(records)} records stored")
            return False
        removed = records.pop(position)
        self._write(records)
        logger.debug(f"Deleted record #{position}: {removed.date} {removed.subject}")
        return True

    def clear(self) -> None:
        self.storage.remove(self.key)

    def _write(self, records: list[StudyRecord]) -> None:
        self.storage.set(self.key, _records_adapter.dump_json(records).decode())
