from datetime import date

import pytest

from app.schemas.goal import Goal, GoalUpsert
from app.schemas.record import StudyRecord, StudyRecordCreate
from app.services.goals import GoalStore, validate_goal_form
from app.services.records import RecordStore, validate_record_form


def _record(day: int, subject: str, hours: float = 1.0) -> StudyRecord:
    return StudyRecord(date=date(2024, 3, day), subject=subject, hours=hours)


@pytest.fixture
def records(storage):
    return RecordStore(storage)


@pytest.fixture
def goals(storage):
    return GoalStore(storage)


def test_storage_get_set_remove(storage):
    assert storage.get("k") is None
    storage.set("k", "one")
    storage.set("k", "two")
    assert storage.get("k") == "two"
    storage.remove("k")
    assert storage.get("k") is None
    # Removing an absent key is fine
    storage.remove("k")


def test_list_is_empty_when_nothing_stored(records):
    assert records.list() == []


def test_list_keeps_append_order(records):
    appended = [_record(9, "late"), _record(1, "early"), _record(5, "middle")]
    positions = [records.append(r) for r in appended]
    assert positions == [0, 1, 2]
    assert records.list() == appended


def test_delete_at_removes_only_that_position(records):
    for subject in ("a", "b", "c", "d"):
        records.append(_record(4, subject))

    before = records.list()
    assert records.delete_at(2) is True
    assert [r.subject for r in records.list()] == ["a", "b", "d"]
    assert records.list() == before[:2] + before[3:]


@pytest.mark.parametrize("position", [-1, 3, 100])
def test_delete_at_out_of_range_is_noop(records, storage, position):
    for subject in ("a", "b", "c"):
        records.append(_record(4, subject))
    raw = storage.get("records")

    assert records.delete_at(position) is False
    assert storage.get("records") == raw


@pytest.mark.parametrize(
    "blob",
    [
        "not json",
        '{"date": "2024-03-04"}',
        '[{"date": "2024-03-04", "subject": "x"}]',
        '[{"date": "2024-03-04", "subject": "x", "hours": -1}]',
    ],
)
def test_corrupt_records_blob_reads_as_empty(records, storage, blob):
    storage.set("records", blob)
    assert records.list() == []


def test_clear_removes_records(records, storage):
    records.append(_record(4, "a"))
    records.clear()
    assert storage.get("records") is None
    assert records.list() == []


def test_records_use_configured_key(storage):
    store = RecordStore(storage, key="alt")
    store.append(_record(4, "a"))
    assert storage.get("records") is None
    assert storage.get("alt") is not None


def test_goal_roundtrip(goals):
    assert goals.get() is None
    goal = Goal(goal="Pass the exam", goal_hours=10)
    goals.set(goal)
    assert goals.get() == goal


def test_goal_set_overwrites(goals):
    goals.set(Goal(goal="first", goal_hours=3))
    goals.set(Goal(goal="second", goal_hours=7.5))
    assert goals.get() == Goal(goal="second", goal_hours=7.5)


def test_corrupt_goal_blob_reads_as_none(goals, storage):
    storage.set("goal", "{oops")
    assert goals.get() is None


def test_validate_record_form_strips_subject():
    rec = validate_record_form(StudyRecordCreate(date=date(2024, 3, 4), subject=" Physics ", hours=1.5))
    assert rec == StudyRecord(date=date(2024, 3, 4), subject="Physics", hours=1.5)


@pytest.mark.parametrize("hours", [None, 0, -2, float("nan"), float("inf")])
def test_validate_record_form_rejects_bad_hours(hours):
    with pytest.raises(ValueError):
        validate_record_form(StudyRecordCreate(date=date(2024, 3, 4), subject="Physics", hours=hours))


@pytest.mark.parametrize(
    "payload",
    [GoalUpsert(goal="", goal_hours=5), GoalUpsert(goal="x"), GoalUpsert(goal="x", goal_hours=0)],
)
def test_validate_goal_form_rejects(payload):
    with pytest.raises(ValueError):
        validate_goal_form(payload)
