from __future__ import annotations

from time_tracker.core.enums import DayType
from time_tracker.workdays.memory_workday_repository import InMemoryWorkDayRepository
from time_tracker.workdays.model import WorkDay
from time_tracker.workdays.repository import collect_by_days


def test_upsert_keeps_id_of_replaced_record():
    repo = InMemoryWorkDayRepository()

    first = repo.upsert(WorkDay("e1", "2025-04-15", DayType.WORK_DAY))
    second = repo.upsert(WorkDay("e1", "2025-04-15", DayType.ABSENCE))

    assert second.id == first.id
    assert repo.list_all() == [second]


def test_range_is_inclusive_and_sorted():
    repo = InMemoryWorkDayRepository(
        [
            WorkDay("e2", "2025-04-02", DayType.WORK_DAY),
            WorkDay("e1", "2025-04-02", DayType.WORK_DAY),
            WorkDay("e1", "2025-04-01", DayType.DAY_OFF),
            WorkDay("e1", "2025-04-03", DayType.DAY_OFF),
        ]
    )

    keys = [wd.key for wd in repo.get_by_date_range("2025-04-01", "2025-04-02")]

    assert keys == [("e1", "2025-04-01"), ("e1", "2025-04-02"), ("e2", "2025-04-02")]
    assert repo.get_by_date_range("2025-04-02", "2025-04-01") == []


def test_collect_by_days_deduplicates_by_natural_key():
    record = WorkDay("e1", "2025-04-01", DayType.WORK_DAY)
    calls = []

    def get_by_date(day):
        calls.append(day)
        return [record, record] if day == "2025-04-01" else []

    assert collect_by_days(get_by_date, "2025-03-31", "2025-04-02") == [record]
    assert calls == ["2025-03-31", "2025-04-01", "2025-04-02"]


def test_delete_by_id():
    repo = InMemoryWorkDayRepository()
    stored = repo.upsert(WorkDay("e1", "2025-04-15", DayType.WORK_DAY))

    assert repo.delete("missing") is False
    assert repo.delete(stored.id) is True
    assert repo.list_all() == []
