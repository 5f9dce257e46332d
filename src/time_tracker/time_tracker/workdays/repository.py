from __future__ import annotations

from typing import Callable, Iterable, Optional, Protocol, Sequence

from ..common.datetime_utils import iter_iso_dates
from .model import WorkDay


class WorkDayRepository(Protocol):
    """Giao diện repository cho WorkDay (the attendance record store).

    Lưu ý (DIP): services and the report engine depend on this interface, not
    on a concrete database. Dates are ``YYYY-MM-DD`` strings throughout.
    """

    def get(self, employee_id: str, date: str) -> Optional[WorkDay]:
        raise NotImplementedError

    def get_by_date(self, date: str) -> Sequence[WorkDay]:
        raise NotImplementedError

    def get_by_date_range(self, start: str, end: str) -> Sequence[WorkDay]:
        raise NotImplementedError

    def upsert(self, workday: WorkDay) -> WorkDay:
        """Store ``workday``, fully replacing any record with the same (employee_id, date)."""

        raise NotImplementedError

    def delete(self, workday_id: str) -> bool:
        """Remove the record with this id; False when there is none."""

        raise NotImplementedError

    def list_all(self) -> Sequence[WorkDay]:
        raise NotImplementedError

    def replace_all(self, workdays: Iterable[WorkDay]) -> int:
        """Drop every stored record and load ``workdays`` instead (backup restore)."""

        raise NotImplementedError


def collect_by_days(get_by_date: Callable[[str], Sequence[WorkDay]], start: str, end: str) -> list[WorkDay]:
    """Range query built from per-day lookups, de-duplicated by natural key."""
    seen: dict[tuple[str, str], WorkDay] = {}
    for day in iter_iso_dates(start, end):
        for wd in get_by_date(day):
            seen[wd.key] = wd
    return list(seen.values())
