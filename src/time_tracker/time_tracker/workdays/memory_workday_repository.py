from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import replace
from typing import Iterable, Optional, Sequence

from .model import WorkDay
from .repository import WorkDayRepository, collect_by_days

logger = logging.getLogger(__name__)


class InMemoryWorkDayRepository(WorkDayRepository):
    """Process-local store keyed by (employee_id, date).

    Owned by the container; safe to share between request threads.
    """

    def __init__(self, workdays: Iterable[WorkDay] = ()):
        self._lock = threading.Lock()
        self._by_key: dict[tuple[str, str], WorkDay] = {}
        for wd in workdays:
            self.upsert(wd)

    def get(self, employee_id: str, date: str) -> Optional[WorkDay]:
        with self._lock:
            return self._by_key.get((employee_id, date))

    def get_by_date(self, date: str) -> Sequence[WorkDay]:
        with self._lock:
            items = [wd for wd in self._by_key.values() if wd.date == date]
        items.sort(key=lambda wd: wd.employee_id)
        return items

    def get_by_date_range(self, start: str, end: str) -> Sequence[WorkDay]:
        if end < start:
            return []
        items = collect_by_days(self.get_by_date, start, end)
        items.sort(key=lambda wd: (wd.date, wd.employee_id))
        return items

    def upsert(self, workday: WorkDay) -> WorkDay:
        with self._lock:
            existing = self._by_key.get(workday.key)
            if workday.id is None:
                workday = replace(workday, id=existing.id if existing else uuid.uuid4().hex)
            self._by_key[workday.key] = workday
        logger.debug("Stored work day %s@%s (%s)", workday.employee_id, workday.date, "replaced" if existing else "new")
        return workday

    def delete(self, workday_id: str) -> bool:
        with self._lock:
            key = next((k for k, wd in self._by_key.items() if wd.id == workday_id), None)
            if key is None:
                return False
            del self._by_key[key]
        return True

    def list_all(self) -> Sequence[WorkDay]:
        with self._lock:
            items = list(self._by_key.values())
        items.sort(key=lambda wd: (wd.date, wd.employee_id))
        return items

    def replace_all(self, workdays: Iterable[WorkDay]) -> int:
        fresh: dict[tuple[str, str], WorkDay] = {}
        for wd in workdays:
            fresh[wd.key] = wd if wd.id else replace(wd, id=uuid.uuid4().hex)
        with self._lock:
            self._by_key = fresh
        return len(fresh)
