"""
In‑memory storage for directory records.

The store maps identifiers to records and guards every access with a
lock, so concurrent requests served from a thread pool never observe a
half‑applied mutation.  Reads hand back copies of the value list rather
than live views of the dict.
"""

import threading
from typing import Dict, Generic, List, Optional, TypeVar

RecordT = TypeVar("RecordT")


class EmployeeStore(Generic[RecordT]):
    """Lock‑guarded mapping of identifier to record.

    Insertion order is preserved, which the service relies on for
    deterministic tie‑breaking.
    """

    def __init__(self) -> None:
        self._records: Dict[str, RecordT] = {}
        self._lock = threading.Lock()

    def add(self, record_id: str, record: RecordT) -> None:
        with self._lock:
            if record_id in self._records:
                raise KeyError(f"Identifier {record_id} is already in use")
            self._records[record_id] = record

    def get(self, record_id: str) -> Optional[RecordT]:
        with self._lock:
            return self._records.get(record_id)

    def remove(self, record_id: str) -> Optional[RecordT]:
        """Remove a record and return it, or ``None`` if it was absent."""
        with self._lock:
            return self._records.pop(record_id, None)

    def snapshot(self) -> List[RecordT]:
        """Return a copy of all records in insertion order."""
        with self._lock:
            return list(self._records.values())

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._records
