import uuid
from threading import Lock


class IDGenerator:
    """
    Thread-safe generator of UUID4 string ids. An id is never issued twice,
    even after the record that carried it has been deleted.
    """
    def __init__(self):
        self._lock = Lock()
        self._issued: set[str] = set()

    def next_id(self) -> str:
        """
        Returns a fresh id that has not been issued or reserved before.
        """
        with self._lock:
            candidate = str(uuid.uuid4())
            while candidate in self._issued:
                candidate = str(uuid.uuid4())
            self._issued.add(candidate)
            return candidate

    def reserve(self, value: str) -> None:
        """
        Marks an externally supplied id (e.g. a seeded record) as taken.
        """
        with self._lock:
            self._issued.add(value)

    def is_issued(self, value: str) -> bool:
        with self._lock:
            return value in self._issued
