"""Person Store — insertion-ordered, lock-guarded map of key to Person.

Invariants:
    - At most one Person per key; save() on an existing key overwrites (last write wins)
    - Overwriting keeps the key's original position in iteration order
    - values() returns a snapshot list, never a live view
    - Lives for the process lifetime; never persisted or cleared

Design Decisions:
    - threading.Lock over asyncio.Lock: sync routes run in the threadpool,
      so writers may come from several threads
"""

import threading

from people_api.schemas.person import Person


class PersonStore:
    """Thread-safe ordered mapping from first name to Person."""

    def __init__(self) -> None:
        self._people: dict[str | None, Person] = {}
        self._lock = threading.Lock()

    def save(self, key: str | None, person: Person) -> Person:
        with self._lock:
            self._people[key] = person
        return person

    def get(self, key: str | None) -> Person | None:
        with self._lock:
            return self._people.get(key)

    def values(self) -> list[Person]:
        with self._lock:
            return list(self._people.values())

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._people

    def __len__(self) -> int:
        with self._lock:
            return len(self._people)
