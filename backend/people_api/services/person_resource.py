"""Person Resource — list, get-by-key and create over the process-wide store.

Invariants:
    - One PersonResource per process, built at import; get_person_resource
      only returns it and never constructs
    - create() stores under person.first_name, overwriting any prior entry
    - create() accepts an eager Person or any awaitable resolving to one
      (coroutine, asyncio.Future, Task); stored state and response are identical
    - get_by_key() returns None on absence; it never raises for a missing key

Design Decisions:
    - One create() with a single suspension point over three overloads:
      how the person is supplied is a calling-convention concern
    - No try/except in operations: translation happens in api/error_handlers.py
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Awaitable, Generic, TypeVar

from people_api.core.person_store import PersonStore
from people_api.schemas.person import Person

logger = logging.getLogger(__name__)

T = TypeVar("T")

FAULT_MESSAGE = "Something went wrong"


@dataclass(frozen=True)
class Created(Generic[T]):
    """A 201 Created response wrapping the stored value."""
    body: T
    status_code: int = 201


class PersonResource:
    """Collection operations over Person records."""

    def __init__(self, store: PersonStore | None = None):
        self.store = store if store is not None else PersonStore()

    def list(self) -> list[Person]:
        return self.store.values()

    def get_by_key(self, key: str) -> Person | None:
        return self.store.get(key)

    async def create(self, person: Person | Awaitable[Person]) -> Created[Person]:
        """Wait for the person if needed, upsert it, wrap it as Created."""
        if inspect.isawaitable(person):
            person = await person
        if person is None:
            raise TypeError("person must not be None")
        self.store.save(person.first_name, person)
        logger.info(
            "Stored person", extra={"person_key": person.first_name},
        )
        return Created(body=person)

    def trigger_fault(self):
        """Always fails; exercises the global fault handler."""
        raise RuntimeError(FAULT_MESSAGE)


# Process-wide singleton; reset_person_resource() swaps it
_person_resource = PersonResource()


def get_person_resource() -> PersonResource:
    return _person_resource


def reset_person_resource() -> None:
    """Swap in a fresh singleton with an empty store."""
    global _person_resource
    _person_resource = PersonResource()
