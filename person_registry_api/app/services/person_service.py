"""
Business logic for person records.

``PersonService`` implements list, get, create, replace and delete on
top of a ``PersonStore``.  Lookups are linear scans by ``id``.  Payloads
reach the service already validated; the service only decides where
records go and which id they carry.

Stored records are the client's payload with the server‑controlled
``id`` placed first.  An ``id`` field inside a payload is ignored so
that ids stay unique.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.store import Person, PersonStore

logger = logging.getLogger(__name__)


def _build_record(person_id: str, payload: Dict[str, Any]) -> Person:
    record: Person = {"id": person_id}
    record.update((key, value) for key, value in payload.items() if key != "id")
    return record


class PersonService:
    """Service for managing person records held in a ``PersonStore``."""

    def __init__(self, store: PersonStore) -> None:
        self.store = store

    async def list_persons(self) -> List[Person]:
        """Return every record in insertion order."""
        return self.store.all()

    async def get_person(self, person_id: str) -> Optional[Person]:
        """Return the record with ``person_id`` or ``None`` if absent."""
        return self.store.find(person_id)

    async def create_person(self, payload: Dict[str, Any]) -> Person:
        """Store a new record under a freshly generated id and return it."""
        with self.store.lock:
            person = _build_record(self.store.new_id(), payload)
            self.store.append(person)
        logger.info("Created person %s", person["id"])
        return person

    async def replace_person(self, person_id: str, payload: Dict[str, Any]) -> Optional[Person]:
        """Overwrite the record with ``person_id`` in place.

        Fields of the old record that are absent from ``payload`` are
        dropped.  Returns the new record, or ``None`` if no record has
        that id.
        """
        with self.store.lock:
            index = self.store.index_of(person_id)
            if index < 0:
                return None
            person = _build_record(person_id, payload)
            self.store.put(index, person)
        logger.info("Replaced person %s", person_id)
        return person

    async def delete_person(self, person_id: str) -> bool:
        """Remove the record with ``person_id``.

        Returns ``True`` if a record was removed, ``False`` otherwise.
        """
        with self.store.lock:
            persons = self.store.all()
            remaining = [person for person in persons if person.get("id") != person_id]
            if len(remaining) == len(persons):
                return False
            self.store.replace_all(remaining)
        logger.info("Deleted person %s", person_id)
        return True
