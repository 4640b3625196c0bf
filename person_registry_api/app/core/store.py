"""
In‑memory storage for person records.

``PersonStore`` owns the ordered list of person records for the
lifetime of the process.  Nothing is persisted: a new store (and thus
a restart) starts again from the seed record.  The application keeps
its store on ``app.state`` so that tests can build isolated instances
instead of sharing a module‑level global.

Every read‑modify‑write sequence must run while holding ``lock``.  The
lock is re‑entrant, so service code can take it around several store
calls which take it again internally.
"""

import copy
import threading
import uuid
from typing import Any, Dict, Iterable, List, Optional

Person = Dict[str, Any]

# ``age`` is a string here while the payload schema requires a number.
# The seed record is kept as it always was and is never validated.
SEED_PERSONS: List[Person] = [
    {
        "id": "1",
        "name": "Sam",
        "age": "26",
        "hobbies": [],
    },
]


class PersonStore:
    """Ordered, lock‑guarded collection of person records."""

    def __init__(self, seed: Optional[Iterable[Person]] = None) -> None:
        self.lock = threading.RLock()
        records = SEED_PERSONS if seed is None else seed
        self._persons: List[Person] = [copy.deepcopy(record) for record in records]

    def __len__(self) -> int:
        with self.lock:
            return len(self._persons)

    def all(self) -> List[Person]:
        """Return a snapshot of the collection in insertion order."""
        with self.lock:
            return list(self._persons)

    def index_of(self, person_id: str) -> int:
        """Return the position of the record with ``person_id`` or ``-1``."""
        with self.lock:
            for index, person in enumerate(self._persons):
                if person.get("id") == person_id:
                    return index
            return -1

    def find(self, person_id: str) -> Optional[Person]:
        with self.lock:
            index = self.index_of(person_id)
            return self._persons[index] if index >= 0 else None

    def append(self, person: Person) -> None:
        with self.lock:
            self._persons.append(person)

    def put(self, index: int, person: Person) -> None:
        with self.lock:
            self._persons[index] = person

    def replace_all(self, persons: Iterable[Person]) -> None:
        with self.lock:
            self._persons = list(persons)

    def new_id(self) -> str:
        """Generate an identifier not used by any stored record."""
        with self.lock:
            while True:
                candidate = str(uuid.uuid4())
                if self.index_of(candidate) < 0:
                    return candidate
