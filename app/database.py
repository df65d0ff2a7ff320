# app/database.py
from typing import Iterator, List, Set

from app.models.student_record_model import StudentRecord


class RecordStore:
    """
    In-memory, insertion-ordered collection of the live student records.

    One instance is created per application (see main.py) and handed to
    the routes through the get_db dependency. Nothing here is persisted.

    `issued_ids` keeps every id ever handed out, including across a reset,
    so an id is never reused. It only grows, by one short string per
    registration, for the life of the process. Ids are random 64-bit
    tokens, so the set is only consulted to rule out the rare collision.
    """

    def __init__(self):
        self.records: List[StudentRecord] = []
        self.issued_ids: Set[str] = set()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[StudentRecord]:
        return iter(self.records)
