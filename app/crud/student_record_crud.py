import logging
import secrets
from typing import List, Optional

from app.database import RecordStore
from app.models.student_record_model import StudentRecord
from app.schemas.stats_schema import Aggregate

logger = logging.getLogger(__name__)


def generate_record_id(db: RecordStore) -> str:
    """Return an S-<hex> token this store has never issued."""
    while True:
        record_id = f"S-{secrets.token_hex(8)}"
        if record_id not in db.issued_ids:
            return record_id


def student_id_exists(db: RecordStore, student_id: str) -> bool:
    wanted = student_id.lower()
    return any(r.student_id.lower() == wanted for r in db.records)


def get_record(db: RecordStore, record_id: str) -> Optional[StudentRecord]:
    for record in db.records:
        if record.id == record_id:
            return record
    return None


def insert_record(db: RecordStore, record: StudentRecord) -> StudentRecord:
    # caller is responsible for validation
    db.records.append(record)
    db.issued_ids.add(record.id)
    return record


def delete_record_by_id(db: RecordStore, record_id: str) -> bool:
    """
    Remove the record with this id. Unknown ids are ignored.
    Returns True when a record was removed.
    """
    record = get_record(db, record_id)
    if record is None:
        logger.info(f"Delete ignored, no record with id {record_id}")
        return False
    db.records.remove(record)
    return True


def reset_all(db: RecordStore) -> int:
    count = len(db.records)
    db.records = []
    return count


def filter_records(db: RecordStore, query: Optional[str] = None) -> List[StudentRecord]:
    """
    Case-insensitive substring search over name, student id, course and
    payment status label. An empty query returns every record.
    """
    q = (query or "").strip().lower()
    if not q:
        return list(db.records)

    return [
        r for r in db.records
        if q in r.student_name.lower()
        or q in r.student_id.lower()
        or q in r.course_name.lower()
        or q in r.payment_status.value.lower()
    ]


def aggregate_records(db: RecordStore) -> Aggregate:
    """Totals over the full collection, ignoring any search filter."""
    return Aggregate(
        total_students=len(db.records),
        total_fee=sum(r.fee for r in db.records),
        total_paid=sum(r.paid for r in db.records),
        total_remaining=sum(r.remaining for r in db.records),
    )
