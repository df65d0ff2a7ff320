import logging
import re
from datetime import date
from typing import Optional

from app.crud import student_record_crud
from app.database import RecordStore
from app.models.student_record_model import PaymentStatus, StudentRecord, ValidationResult
from app.schemas.student_record_schema import (
    NameCheck,
    REJECTION_MESSAGES,
    RegistrationForm,
    RejectionReason,
)
from app.services.service_helper import parse_amount, today_string

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"[A-Za-z\s]+")
DIGITS = re.compile(r"[0-9]")
DIGITS_NOT_ALLOWED = "Digits are not allowed in Name!"


class RegistrationError(Exception):
    """Raised when a registration form is rejected. Carries one reason."""

    def __init__(self, reason: RejectionReason, msg: str):
        super().__init__(msg)
        self.reason = reason
        self.msg = msg


def classify_payment(fee: float, paid: float) -> PaymentStatus:
    if fee == 0:
        return PaymentStatus.scholarship
    if paid >= fee:
        return PaymentStatus.full_payment
    if paid == 0:
        return PaymentStatus.not_paid
    return PaymentStatus.installment


def _reject(reason: RejectionReason) -> ValidationResult:
    return ValidationResult(ok=False, reason=reason, msg=REJECTION_MESSAGES[reason])


def validate_registration(
    db: RecordStore, form: RegistrationForm, today: Optional[date] = None
) -> ValidationResult:
    """
    Check a raw registration form against the current store.

    Checks run in a fixed order and the first failure is the one reported:
    missing fields, name, fee, paid, paid > fee, duplicate student id.
    The store is only read (for the duplicate check), never modified.
    """
    name = form.student_name.strip()
    sid = form.student_id.strip()
    course = form.course_name.strip()

    if not name or not sid or not course:
        return _reject(RejectionReason.missing_fields)

    if not NAME_PATTERN.fullmatch(name):
        return _reject(RejectionReason.invalid_name)

    # blank amounts count as 0, so a blank fee is a scholarship
    fee = parse_amount(form.fee)
    if fee is None:
        return _reject(RejectionReason.invalid_fee)

    paid = parse_amount(form.paid)
    if paid is None:
        return _reject(RejectionReason.invalid_paid)

    if paid > fee:
        return _reject(RejectionReason.paid_exceeds_fee)

    if student_record_crud.student_id_exists(db, sid):
        return _reject(RejectionReason.duplicate_id)

    record = StudentRecord(
        id=student_record_crud.generate_record_id(db),
        student_name=name,
        student_id=sid,
        course_name=course,
        fee=fee,
        paid=paid,
        remaining=fee - paid,
        payment_status=classify_payment(fee, paid),
        enrollment_date=today_string(today),
    )
    return ValidationResult(ok=True, data=record)


def register_student(db: RecordStore, form: RegistrationForm) -> StudentRecord:
    """Validate the form and store the new record. Raises RegistrationError on rejection."""
    result = validate_registration(db, form)
    if not result.ok:
        logger.info(f"Registration rejected ({result.reason.value}) for student id '{form.student_id.strip()}'")
        raise RegistrationError(result.reason, result.msg)

    record = student_record_crud.insert_record(db, result.data)
    logger.info(
        f"Registered {record.student_id} ({record.id}) in {record.course_name}: "
        f"fee={record.fee:.2f} paid={record.paid:.2f} status={record.payment_status.value}"
    )
    return record


def sanitize_name_input(value: Optional[str]) -> NameCheck:
    """Strip digits from a name as it is being typed."""
    raw = value or ""
    if not DIGITS.search(raw):
        return NameCheck(value=raw, had_digits=False)
    return NameCheck(value=DIGITS.sub("", raw), had_digits=True, msg=DIGITS_NOT_ALLOWED)
