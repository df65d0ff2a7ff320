import enum
from dataclasses import dataclass
from typing import Optional


class PaymentStatus(str, enum.Enum):
    """
    Payment status derived from fee and paid amount.
    The value is the label shown in the table.
    """
    scholarship = "Scholarship"
    full_payment = "Full Payment"
    not_paid = "Not Paid"
    installment = "Installment"


@dataclass(frozen=True)
class StudentRecord:
    """
    One student's registration and fee entry. Records are never edited,
    only created by the validator and removed from the store.
    """
    id: str
    student_name: str
    student_id: str
    course_name: str
    fee: float
    paid: float
    remaining: float
    payment_status: PaymentStatus
    enrollment_date: str

    def __repr__(self):
        return (
            f"<StudentRecord(id={self.id}, student_id={self.student_id}, "
            f"fee={self.fee}, paid={self.paid}, status={self.payment_status.value})>"
        )


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating one registration form: either `data` holds the
    new record, or `reason` and `msg` explain the single failed check.
    """
    ok: bool
    data: Optional[StudentRecord] = None
    reason: Optional[str] = None
    msg: Optional[str] = None
