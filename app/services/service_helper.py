import math
import re
from datetime import date
from typing import List, Optional, Tuple

from app.models.student_record_model import PaymentStatus, StudentRecord
from app.schemas.student_record_schema import StudentRecordView, StudentTable

CURRENCY_SYMBOL = "$"

# plain ASCII decimal, no "1_000" and no non-latin digits
AMOUNT_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)

BADGES = {
    PaymentStatus.full_payment: ("Full", "full"),
    PaymentStatus.installment: ("Installment", "inst"),
    PaymentStatus.scholarship: ("Scholarship", "scho"),
    PaymentStatus.not_paid: ("Not Paid", "warn"),
}


def money(value) -> str:
    """
    Format an amount with a fixed two decimals, e.g. 150 -> "$150.00".
    Anything that is not a finite number renders as "$0.00".
    """
    try:
        num = float(value)
    except (TypeError, ValueError):
        return f"{CURRENCY_SYMBOL}0.00"
    if not math.isfinite(num):
        return f"{CURRENCY_SYMBOL}0.00"
    return f"{CURRENCY_SYMBOL}{num:.2f}"


def today_string(today: Optional[date] = None) -> str:
    d = today or date.today()
    return d.strftime("%Y-%m-%d")


def parse_amount(value: Optional[str]) -> Optional[float]:
    """
    Parse a raw amount field. Returns None unless the text is a plain
    decimal number (optionally with an exponent) that is finite and >= 0.
    A blank field is 0, like an empty number input.
    """
    text = (value or "").strip()
    if not text:
        return 0.0
    if not AMOUNT_PATTERN.fullmatch(text):
        return None
    num = float(text)
    if not math.isfinite(num) or num < 0:
        return None
    return num


def badge_for_status(status: PaymentStatus) -> Tuple[str, str]:
    """(label, css class) shown in the status column."""
    return BADGES.get(status, (str(status.value), ""))


def build_table(records: List[StudentRecord]) -> StudentTable:
    rows = []
    for idx, r in enumerate(records, start=1):
        label, css = badge_for_status(r.payment_status)
        rows.append(StudentRecordView(
            index=idx,
            id=r.id,
            student_name=r.student_name,
            student_id=r.student_id,
            course_name=r.course_name,
            fee=money(r.fee),
            paid=money(r.paid),
            remaining=money(r.remaining),
            payment_status=r.payment_status,
            badge=label,
            badge_class=css,
            enrollment_date=r.enrollment_date,
        ))
    return StudentTable(rows=rows, empty=not rows)
