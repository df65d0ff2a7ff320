# app/schemas/student_record_schema.py
import enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from app.models.student_record_model import PaymentStatus


class RejectionReason(str, enum.Enum):
    missing_fields = "missing_fields"
    invalid_name = "invalid_name"
    invalid_fee = "invalid_fee"
    invalid_paid = "invalid_paid"
    paid_exceeds_fee = "paid_exceeds_fee"
    duplicate_id = "duplicate_id"


REJECTION_MESSAGES = {
    RejectionReason.missing_fields: "Please fill all fields (Name, ID, Course).",
    RejectionReason.invalid_name: "Student name must contain letters and spaces only.",
    RejectionReason.invalid_fee: "Fee must be a valid number (0 or more).",
    RejectionReason.invalid_paid: "Paid must be a valid number (0 or more).",
    RejectionReason.paid_exceeds_fee: "Paid amount cannot exceed Fee amount.",
    RejectionReason.duplicate_id: "Student ID already exists. Use a unique ID.",
}


class RegistrationForm(BaseModel):
    """Raw values exactly as typed into the registration form."""
    student_name: str = Field("", example="Amina Ali")
    student_id: str = Field("", example="S1")
    course_name: str = Field("", example="Math")
    fee: str = Field("", example="200")
    paid: str = Field("", example="50")

    @field_validator("*", mode="before")
    @classmethod
    def coerce_raw(cls, v):
        # form inputs always arrive as text; accept JSON numbers and nulls too
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class StudentRecordRead(BaseModel):
    id: str
    student_name: str
    student_id: str
    course_name: str
    fee: float
    paid: float
    remaining: float
    payment_status: PaymentStatus
    enrollment_date: str

    class Config:
        from_attributes = True


class ValidationResultRead(BaseModel):
    ok: bool
    data: Optional[StudentRecordRead] = None
    reason: Optional[RejectionReason] = None
    msg: Optional[str] = None


class RegistrationResponse(BaseModel):
    message: str
    data: StudentRecordRead


class NameCheckRequest(BaseModel):
    value: str = ""


class NameCheck(BaseModel):
    value: str
    had_digits: bool
    msg: Optional[str] = None


class StudentRecordView(BaseModel):
    """One rendered row of the students table."""
    index: int
    id: str
    student_name: str
    student_id: str
    course_name: str
    fee: str
    paid: str
    remaining: str
    payment_status: PaymentStatus
    badge: str
    badge_class: str
    enrollment_date: str


class StudentTable(BaseModel):
    rows: List[StudentRecordView]
    empty: bool
