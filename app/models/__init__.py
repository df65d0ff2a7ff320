from .student_record_model import StudentRecord, PaymentStatus, ValidationResult
