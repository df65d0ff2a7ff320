import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.deps import get_db
from app.crud import student_record_crud
from app.database import RecordStore
from app.schemas.stats_schema import Summary
from app.schemas.student_record_schema import (
    NameCheck,
    NameCheckRequest,
    RegistrationForm,
    RegistrationResponse,
    StudentRecordRead,
    StudentTable,
    ValidationResultRead,
)
from app.services import registration_service, stats_service
from app.services.registration_service import RegistrationError
from app.services.service_helper import build_table

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a student from the raw form values",
)
def create_student_record(form: RegistrationForm, db: RecordStore = Depends(get_db)):
    try:
        record = registration_service.register_student(db, form)
    except RegistrationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"reason": e.reason.value, "msg": e.msg},
        )
    return RegistrationResponse(
        message="Student added successfully.",
        data=StudentRecordRead.model_validate(record),
    )


@router.post(
    "/validate",
    response_model=ValidationResultRead,
    summary="Validate a form without storing anything",
)
def validate_student_record(form: RegistrationForm, db: RecordStore = Depends(get_db)):
    result = registration_service.validate_registration(db, form)
    return ValidationResultRead(
        ok=result.ok,
        data=StudentRecordRead.model_validate(result.data) if result.data else None,
        reason=result.reason,
        msg=result.msg,
    )


@router.post(
    "/name-check",
    response_model=NameCheck,
    summary="Remove digits typed into the name field",
)
def check_name(payload: NameCheckRequest):
    return registration_service.sanitize_name_input(payload.value)


@router.get(
    "",
    response_model=StudentTable,
    summary="List students, optionally filtered by a search query",
)
def list_student_records(
    q: Optional[str] = Query(None, description="Search name, ID, course or status"),
    db: RecordStore = Depends(get_db),
):
    return build_table(student_record_crud.filter_records(db, q))


@router.get(
    "/summary",
    response_model=Summary,
    summary="Totals over all students",
)
def get_summary(db: RecordStore = Depends(get_db)):
    return stats_service.get_summary(db)


@router.delete(
    "/{record_id}",
    summary="Delete one student record",
)
def delete_student_record(record_id: str, db: RecordStore = Depends(get_db)):
    deleted = student_record_crud.delete_record_by_id(db, record_id)
    if deleted:
        logger.info(f"Deleted record {record_id}")
    return {
        "message": "Student deleted.",
        "status": "success",
        "deleted": deleted,
    }


@router.delete(
    "",
    summary="Remove every student record",
)
def reset_student_records(db: RecordStore = Depends(get_db)):
    cleared = student_record_crud.reset_all(db)
    logger.info(f"Reset store, {cleared} record(s) cleared")
    return {
        "message": "All records cleared.",
        "status": "success",
        "cleared": cleared,
    }
