# app/api/v1/api.py
from fastapi import APIRouter

from app.api.v1.endpoints.student_record_route import router as student_record_router

api_router = APIRouter()

api_router.include_router(student_record_router, prefix="/students", tags=["Students"])
