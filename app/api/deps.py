# app/api/deps.py
from fastapi import Request

from app.database import RecordStore


def get_db(request: Request) -> RecordStore:
    """Dependency returning the application's record store."""
    return request.app.state.store
