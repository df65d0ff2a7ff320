# main.py
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import config
from app.api.v1.api import api_router
from app.database import RecordStore

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Student registration API started with an empty store.")
    yield
    # records live only as long as the process
    logger.info(f"Shutting down, discarding {len(app.state.store)} record(s).")


app = FastAPI(
    title=config.APP_TITLE,
    description="Student registration and fee tracking, kept in memory.",
    version="1.0.0",
    lifespan=lifespan,
)

app.state.store = RecordStore()

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
def read_root():
    return {"message": "Welcome to the Student Registration & Fee API! Visit /docs for API documentation."}
