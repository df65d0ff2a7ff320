from dotenv import load_dotenv
import os


load_dotenv(dotenv_path=".env")

APP_TITLE = os.getenv("APP_TITLE", "Student Registration & Fee API")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# comma separated, e.g. "http://localhost:3000,https://example.org"
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost,http://localhost:3000").split(",")
    if origin.strip()
]
