import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# DEV default is a local SQLite file; point DATABASE_URL at a server DB in production.
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR}/course_management.db")

# Connection pool bounds (ignored for SQLite)
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "20"))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Shown in listings for courses with no assigned teacher
TBD_TEACHER_NAME = "TBD"
