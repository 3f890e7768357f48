import os
import sqlite3
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

# Explicitly load .env from project root (parent of app/)
ENV_PATH = Path(__file__).parent.parent / ".env"
load_dotenv(ENV_PATH)
ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")

# Dev: SQLite (zero config), Prod: PostgreSQL
if ENVIRONMENT == "prod":
    DATABASE_URL = os.getenv("DATABASE_URL")
    if not DATABASE_URL:
        raise RuntimeError("DATABASE_URL must be set in production")
    engine = create_engine(
        DATABASE_URL,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=1800,
    )
else:
    # SQLite for local dev — stored next to the app folder unless overridden
    DB_PATH = Path(__file__).parent.parent / "hackernews_dev.db"
    DATABASE_URL = os.getenv("DATABASE_URL") or f"sqlite:///{DB_PATH}"
    engine = create_engine(
        DATABASE_URL,
        # needed for SQLite + FastAPI
        connect_args={"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {},
    )


# SQLite ignores foreign keys unless asked, and Comment.link_id relies on them
@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()
