from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from pydantic_settings import BaseSettings
from typing import List
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Settings(BaseSettings):
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./events.db")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change-this-secret-key-in-production")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost",
        "http://localhost:80",
    ]
    # Require an admin bearer token for update/approve/reject/delete
    MODERATION_REQUIRES_AUTH: bool = False

settings = Settings()


def _unicode_lower(value):
    return value.lower() if value is not None else None


def register_sqlite_functions(engine):
    """Replace SQLite's ASCII-only lower() with Python's so search folds case like the keyword."""
    @event.listens_for(engine, "connect")
    def _connect(dbapi_connection, connection_record):
        dbapi_connection.create_function("lower", 1, _unicode_lower)


def build_engine(database_url: str):
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
        )
        register_sqlite_functions(engine)
        return engine

    # Configure the engine with connection pool settings
    return create_engine(
        database_url,
        pool_size=5,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=300,  # Recycle connections after 5 minutes
        pool_pre_ping=True
    )


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# Dependency to get DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
