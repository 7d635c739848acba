from typing import Generator, List
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from sqlalchemy.pool import StaticPool
from pydantic_settings import BaseSettings


# =====================================================================
# SETTINGS
# =====================================================================


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Dopaminote API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./dopaminote.db"

    # JWT
    SECRET_KEY: str = "dopaminote-access-secret"
    REFRESH_SECRET_KEY: str = "dopaminote-refresh-secret"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()


# =====================================================================
# DATABASE
# =====================================================================


def build_engine(app_settings: Settings) -> Engine:
    """Create the SQLAlchemy engine for the given settings."""
    url = app_settings.DATABASE_URL
    if not url.startswith("sqlite"):
        return create_engine(url)

    options = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        # One shared connection, otherwise every thread sees its own empty database.
        options["poolclass"] = StaticPool
    return create_engine(url, **options)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


Base = declarative_base()


# =====================================================================
# DEPENDENCIES
# =====================================================================


def get_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return request.app.state.settings


def get_db(request: Request) -> Generator[Session, None, None]:
    """Database session dependency bound to the app's own engine."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
