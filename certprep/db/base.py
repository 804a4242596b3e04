"""
Database engine, session factory and declarative base.
"""
from typing import Any, Dict

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import NullPool, StaticPool

from certprep.core.config import settings


def engine_options(url: str, env: str) -> Dict[str, Any]:
    """
    Keyword arguments for ``create_engine`` per backend.

    SQLite connections are shared across request threads, and an in-memory
    database keeps a single connection so every session sees the same tables.
    In production the external pooler owns connections, so none are pooled here.
    """
    if url.startswith("sqlite"):
        options: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options

    if env == "production":
        return {
            "poolclass": NullPool,
            "pool_pre_ping": True,
            "connect_args": {"options": "-c statement_timeout=30000"},  # 30s
        }

    return {
        "pool_size": 5,
        "max_overflow": 0,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


engine = create_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL, settings.ENV))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yield a request-scoped session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
