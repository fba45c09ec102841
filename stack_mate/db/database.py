"""Generate database session"""

from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from stack_mate.core.config import SETTINGS
from stack_mate.db.schema import Base


def build_engine(database_url: str = SETTINGS.database_url) -> Engine:
    # SQLite needs check_same_thread=False when sessions are handed out per request; other backends do not take the arg
    connect_args = (
        {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    )
    return create_engine(database_url, echo=SETTINGS.sql_echo, connect_args=connect_args)


engine = build_engine()
SessionLocal = sessionmaker(autoflush=False, bind=engine)


def init_db() -> None:
    """Ensure all tables are created"""
    Base.metadata.create_all(bind=engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
