"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import JSON, ForeignKey
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    # AUTOINCREMENT on SQLite: ids are never reused, so they keep strictly increasing
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    board: Mapped[list[int]] = mapped_column(JSON)
    owner: Mapped[str] = mapped_column(index=True)
    difficulty: Mapped[int]
    white_turn: Mapped[bool]
    status: Mapped[str]
    move_count: Mapped[int] = mapped_column(default=0)
    winner: Mapped[Optional[str]]
    moves: Mapped[list[str]] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)


class DBPlayerGame(Base):
    """Index: the game each player created last"""

    __tablename__ = "player_games"
    player: Mapped[str] = mapped_column(primary_key=True)
    game_id: Mapped[int] = mapped_column(ForeignKey("games.id"))
