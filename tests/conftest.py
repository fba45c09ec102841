"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from stack_mate.api.app import create_app
from stack_mate.chess.board import Board
from stack_mate.chess.pieces import code_from_fen
from stack_mate.chess.square import Square
from stack_mate.db.database import get_db
from stack_mate.db.memory_repository import InMemoryGameRepository
from stack_mate.db.schema import Base
from stack_mate.services.chess_service import ChessService

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def memory_repository() -> InMemoryGameRepository:
    return InMemoryGameRepository()


@pytest.fixture
def service(memory_repository: InMemoryGameRepository) -> ChessService:
    return ChessService(memory_repository)


@pytest.fixture
def board_from_pieces() -> Callable[[dict[str, str]], Board]:
    """
    Call the inner function with {square_name: fen_character}, ex. {"e2": "P", "d3": "p"}.
    All other squares are empty.
    """

    def _create_board(pieces: dict[str, str]) -> Board:
        board = Board()
        for square_name, fen_char in pieces.items():
            pos = Square.from_algebraic(square_name).to_position()
            board.cells[pos] = code_from_fen(fen_char)
        return board

    return _create_board


@pytest.fixture
def client(db_session_repo: Session) -> Generator[TestClient, None, None]:
    """HTTP client for the app, wired to the test database instead of the configured one."""
    app = create_app(create_tables=False)
    app.dependency_overrides[get_db] = lambda: db_session_repo
    with TestClient(app) as test_client:
        yield test_client
