"""Implementation of (Game)Repository using SQLAlchemy"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from stack_mate.core.models import GameModel
from stack_mate.db.schema import DBGame, DBPlayerGame


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: int) -> GameModel | None:
        """Get game by ID, if record exists."""
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._to_model(game_db)
        return None

    def create_game(self, game: GameModel) -> tuple[GameModel, int]:
        """Store new game and return the stored data + newly created game ID."""

        game_db = DBGame(
            board=list(game.board),
            owner=game.owner,
            difficulty=game.difficulty,
            white_turn=game.white_turn,
            status=game.status,
            move_count=game.move_count,
            winner=game.winner,
            moves=list(game.moves),
        )
        self.db.add(game_db)
        # flush to get the id allocated, commit once both the game and the player's index are in place
        self.db.flush()
        self._set_player_game(game.owner, game_db.id)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db), game_db.id

    def update_game(self, game_id: int, game: GameModel) -> GameModel | None:
        """Replace the info of an existing record."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        # NOTE: assign new lists. In-place changes of a JSON column are not picked up by SQLAlchemy
        game_db.board = list(game.board)
        game_db.owner = game.owner
        game_db.difficulty = game.difficulty
        game_db.white_turn = game.white_turn
        game_db.status = game.status
        game_db.move_count = game.move_count
        game_db.winner = game.winner
        game_db.moves = list(game.moves)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def get_player_game(self, player: str) -> int | None:
        """ID of the game the player created last, if any."""
        entry = self.db.get(DBPlayerGame, player)
        return entry.game_id if entry else None

    def _set_player_game(self, player: str, game_id: int) -> None:
        entry = self.db.get(DBPlayerGame, player)
        if entry is None:
            self.db.add(DBPlayerGame(player=player, game_id=game_id))
        else:
            entry.game_id = game_id

    def _fetch_game(self, game_id: int) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            board=list(game_db.board),
            owner=game_db.owner,
            difficulty=game_db.difficulty,
            white_turn=game_db.white_turn,
            status=game_db.status,
            move_count=game_db.move_count,
            winner=game_db.winner,
            moves=list(game_db.moves),
        )
