"""Implementation of (Game)Repository that keeps everything in the process' memory"""

from copy import deepcopy

from stack_mate.core.models import GameModel


class InMemoryGameRepository:
    """Data stored in dictionaries. Lost when the process stops."""

    def __init__(self) -> None:
        self._games: dict[int, GameModel] = {}
        self._player_games: dict[str, int] = {}
        self._last_id = 0

    def get_game(self, game_id: int) -> GameModel | None:
        """Get game by ID, if record exists."""
        game = self._games.get(game_id)
        return deepcopy(game) if game is not None else None

    def create_game(self, game: GameModel) -> tuple[GameModel, int]:
        """Store new game and return the stored data + newly created game ID."""
        self._last_id += 1
        game_id = self._last_id
        self._games[game_id] = deepcopy(game)
        self._player_games[game.owner] = game_id
        return deepcopy(game), game_id

    def update_game(self, game_id: int, game: GameModel) -> GameModel | None:
        """Replace the info of an existing record."""
        if game_id not in self._games:
            return None
        self._games[game_id] = deepcopy(game)
        return deepcopy(game)

    def get_player_game(self, player: str) -> int | None:
        """ID of the game the player created last, if any."""
        return self._player_games.get(player)
