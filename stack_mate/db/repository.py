"""Protocol repository (implemented in memory and with SQL Alchemy)"""

from typing import Protocol

from stack_mate.core.models import GameModel


class GameRepository(Protocol):
    """
    Persistence layer orchestration

    Game ids are allocated by the repository: strictly increasing, starting at 1, never reused.
    Games are never deleted.
    """

    def get_game(self, game_id: int) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, int]:
        """
        Store new game and return the stored data + newly created game ID.

        In the same unit of work, the owner's current game is set to the new game (whatever it was before).
        """
        ...

    def update_game(self, game_id: int, game: GameModel) -> GameModel | None:
        """Replace the info of an existing record."""
        ...

    def get_player_game(self, player: str) -> int | None:
        """ID of the game the player created last, if any."""
        ...
