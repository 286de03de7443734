from .dungeon import DungeonScene, new_session
from .game_input import GameCommand, GameInput

__all__ = ["DungeonScene", "new_session", "GameCommand", "GameInput"]
