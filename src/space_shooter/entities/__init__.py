"""
Space Shooter entities
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from space_shooter.constants import MAX_LIVES


class Cell(str, Enum):
    """
    Kind of entity occupying a grid cell.

    Entities have no state beyond their position, so the cell kind is the
    entity.
    """

    EMPTY = "empty"
    PLAYER = "player"
    METEOR = "meteor"
    PLAYER_BULLET = "player_bullet"
    ENEMY = "enemy"
    BOSS = "boss"
    BOSS_BULLET = "boss_bullet"

    @property
    def is_hostile(self) -> bool:
        return self in HOSTILE

    @property
    def points(self) -> int:
        return POINTS.get(self, 0)


# everything a player bullet can destroy
HOSTILE = frozenset({Cell.METEOR, Cell.ENEMY, Cell.BOSS, Cell.BOSS_BULLET})

# adversaries that cost a life when they leave the bottom of the grid
ESCAPE_PENALTY = frozenset({Cell.ENEMY, Cell.BOSS})

POINTS = {Cell.ENEMY: 1, Cell.BOSS: 3}


class GameState(str, Enum):
    MENU = "menu"
    INSTRUCTIONS = "instructions"
    PLAYING = "playing"
    PAUSED = "paused"
    LEVEL_UP = "level_up"
    GAME_OVER = "game_over"
    VICTORY = "victory"

    @property
    def has_player(self) -> bool:
        """States in which the Player is on the grid."""
        return self in (
            GameState.PLAYING,
            GameState.PAUSED,
            GameState.LEVEL_UP,
        )


class MenuItem(str, Enum):
    START = "Start Game"
    LOAD = "Load Saved Game"
    INSTRUCTIONS = "Instructions"
    EXIT = "Exit"
    RESUME = "Resume"
    RESTART = "Restart"
    MAIN_MENU = "Main Menu"


@dataclass
class HitEffect:
    """
    Hit-flash marker slot
    """

    row: int = 0
    col: int = 0
    timer: float = 0.0
    active: bool = False


@dataclass
class Hud:
    """
    Values shown in the side panel
    """

    lives: int = MAX_LIVES
    score: int = 0
    level: int = 1
    invincible: bool = False
