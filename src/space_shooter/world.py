"""
Shared simulation state
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from mini_arcade_core.scenes.sim_scene import BaseWorld

from space_shooter.clocks import ClockSet
from space_shooter.constants import PLAYER_ROW, PLAYER_START_COL
from space_shooter.effects import EffectPool
from space_shooter.entities import Cell, GameState, Hud, MenuItem
from space_shooter.grid import Grid

MENUS: dict[GameState, tuple[MenuItem, ...]] = {
    GameState.MENU: (
        MenuItem.START,
        MenuItem.LOAD,
        MenuItem.INSTRUCTIONS,
        MenuItem.EXIT,
    ),
    GameState.PAUSED: (
        MenuItem.RESUME,
        MenuItem.RESTART,
        MenuItem.MAIN_MENU,
    ),
    GameState.GAME_OVER: (MenuItem.RESTART, MenuItem.MAIN_MENU),
    GameState.VICTORY: (MenuItem.RESTART, MenuItem.MAIN_MENU),
}


@dataclass
class ShooterWorld(BaseWorld):
    """
    Space Shooter World
    """

    grid: Grid = field(default_factory=Grid)
    hud: Hud = field(default_factory=Hud)
    effects: EffectPool = field(default_factory=EffectPool)
    clocks: ClockSet = field(default_factory=ClockSet)
    rng: random.Random = field(default_factory=random.Random)

    state: GameState = GameState.MENU
    cursor: int = 0
    player_col: int = PLAYER_START_COL
    boss_fire_counter: int = 0
    level_up_blink: bool = True
    running: bool = True
    # texture ids by sprite, filled in once the window is open
    textures: dict[str, int] = field(default_factory=dict)

    @property
    def menu(self) -> tuple[MenuItem, ...]:
        """Items of the menu shown in the current state (may be empty)."""
        return MENUS.get(self.state, ())

    @property
    def selected(self) -> MenuItem | None:
        items = self.menu
        if not items:
            return None
        return items[self.cursor % len(items)]

    def move_cursor(self, delta: int):
        items = self.menu
        if items:
            self.cursor = (self.cursor + delta) % len(items)

    def place_player(self, col: int = PLAYER_START_COL):
        """Put the Player at the bottom row, removing it from its old cell."""
        if self.grid.read(PLAYER_ROW, self.player_col) is Cell.PLAYER:
            self.grid.write(PLAYER_ROW, self.player_col, Cell.EMPTY)
        self.player_col = col
        self.grid.write(PLAYER_ROW, col, Cell.PLAYER)
