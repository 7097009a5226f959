"""
Per-class movers

Each entity kind advances one cell per tick of its own clock. Collisions
are resolved against whatever occupies the destination cell.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

from space_shooter import progression
from space_shooter.clocks import Timer
from space_shooter.constants import (
    BOSS_FIRE_INTERVALS,
    BOSS_MIN_CADENCE,
    BOSS_MOVE_CADENCE,
    ENEMY_MIN_CADENCE,
    ENEMY_MOVE_CADENCE,
    METEOR_MOVE_CADENCE,
    PLAYER_BULLET_CADENCE,
)
from space_shooter.entities import ESCAPE_PENALTY, Cell, GameState
from space_shooter.utils import logger
from space_shooter.world import ShooterWorld

DOWN = 1
UP = -1

Cadence = Callable[[int], float]


def meteor_cadence(level: int) -> float:
    return METEOR_MOVE_CADENCE


def enemy_cadence(level: int) -> float:
    return max(ENEMY_MIN_CADENCE, ENEMY_MOVE_CADENCE - 0.1 * (level - 1))


def boss_cadence(level: int) -> float:
    return max(BOSS_MIN_CADENCE, BOSS_MOVE_CADENCE - 0.1 * (level - 3))


def boss_bullet_cadence(level: int) -> float:
    return boss_cadence(level) / 2.0


def player_bullet_cadence(level: int) -> float:
    return PLAYER_BULLET_CADENCE


def boss_fire_interval(level: int) -> int:
    return BOSS_FIRE_INTERVALS.get(level, 1)


# cells each kind simply takes over (the occupant is lost silently)
OVERWRITES: dict[Cell, frozenset[Cell]] = {
    Cell.METEOR: frozenset({Cell.BOSS_BULLET}),
    Cell.ENEMY: frozenset({Cell.BOSS_BULLET}),
    Cell.BOSS: frozenset({Cell.METEOR, Cell.ENEMY, Cell.BOSS_BULLET}),
    Cell.BOSS_BULLET: frozenset({Cell.METEOR, Cell.ENEMY}),
    Cell.PLAYER_BULLET: frozenset(),
}


@dataclass
class Mover:
    """
    Moves every cell of one kind by one row per tick.

    Downward movers scan bottom to top and upward movers top to bottom, so
    an entity that already moved this tick is never visited again.
    """

    cell: Cell
    timer: Timer
    cadence: Cadence
    direction: int = DOWN

    def is_due(self, world: ShooterWorld) -> bool:
        interval = self.cadence(world.hud.level)
        return world.clocks.elapsed(self.timer) >= interval

    def update(self, world: ShooterWorld) -> bool:
        if not self.is_due(world):
            return False
        self.tick(world)
        return True

    def tick(self, world: ShooterWorld):
        """Run one full pass over the grid, then restart the clock."""
        grid = world.grid
        for r, c in self._scan_order(grid.rows, grid.cols):
            # a collision may have ended play mid-pass
            if world.state is not GameState.PLAYING:
                break
            if grid.read(r, c) is self.cell:
                self._step(world, r, c)

        self.after_pass(world)
        world.clocks.restart(self.timer)

    def _scan_order(self, rows: int, cols: int) -> Iterator[tuple[int, int]]:
        row_range = range(rows)
        if self.direction == DOWN:
            row_range = reversed(row_range)
        for r in row_range:
            for c in range(cols):
                yield r, c

    def after_pass(self, world: ShooterWorld):
        pass

    def _step(self, world: ShooterWorld, r: int, c: int):
        grid = world.grid
        src = self.cell
        tr = r + self.direction

        grid.write(r, c, Cell.EMPTY)

        # left the play field
        if not grid.in_bounds(tr, c):
            if src in ESCAPE_PENALTY:
                progression.damage_player(world, src, escaped=True)
            else:
                logger.debug(f"{src.name} left the grid at column {c}")
            return

        target = grid.read(tr, c)

        if target is Cell.EMPTY or target is src:
            grid.write(tr, c, src)
        elif target is Cell.PLAYER:
            if src is Cell.BOSS_BULLET:
                world.effects.activate(tr, c)
            progression.damage_player(world, src)
        elif src is Cell.PLAYER_BULLET and target.is_hostile:
            self._destroy(world, tr, c, target)
        elif target is Cell.PLAYER_BULLET and src.is_hostile:
            self._destroy(world, tr, c, src)
        elif target in OVERWRITES[src]:
            logger.debug(f"{src.name} overwrote {target.name} at ({tr}, {c})")
            grid.write(tr, c, src)
        else:
            logger.debug(
                f"{src.name} lost against {target.name} at ({tr}, {c})"
            )

    def _destroy(self, world: ShooterWorld, r: int, c: int, victim: Cell):
        """Bullet and victim both vanish at (r, c)."""
        world.grid.write(r, c, Cell.EMPTY)
        world.effects.activate(r, c)
        logger.debug(f"{victim.name} destroyed at ({r}, {c})")
        progression.award(world, victim.points)


@dataclass
class BossMover(Mover):
    """
    Boss mover; every Nth tick each Boss fires into the cell below it.
    """

    def after_pass(self, world: ShooterWorld):
        if world.state is not GameState.PLAYING:
            return

        world.boss_fire_counter += 1
        if world.boss_fire_counter < boss_fire_interval(world.hud.level):
            return

        grid = world.grid
        for r, c in list(grid.positions_of(Cell.BOSS)):
            below = r + 1
            if grid.in_bounds(below, c) and grid.read(below, c) is Cell.EMPTY:
                grid.write(below, c, Cell.BOSS_BULLET)
                logger.debug(
                    f"Boss fired at column {c} (Level {world.hud.level})"
                )
        world.boss_fire_counter = 0


def make_movers() -> list[Mover]:
    """Movers in the order they run within a frame."""
    return [
        Mover(Cell.METEOR, Timer.METEOR_MOVE, meteor_cadence),
        Mover(Cell.ENEMY, Timer.ENEMY_MOVE, enemy_cadence),
        BossMover(Cell.BOSS, Timer.BOSS_MOVE, boss_cadence),
        Mover(Cell.BOSS_BULLET, Timer.BOSS_BULLET_MOVE, boss_bullet_cadence),
        Mover(
            Cell.PLAYER_BULLET,
            Timer.PLAYER_BULLET_MOVE,
            player_bullet_cadence,
            direction=UP,
        ),
    ]
