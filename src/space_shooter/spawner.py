"""
Adversary spawners
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable

from space_shooter.clocks import Timer
from space_shooter.constants import BOSS_MIN_LEVEL
from space_shooter.entities import Cell
from space_shooter.utils import logger
from space_shooter.world import ShooterWorld

Schedule = Callable[[int, random.Random], float]


def meteor_interval(level: int, rng: random.Random) -> float:
    return 1.0 + rng.randrange(3)


def enemy_interval(level: int, rng: random.Random) -> float:
    # shorter waits as the level rises
    base = max(0.5, 2.5 - 0.4 * level)
    variance = max(1.0, 3.0 - 0.4 * level)
    return base + rng.randrange(int(variance))


def boss_interval(level: int, rng: random.Random) -> float:
    base = max(5.0, 10.0 - 1.5 * (level - 3))
    return base + rng.randrange(4)


@dataclass
class Spawner:
    """
    Drops one adversary kind into a random top-row cell on a random
    interval.
    """

    cell: Cell
    timer: Timer
    schedule: Schedule
    next_interval: float
    min_level: int = 1

    def is_active(self, world: ShooterWorld) -> bool:
        return world.hud.level >= self.min_level

    def update(self, world: ShooterWorld) -> bool:
        """
        Spawn if the interval has elapsed

        :return: True if an adversary was written into the grid
        :rtype: bool
        """
        if not self.is_active(world):
            return False
        if world.clocks.elapsed(self.timer) < self.next_interval:
            return False
        return self.spawn(world)

    def spawn(self, world: ShooterWorld) -> bool:
        """Attempt one spawn now, then restart the clock and resample."""
        col = world.rng.randrange(world.grid.cols)
        spawned = world.grid.read(0, col) is Cell.EMPTY
        if spawned:
            world.grid.write(0, col, self.cell)
            logger.debug(f"{self.cell.name} spawned at column {col}")

        world.clocks.restart(self.timer)
        self.next_interval = self.schedule(world.hud.level, world.rng)
        return spawned


def make_spawners(rng: random.Random) -> list[Spawner]:
    """Meteor, enemy and boss spawners with their first waits drawn."""
    return [
        Spawner(
            Cell.METEOR,
            Timer.METEOR_SPAWN,
            meteor_interval,
            next_interval=1.0 + rng.randrange(3),
        ),
        Spawner(
            Cell.ENEMY,
            Timer.ENEMY_SPAWN,
            enemy_interval,
            next_interval=2.0 + rng.randrange(4),
        ),
        Spawner(
            Cell.BOSS,
            Timer.BOSS_SPAWN,
            boss_interval,
            next_interval=8.0 + rng.randrange(5),
            min_level=BOSS_MIN_LEVEL,
        ),
    ]
