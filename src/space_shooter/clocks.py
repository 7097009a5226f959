"""
Named monotonic timers
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Iterable

TimeSource = Callable[[], float]


class Timer(str, Enum):
    METEOR_SPAWN = "meteor_spawn"
    METEOR_MOVE = "meteor_move"
    ENEMY_SPAWN = "enemy_spawn"
    ENEMY_MOVE = "enemy_move"
    BOSS_SPAWN = "boss_spawn"
    BOSS_MOVE = "boss_move"
    BOSS_BULLET_MOVE = "boss_bullet_move"
    PLAYER_BULLET_MOVE = "player_bullet_move"
    PLAYER_FIRE = "player_fire"
    PLAYER_MOVE = "player_move"
    MENU_INPUT = "menu_input"
    HIT_EFFECT = "hit_effect"
    INVINCIBILITY = "invincibility"
    LEVEL_UP_HOLD = "level_up_hold"
    LEVEL_UP_BLINK = "level_up_blink"


# restarted whenever play (re)starts so no adversary arrives instantly
SPAWN_AND_MOVE_TIMERS = (
    Timer.METEOR_SPAWN,
    Timer.METEOR_MOVE,
    Timer.ENEMY_SPAWN,
    Timer.ENEMY_MOVE,
    Timer.BOSS_SPAWN,
    Timer.BOSS_MOVE,
    Timer.BOSS_BULLET_MOVE,
    Timer.PLAYER_BULLET_MOVE,
)


class ClockSet:
    """
    Independent stopwatches keyed by name.

    Clocks do not share a phase: restarting one never touches another.
    """

    def __init__(
        self,
        time_source: TimeSource = time.monotonic,
        names: Iterable[str] = tuple(Timer),
    ):
        """
        :param time_source: Returns monotonic seconds
        :type time_source: Callable[[], float]

        :param names: Clock names to create
        :type names: Iterable[str]
        """
        self._now = time_source
        start = self._now()
        self._started = {name: start for name in names}

    def elapsed(self, name: str) -> float:
        """
        Seconds since the clock was last restarted

        :raise KeyError: If there is no clock with that name
        """
        return self._now() - self._started[name]

    def elapsed_ms(self, name: str) -> int:
        return int(self.elapsed(name) * 1000)

    def restart(self, *names: str):
        now = self._now()
        for name in names:
            if name not in self._started:
                raise KeyError(name)
            self._started[name] = now

    def restart_all(self):
        self.restart(*self._started)

    def __contains__(self, name: str) -> bool:
        return name in self._started
