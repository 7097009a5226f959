"""
Cooldown-throttled keyboard polling
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Iterable

from mini_arcade_core.backend.keys import Key

from space_shooter.clocks import ClockSet, Timer
from space_shooter.constants import (
    MENU_COOLDOWN,
    PLAYER_FIRE_COOLDOWN,
    PLAYER_MOVE_COOLDOWN,
)


class Action(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    FIRE = "fire"
    PAUSE = "pause"
    UP = "up"
    DOWN = "down"
    SELECT = "select"
    BACK = "back"


KEY_BINDINGS: dict[Action, tuple[Key, ...]] = {
    Action.LEFT: (Key.LEFT, Key.A),
    Action.RIGHT: (Key.RIGHT, Key.D),
    Action.FIRE: (Key.SPACE,),
    Action.PAUSE: (Key.P,),
    Action.UP: (Key.UP, Key.W),
    Action.DOWN: (Key.DOWN, Key.S),
    Action.SELECT: (Key.ENTER,),
    Action.BACK: (Key.ESCAPE, Key.BACKSPACE),
}


@dataclass
class InputGate:
    """
    Reads the held keys of a frame and throttles actions with per-stream
    cooldowns.

    Menu navigation in every menu-class state shares one cooldown; player
    movement and firing each have their own. Actions fire while their key
    is held, not on the press edge, so holding a key repeats at the
    cooldown rate.
    """

    keys_down: AbstractSet[Key]
    clocks: ClockSet
    menu_cooldown: float = MENU_COOLDOWN
    move_cooldown: float = PLAYER_MOVE_COOLDOWN
    fire_cooldown: float = PLAYER_FIRE_COOLDOWN

    def held(self, action: Action) -> bool:
        return any(k in self.keys_down for k in KEY_BINDINGS[action])

    def menu_action(self, allowed: Iterable[Action]) -> Action | None:
        """
        First held action out of `allowed`, if the menu cooldown has passed

        Taking an action restarts the menu cooldown.

        :param allowed: Candidate actions in priority order
        :type allowed: Iterable[Action]

        :return: The action taken, or None
        :rtype: Action | None
        """
        if self.clocks.elapsed(Timer.MENU_INPUT) < self.menu_cooldown:
            return None
        for action in allowed:
            if self.held(action):
                self.clocks.restart(Timer.MENU_INPUT)
                return action
        return None

    def move_direction(self) -> int:
        """-1 for left, 1 for right, 0 when idle or cooling down."""
        if self.clocks.elapsed(Timer.PLAYER_MOVE) < self.move_cooldown:
            return 0
        if self.held(Action.LEFT):
            return -1
        if self.held(Action.RIGHT):
            return 1
        return 0

    def moved(self):
        self.clocks.restart(Timer.PLAYER_MOVE)

    def fire(self) -> bool:
        """True if fire is held and off cooldown; restarts the cooldown."""
        if not self.held(Action.FIRE):
            return False
        if self.clocks.elapsed(Timer.PLAYER_FIRE) < self.fire_cooldown:
            return False
        self.clocks.restart(Timer.PLAYER_FIRE)
        return True
