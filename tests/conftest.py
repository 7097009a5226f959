"""
Shared fixtures: a hand-driven clock and keyboard.
"""

from __future__ import annotations

import random

import pytest
from mini_arcade_core.backend.keys import Key
from mini_arcade_core.runtime.input_frame import InputFrame

from space_shooter import progression
from space_shooter.clocks import ClockSet
from space_shooter.input_gate import InputGate
from space_shooter.world import ShooterWorld


class FakeTime:
    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class FakeKeyboard:
    def __init__(self):
        self.held: set[Key] = set()

    def press(self, *keys: Key):
        self.held.update(keys)

    def release(self, *keys: Key):
        self.held.difference_update(keys)

    def release_all(self):
        self.held.clear()

    def frame(self, dt: float = 0.05) -> InputFrame:
        """Snapshot of the held keys, as the game loop hands it to a scene."""
        return InputFrame(
            frame_index=0, dt=dt, keys_down=frozenset(self.held)
        )


@pytest.fixture
def fake_time() -> FakeTime:
    return FakeTime()


@pytest.fixture
def keyboard() -> FakeKeyboard:
    return FakeKeyboard()


@pytest.fixture
def world(fake_time: FakeTime) -> ShooterWorld:
    """A world sitting at the main menu."""
    return ShooterWorld(
        clocks=ClockSet(time_source=fake_time), rng=random.Random(1234)
    )


@pytest.fixture
def playing(world: ShooterWorld) -> ShooterWorld:
    """A fresh game at level 1, Player at (22, 7)."""
    progression.reset_game(world)
    return world


@pytest.fixture
def gate(keyboard: FakeKeyboard, world: ShooterWorld) -> InputGate:
    return InputGate(keyboard.held, world.clocks)
