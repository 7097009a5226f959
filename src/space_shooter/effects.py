"""
Hit-flash effect pool
"""

from __future__ import annotations

from typing import Iterator

from space_shooter.constants import HIT_EFFECT_DURATION, MAX_HIT_EFFECTS
from space_shooter.entities import HitEffect
from space_shooter.utils import logger


class EffectPool:
    """
    Fixed number of hit-effect slots.

    A slot is active while its timer is below the effect lifetime. When all
    slots are busy new effects are dropped.
    """

    def __init__(
        self,
        capacity: int = MAX_HIT_EFFECTS,
        lifetime: float = HIT_EFFECT_DURATION,
    ):
        self.capacity = capacity
        self.lifetime = lifetime
        self._slots = [HitEffect() for _ in range(capacity)]

    def activate(self, row: int, col: int) -> bool:
        """
        Start an effect at (row, col) in the first free slot

        :return: False if the pool was full and the effect was dropped
        :rtype: bool
        """
        for slot in self._slots:
            if not slot.active:
                slot.row = row
                slot.col = col
                slot.timer = 0.0
                slot.active = True
                return True
        logger.debug(f"Effect pool full, dropped hit at ({row}, {col})")
        return False

    def advance(self, dt: float):
        for slot in self._slots:
            if not slot.active:
                continue
            slot.timer += dt
            if slot.timer >= self.lifetime:
                slot.active = False

    def clear(self):
        for slot in self._slots:
            slot.active = False
            slot.timer = 0.0

    def active(self) -> Iterator[HitEffect]:
        return (slot for slot in self._slots if slot.active)

    def active_count(self) -> int:
        return sum(1 for _ in self.active())
