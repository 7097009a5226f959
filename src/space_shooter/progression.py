"""
Scoring, lives and level progression
"""

from __future__ import annotations

from space_shooter.clocks import SPAWN_AND_MOVE_TIMERS, Timer
from space_shooter.constants import (
    MAX_LEVEL,
    MAX_LIVES,
    POINTS_PER_LEVEL,
    PLAYER_START_COL,
)
from space_shooter.entities import Cell, GameState
from space_shooter.utils import logger
from space_shooter.world import ShooterWorld


def points_needed(level: int) -> int:
    return level * POINTS_PER_LEVEL


def award(world: ShooterWorld, points: int):
    """
    Add points for a destruction and check level-up / victory

    :param world: The world to update
    :type world: ShooterWorld

    :param points: Points earned (may be 0)
    :type points: int
    """
    if points <= 0:
        return
    hud = world.hud
    hud.score += points
    logger.debug(f"+{points} point(s). Score: {hud.score}")

    if hud.score < points_needed(hud.level):
        return
    if hud.level < MAX_LEVEL:
        level_up(world)
    else:
        victory(world)


def level_up(world: ShooterWorld):
    hud = world.hud
    hud.level += 1
    hud.score = 0
    world.boss_fire_counter = 0
    world.grid.clear_where(lambda cell: cell is not Cell.PLAYER)
    world.place_player(PLAYER_START_COL)

    world.state = GameState.LEVEL_UP
    world.level_up_blink = True
    world.clocks.restart(Timer.LEVEL_UP_HOLD, Timer.LEVEL_UP_BLINK)
    logger.info(f"Level Up! Now at Level {hud.level}")


def finish_level_up(world: ShooterWorld):
    """Resume play after the level-up hold."""
    world.state = GameState.PLAYING
    world.clocks.restart(*SPAWN_AND_MOVE_TIMERS)


def victory(world: ShooterWorld):
    end_play(world, GameState.VICTORY)
    logger.info("Victory! Game Complete!")


def game_over(world: ShooterWorld):
    end_play(world, GameState.GAME_OVER)
    logger.info("Game Over!")


def end_play(world: ShooterWorld, state: GameState):
    """Leave play for a menu-class state; the grid holds nothing there."""
    world.state = state
    world.cursor = 0
    world.grid.clear()
    world.effects.clear()


def damage_player(world: ShooterWorld, cause: Cell, escaped: bool = False):
    """
    Take one life from the Player

    Collisions are ignored while invincible; escapes always cost a life.

    :param cause: Kind of adversary responsible
    :type cause: Cell

    :param escaped: True if the adversary left the bottom of the grid
    :type escaped: bool
    """
    hud = world.hud
    if hud.invincible and not escaped:
        return

    hud.lives = max(0, hud.lives - 1)
    hud.invincible = True
    world.clocks.restart(Timer.INVINCIBILITY)
    if escaped:
        logger.info(f"{cause.name} escaped! Lives remaining: {hud.lives}")
    else:
        logger.info(f"{cause.name} hit the ship! Lives remaining: {hud.lives}")

    if hud.lives == 0:
        game_over(world)


def expire_invincibility(world: ShooterWorld, duration: float) -> bool:
    hud = world.hud
    if not hud.invincible:
        return False
    if world.clocks.elapsed(Timer.INVINCIBILITY) >= duration:
        hud.invincible = False
        logger.debug("Invincibility ended")
        return True
    return False


def reset_game(world: ShooterWorld):
    """Fresh game at level 1 with full lives."""
    hud = world.hud
    hud.lives = MAX_LIVES
    hud.level = 1
    reset_level(world)
    world.clocks.restart_all()


def reset_level(world: ShooterWorld):
    """Empty the field and zero the score, keeping level and lives."""
    world.hud.score = 0
    world.hud.invincible = False
    world.boss_fire_counter = 0
    world.grid.clear()
    world.effects.clear()
    world.player_col = PLAYER_START_COL
    world.place_player(PLAYER_START_COL)
    world.state = GameState.PLAYING
    world.clocks.restart(*SPAWN_AND_MOVE_TIMERS)
