"""
Game lifecycle state machine

Transitions are looked up in two dispatch tables: one keyed by
(state, selected menu item) for ENTER, one keyed by (state, action) for
the keys that act directly (P, ESC/BACKSPACE).
"""

from __future__ import annotations

from typing import Callable

from space_shooter import progression
from space_shooter.clocks import Timer
from space_shooter.constants import LEVEL_UP_BLINK, LEVEL_UP_HOLD
from space_shooter.entities import GameState, MenuItem
from space_shooter.input_gate import Action, InputGate
from space_shooter.utils import logger
from space_shooter.world import ShooterWorld

Transition = Callable[[ShooterWorld], None]

_MENU_KEYS = (Action.UP, Action.DOWN, Action.SELECT)

# actions each state listens for, in polling priority
ACCEPTED: dict[GameState, tuple[Action, ...]] = {
    GameState.MENU: _MENU_KEYS,
    GameState.INSTRUCTIONS: (Action.BACK,),
    GameState.PLAYING: (Action.PAUSE,),
    GameState.PAUSED: _MENU_KEYS + (Action.PAUSE,),
    GameState.GAME_OVER: _MENU_KEYS,
    GameState.VICTORY: _MENU_KEYS,
}


def start_game(world: ShooterWorld):
    progression.reset_game(world)
    logger.info("New game started")


def load_saved_game(world: ShooterWorld):
    logger.debug("Saved games are not supported")


def open_instructions(world: ShooterWorld):
    world.state = GameState.INSTRUCTIONS


def exit_game(world: ShooterWorld):
    world.running = False
    logger.info("Exit selected")


def back_to_menu(world: ShooterWorld):
    progression.end_play(world, GameState.MENU)


def pause(world: ShooterWorld):
    world.state = GameState.PAUSED
    world.cursor = 0
    logger.info("Game Paused")


def resume(world: ShooterWorld):
    world.state = GameState.PLAYING
    logger.info("Game Resumed")


def restart_level(world: ShooterWorld):
    progression.reset_level(world)
    logger.info(
        f"Game Restarted at Level {world.hud.level} "
        f"with {world.hud.lives} lives"
    )


SELECTIONS: dict[tuple[GameState, MenuItem], Transition] = {
    (GameState.MENU, MenuItem.START): start_game,
    (GameState.MENU, MenuItem.LOAD): load_saved_game,
    (GameState.MENU, MenuItem.INSTRUCTIONS): open_instructions,
    (GameState.MENU, MenuItem.EXIT): exit_game,
    (GameState.PAUSED, MenuItem.RESUME): resume,
    (GameState.PAUSED, MenuItem.RESTART): restart_level,
    (GameState.PAUSED, MenuItem.MAIN_MENU): back_to_menu,
    (GameState.GAME_OVER, MenuItem.RESTART): start_game,
    (GameState.GAME_OVER, MenuItem.MAIN_MENU): back_to_menu,
    (GameState.VICTORY, MenuItem.RESTART): start_game,
    (GameState.VICTORY, MenuItem.MAIN_MENU): back_to_menu,
}

SHORTCUTS: dict[tuple[GameState, Action], Transition] = {
    (GameState.INSTRUCTIONS, Action.BACK): back_to_menu,
    (GameState.PLAYING, Action.PAUSE): pause,
    (GameState.PAUSED, Action.PAUSE): resume,
}


def apply(world: ShooterWorld, action: Action):
    """
    Apply one accepted action to the current state

    :param world: The world to update
    :type world: ShooterWorld

    :param action: Action taken
    :type action: Action
    """
    if action is Action.UP:
        world.move_cursor(-1)
    elif action is Action.DOWN:
        world.move_cursor(1)
    elif action is Action.SELECT:
        transition = SELECTIONS.get((world.state, world.selected))
        if transition is not None:
            transition(world)
    else:
        transition = SHORTCUTS.get((world.state, action))
        if transition is not None:
            transition(world)


def handle_input(world: ShooterWorld, gate: InputGate) -> Action | None:
    """Poll the gate for the current state's actions and apply one."""
    allowed = ACCEPTED.get(world.state, ())
    if not allowed:
        return None
    action = gate.menu_action(allowed)
    if action is not None:
        apply(world, action)
    return action


def update_level_up(world: ShooterWorld):
    """Blink the overlay and return to play once the hold is over."""
    clocks = world.clocks
    if clocks.elapsed(Timer.LEVEL_UP_BLINK) >= LEVEL_UP_BLINK:
        world.level_up_blink = not world.level_up_blink
        clocks.restart(Timer.LEVEL_UP_BLINK)

    if clocks.elapsed(Timer.LEVEL_UP_HOLD) >= LEVEL_UP_HOLD:
        progression.finish_level_up(world)
