"""
Space Shooter Scene
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.engine.commands import QuitCommand
from mini_arcade_core.scenes.autoreg import register_scene
from mini_arcade_core.scenes.sim_scene import (
    BaseIntent,
    BaseTickContext,
    DrawCall,
    SimScene,
)
from mini_arcade_core.scenes.systems.builtins import (
    BaseInputSystem,
    BaseRenderSystem,
)
from mini_arcade_core.scenes.systems.system_pipeline import SystemPipeline

from space_shooter import lifecycle, progression
from space_shooter.clocks import Timer
from space_shooter.constants import (
    IMAGES_DIR,
    INVINCIBILITY_DURATION,
    PLAYER_ROW,
    WINDOW_SIZE,
)
from space_shooter.entities import Cell, GameState
from space_shooter.input_gate import InputGate
from space_shooter.mover import Mover, make_movers
from space_shooter.render import (
    OVERLAY_TEXTURE,
    Sprite,
    overlay_pixel,
    render_frame,
)
from space_shooter.spawner import Spawner, make_spawners
from space_shooter.utils import find_assets_root, logger
from space_shooter.world import ShooterWorld


@dataclass
class ShooterIntent(BaseIntent):
    """
    Space Shooter Intent
    """

    gate: InputGate


@dataclass
class ShooterTickContext(BaseTickContext[ShooterWorld, ShooterIntent]):
    """
    Space Shooter Tick Context
    """


class PlayingOnly:
    """Mixin for systems that only run while the state is Playing."""

    def enabled(self, ctx: ShooterTickContext) -> bool:
        return ctx.world.state is GameState.PLAYING


@dataclass
class ShooterInputSystem(BaseInputSystem):
    """
    Read the held keys, then handle menus, pause and back keys.
    """

    name: str = "shooter_input"

    def step(self, ctx: ShooterTickContext):
        """Process input and update intent."""
        w = ctx.world
        ctx.intent = ShooterIntent(
            gate=InputGate(ctx.input_frame.keys_down, w.clocks)
        )
        lifecycle.handle_input(w, ctx.intent.gate)

        if not w.running and ctx.commands is not None:
            ctx.commands.push(QuitCommand())


@dataclass
class LevelUpSystem:
    name: str = "shooter_level_up"
    order: int = 15

    def enabled(self, ctx: ShooterTickContext) -> bool:
        return ctx.world.state is GameState.LEVEL_UP

    def step(self, ctx: ShooterTickContext):
        lifecycle.update_level_up(ctx.world)


@dataclass
class PlayerMoveSystem(PlayingOnly):
    """
    Move the ship one column left or right.
    """

    name: str = "shooter_player_move"
    order: int = 20

    def step(self, ctx: ShooterTickContext):
        w = ctx.world
        gate = ctx.intent.gate
        direction = gate.move_direction()
        if direction == 0:
            return

        col = w.player_col + direction
        if not 0 <= col < w.grid.cols:
            return

        w.place_player(col)
        gate.moved()
        logger.debug(f"Moved to column {col}")


@dataclass
class PlayerFireSystem(PlayingOnly):
    """
    Fire a bullet into the cell directly above the ship.
    """

    name: str = "shooter_player_fire"
    order: int = 25

    def step(self, ctx: ShooterTickContext):
        if not ctx.intent.gate.fire():
            return

        w = ctx.world
        row = PLAYER_ROW - 1
        if w.grid.read(row, w.player_col) is Cell.EMPTY:
            w.grid.write(row, w.player_col, Cell.PLAYER_BULLET)
            logger.debug(f"Bullet fired from column {w.player_col}")


@dataclass
class SpawnSystem(PlayingOnly):
    spawner: Spawner
    name: str = "shooter_spawn"
    order: int = 30

    def step(self, ctx: ShooterTickContext):
        self.spawner.update(ctx.world)


@dataclass
class MoveSystem(PlayingOnly):
    mover: Mover
    name: str = "shooter_move"
    order: int = 40

    def step(self, ctx: ShooterTickContext):
        self.mover.update(ctx.world)


@dataclass
class EffectsSystem(PlayingOnly):
    name: str = "shooter_effects"
    order: int = 90

    def step(self, ctx: ShooterTickContext):
        clocks = ctx.world.clocks
        dt = clocks.elapsed(Timer.HIT_EFFECT)
        clocks.restart(Timer.HIT_EFFECT)
        ctx.world.effects.advance(dt)


@dataclass
class InvincibilitySystem(PlayingOnly):
    name: str = "shooter_invincibility"
    order: int = 95
    duration: float = INVINCIBILITY_DURATION

    def step(self, ctx: ShooterTickContext):
        progression.expire_invincibility(ctx.world, self.duration)


@dataclass
class ShooterRenderSystem(BaseRenderSystem):
    """
    Render the Space Shooter world.
    """

    name: str = "shooter_render"
    order: int = 100

    def step(self, ctx: ShooterTickContext):
        """Render the Space Shooter world."""
        ctx.draw_ops = [
            DrawCall(drawable, ctx=ctx) for drawable in render_frame(ctx.world)
        ]
        super().step(ctx)


def default_systems(world: ShooterWorld) -> list:
    systems = [
        ShooterInputSystem(),
        LevelUpSystem(),
        PlayerMoveSystem(),
        PlayerFireSystem(),
        EffectsSystem(),
        InvincibilitySystem(),
        ShooterRenderSystem(),
    ]
    for i, spawner in enumerate(make_spawners(world.rng)):
        systems.append(
            SpawnSystem(
                spawner=spawner,
                name=f"shooter_spawn_{spawner.cell.value}",
                order=30 + i,
            )
        )
    for i, mover in enumerate(make_movers()):
        systems.append(
            MoveSystem(
                mover=mover,
                name=f"shooter_move_{mover.cell.value}",
                order=40 + i,
            )
        )
    return systems


@register_scene("space_shooter")
class ShooterScene(SimScene[ShooterTickContext]):
    """
    Grid shooter scene: one world, systems run in order once per frame.
    """

    world: ShooterWorld
    _tex_cache: dict[str, int]
    tick_context_type = ShooterTickContext

    def on_enter(self):
        """
        Load every sprite and start at the main menu.

        :raises AssetError: If the assets directory cannot be found.
        """
        self.start(ShooterWorld())

        images = find_assets_root() / IMAGES_DIR
        for sprite in Sprite:
            self.world.textures[sprite] = self._tex(str(images / sprite.value))
        self.world.textures[OVERLAY_TEXTURE] = (
            self.context.services.render.backend.render.create_texture_rgba(
                1, 1, overlay_pixel()
            )
        )

    def start(self, world: ShooterWorld):
        """Attach a world and build the system pipeline for it."""
        self.world = world
        self.systems = SystemPipeline()
        self.systems.extend(default_systems(world))

    def system(self, name: str):
        """
        :raise KeyError: If no system has that name
        """
        for s in self.systems.systems:
            if s.name == name:
                return s
        raise KeyError(name)

    def tick(self, input_frame, dt):
        # the engine sets its default 800x600 canvas after the first on_enter
        window = self.context.services.window
        if window.get_virtual_size() != WINDOW_SIZE:
            window.set_virtual_resolution(*WINDOW_SIZE)
        return super().tick(input_frame, dt)

    def _get_tick_context(self, input_frame, dt) -> ShooterTickContext:
        return ShooterTickContext(
            input_frame=input_frame,
            dt=dt,
            world=self.world,
            commands=self.context.command_queue,
        )

    def _tex(self, path: str) -> int:
        if not hasattr(self, "_tex_cache"):
            self._tex_cache = {}
        if path not in self._tex_cache:
            self._tex_cache[path] = self._load_texture(path)
        return self._tex_cache[path]
