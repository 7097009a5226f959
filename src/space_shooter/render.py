"""
Renderer bridge

Maps the world to a flat list of drawables for the backend. Nothing here
keeps state between frames; all positions are derived from the play field
rectangle.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Literal

from mini_arcade_core.backend import Backend
from mini_arcade_core.scenes.sim_scene import Drawable

from space_shooter.clocks import Timer
from space_shooter.constants import (
    BLACK,
    CELL_SIZE,
    COLS,
    CYAN,
    GRAY,
    GREEN,
    INVINCIBLE_BLINK_MS,
    MARGIN,
    PAUSE_OVERLAY,
    PLAYER_ROW,
    RED,
    ROWS,
    WHITE,
    WINDOW_SIZE,
    YELLOW,
)
from space_shooter.entities import Cell, GameState
from space_shooter.world import ShooterWorld

if TYPE_CHECKING:
    from space_shooter.scenes.shooter import ShooterTickContext

Color = tuple[int, ...]
Align = Literal["left", "center"]

# texture key of the translucent shade; colours with alpha are drawn with it
OVERLAY_TEXTURE = "overlay"



class Sprite(str, Enum):
    """Images under assets/images, by file name."""

    PLAYER = "player.png"
    LIFE = "life.png"
    BACKGROUND = "backgroundColor.png"
    METEOR = "meteorSmall.png"
    ENEMY = "enemyUFO.png"
    BOSS = "enemyShip.png"
    PLAYER_BULLET = "laserRed.png"
    PLAYER_BULLET_HIT = "laserRedShot.png"
    BOSS_BULLET = "laserGreen.png"
    BOSS_BULLET_HIT = "laserGreenShot.png"
    STARS = "starBackground.png"


BULLET_WIDTH = int(CELL_SIZE * 0.3)
BULLET_HEIGHT = int(CELL_SIZE * 0.8)
BULLET_OFFSET = (CELL_SIZE - BULLET_WIDTH) // 2

SPRITE_SIZES: dict[Sprite, tuple[int, int]] = {
    Sprite.PLAYER: (CELL_SIZE, CELL_SIZE),
    Sprite.LIFE: (24, 24),
    Sprite.BACKGROUND: (COLS * CELL_SIZE, ROWS * CELL_SIZE),
    Sprite.METEOR: (CELL_SIZE, CELL_SIZE),
    Sprite.ENEMY: (CELL_SIZE, CELL_SIZE),
    Sprite.BOSS: (CELL_SIZE, CELL_SIZE),
    Sprite.PLAYER_BULLET: (BULLET_WIDTH, BULLET_HEIGHT),
    Sprite.PLAYER_BULLET_HIT: (CELL_SIZE, CELL_SIZE),
    Sprite.BOSS_BULLET: (BULLET_WIDTH, BULLET_HEIGHT),
    Sprite.BOSS_BULLET_HIT: (CELL_SIZE, CELL_SIZE),
    Sprite.STARS: WINDOW_SIZE,
}

CELL_SPRITES: dict[Cell, Sprite] = {
    Cell.PLAYER: Sprite.PLAYER,
    Cell.METEOR: Sprite.METEOR,
    Cell.PLAYER_BULLET: Sprite.PLAYER_BULLET,
    Cell.ENEMY: Sprite.ENEMY,
    Cell.BOSS: Sprite.BOSS,
    Cell.BOSS_BULLET: Sprite.BOSS_BULLET,
}


# drawn when a sprite has no texture loaded
FALLBACK_COLORS: dict[Sprite, Color] = {
    Sprite.BACKGROUND: BLACK,
    Sprite.STARS: BLACK,
    Sprite.METEOR: GRAY,
    Sprite.ENEMY: RED,
    Sprite.BOSS: RED,
    Sprite.BOSS_BULLET: GREEN,
    Sprite.LIFE: RED,
}


@dataclass(frozen=True)
class DrawSprite(Drawable):
    """
    Drawable sprite, scaled to its fixed size.
    """

    sprite: Sprite
    x: float
    y: float

    def draw(self, backend: Backend, ctx: ShooterTickContext):
        w, h = SPRITE_SIZES[self.sprite]
        tex = ctx.world.textures.get(self.sprite)
        if tex is not None:
            backend.render.draw_texture(
                tex, int(self.x), int(self.y), int(w), int(h)
            )
        else:
            backend.render.draw_rect(
                int(self.x),
                int(self.y),
                int(w),
                int(h),
                color=FALLBACK_COLORS.get(self.sprite, WHITE),
            )


@dataclass(frozen=True)
class DrawText(Drawable):
    """
    Drawable text line.
    """

    text: str
    x: float
    y: float
    size: int
    color: Color = WHITE
    # "center" means x is the horizontal centre of the text
    align: Align = "left"

    def draw(self, backend: Backend, ctx: ShooterTickContext):
        x = self.x
        if self.align == "center":
            w, _ = backend.text.measure(self.text, font_size=self.size)
            x -= w / 2.0
        backend.text.draw(
            int(x),
            int(self.y),
            self.text,
            color=self.color,
            font_size=self.size,
        )


@dataclass(frozen=True)
class DrawRect(Drawable):
    """
    Drawable rectangle, filled or outlined.
    """

    x: float
    y: float
    width: float
    height: float
    color: Color
    # 0 fills; otherwise draw only an outline this thick
    outline: int = 0

    def draw(self, backend: Backend, ctx: ShooterTickContext):
        x, y = int(self.x), int(self.y)
        w, h = int(self.width), int(self.height)
        if self.outline == 0:
            self._fill(backend, ctx, x, y, w, h)
            return

        t = self.outline
        self._fill(backend, ctx, x, y, w, t)
        self._fill(backend, ctx, x, y + h - t, w, t)
        self._fill(backend, ctx, x, y, t, h)
        self._fill(backend, ctx, x + w - t, y, t, h)

    # pylint: disable=too-many-arguments,too-many-positional-arguments
    def _fill(
        self,
        backend: Backend,
        ctx: ShooterTickContext,
        x: int,
        y: int,
        w: int,
        h: int,
    ):
        shade = ctx.world.textures.get(OVERLAY_TEXTURE)
        if len(self.color) == 4 and shade is not None:
            backend.render.draw_texture(shade, x, y, w, h)
        else:
            backend.render.draw_rect(x, y, w, h, color=self.color)

    # pylint: enable=too-many-arguments,too-many-positional-arguments


def overlay_pixel() -> bytes:
    """One RGBA pixel of the pause shade, stretched over the field."""
    return bytes(PAUSE_OVERLAY)



@dataclass(frozen=True)
class Layout:
    """
    Pixel geometry of the window, derived from the grid dimensions.
    """

    rows: int = ROWS
    cols: int = COLS
    cell: int = CELL_SIZE
    margin: int = MARGIN
    window: tuple[int, int] = WINDOW_SIZE

    @property
    def field_width(self) -> int:
        return self.cols * self.cell

    @property
    def field_height(self) -> int:
        return self.rows * self.cell

    @property
    def field_center(self) -> tuple[float, float]:
        return (
            self.margin + self.field_width / 2.0,
            self.margin + self.field_height / 2.0,
        )

    @property
    def panel_x(self) -> int:
        return self.margin + self.field_width + 20

    @property
    def window_center_x(self) -> float:
        return self.window[0] / 2.0

    def cell_origin(self, row: int, col: int) -> tuple[int, int]:
        return self.margin + col * self.cell, self.margin + row * self.cell


LAYOUT = Layout()

NAV_HINT = "Use UP/DOWN or W/S to navigate  |  ENTER to select"


def player_visible(world: ShooterWorld) -> bool:
    """The Player blinks every 100 ms while invincible."""
    if not world.hud.invincible:
        return True
    elapsed_ms = world.clocks.elapsed_ms(Timer.INVINCIBILITY)
    return (elapsed_ms // INVINCIBLE_BLINK_MS) % 2 == 0


def _cell_sprite(
    cell: Cell, row: int, col: int, layout: Layout
) -> DrawSprite:
    x, y = layout.cell_origin(row, col)
    if cell in (Cell.PLAYER_BULLET, Cell.BOSS_BULLET):
        x += BULLET_OFFSET
    return DrawSprite(CELL_SPRITES[cell], x, y)


def draw_field(layout: Layout) -> list[Drawable]:
    x, y = layout.cell_origin(0, 0)
    return [
        DrawSprite(Sprite.BACKGROUND, x, y),
        DrawRect(
            x, y, layout.field_width, layout.field_height, BLACK, outline=5
        ),
    ]


def draw_grid(
    world: ShooterWorld, layout: Layout, blink: bool = True
) -> list[Drawable]:
    ops: list[Drawable] = []
    show_player = player_visible(world) if blink else True
    for r, c, cell in world.grid:
        if cell is Cell.EMPTY:
            continue
        if cell is Cell.PLAYER and not show_player:
            continue
        ops.append(_cell_sprite(cell, r, c, layout))
    return ops


def draw_effects(world: ShooterWorld, layout: Layout) -> list[Drawable]:
    return [
        DrawSprite(Sprite.PLAYER_BULLET_HIT, *layout.cell_origin(e.row, e.col))
        for e in world.effects.active()
    ]


def draw_hud(
    world: ShooterWorld, layout: Layout, full: bool = True
) -> list[Drawable]:
    px = layout.panel_x
    top = layout.margin
    ops: list[Drawable] = [
        DrawText("Space  Shooter  Game", px, top, 28, YELLOW),
    ]
    if full:
        ops.append(DrawText("Lives:", px, top + 150, 20))
        ops.extend(
            DrawSprite(Sprite.LIFE, px + 80 + i * 28, top + 150)
            for i in range(world.hud.lives)
        )
        ops.append(DrawText(f"Score: {world.hud.score}", px, top + 200, 20))
    ops.append(DrawText(f"Level: {world.hud.level}", px, top + 250, 20))
    return ops


def draw_menu_items(
    world: ShooterWorld, cx: float, top: float
) -> list[Drawable]:
    ops: list[Drawable] = []
    for i, item in enumerate(world.menu):
        color = YELLOW if i == world.cursor else WHITE
        ops.append(
            DrawText(item.value, cx, top + i * 56, 28, color, "center")
        )
    return ops


def _title_screen(
    world: ShooterWorld,
    layout: Layout,
    title: str,
    color: Color,
    items_top: int,
) -> list[Drawable]:
    cx = layout.window_center_x
    return [
        DrawSprite(Sprite.STARS, 0, 0),
        DrawText(title, cx, 100, 40, color, "center"),
        *draw_menu_items(world, cx, items_top),
        DrawText(NAV_HINT, cx, layout.window[1] - 80, 18, GRAY, "center"),
    ]


def render_menu(world: ShooterWorld, layout: Layout) -> list[Drawable]:
    return _title_screen(world, layout, "SPACE SHOOTER", YELLOW, 260)


def render_game_over(
    world: ShooterWorld, layout: Layout
) -> list[Drawable]:
    return _title_screen(world, layout, "GAME OVER", RED, 300)


def render_victory(world: ShooterWorld, layout: Layout) -> list[Drawable]:
    return _title_screen(world, layout, "VICTORY!", YELLOW, 300)


INSTRUCTIONS_LEGEND: tuple[tuple[Sprite, str], ...] = (
    (Sprite.PLAYER, "Your Ship"),
    (Sprite.METEOR, "Meteor - Avoid!"),
    (Sprite.ENEMY, "Enemy - 1 Point"),
    (Sprite.BOSS, "Boss - 3 Points (Level 3+)"),
    (Sprite.PLAYER_BULLET, "Your Bullet"),
    (Sprite.BOSS_BULLET, "Boss Bullet - Avoid!"),
    (Sprite.LIFE, "Life Icon"),
)

INSTRUCTIONS_CONTROLS = (
    "Move Left/Right: A/D or Arrow Keys",
    "Shoot: SPACEBAR",
    "Pause: P",
)

INSTRUCTIONS_OBJECTIVES = (
    "- Destroy enemies and bosses to score points",
    "- Each level requires (Level x 10) points",
    "- Complete Level 5 to win!",
    "- You have 3 lives. Don't let enemies escape!",
)


def render_instructions(
    world: ShooterWorld, layout: Layout
) -> list[Drawable]:
    cx = layout.window_center_x
    ops: list[Drawable] = [
        DrawSprite(Sprite.STARS, 0, 0),
        DrawText("HOW TO PLAY", cx, 40, 40, YELLOW, "center"),
        DrawText("CONTROLS", 50, 100, 24, CYAN),
    ]
    ops.extend(
        DrawText(line, 50, 140 + i * 30, 18)
        for i, line in enumerate(INSTRUCTIONS_CONTROLS)
    )

    ops.append(DrawText("ENTITIES", 50, 250, 24, CYAN))
    for i, (sprite, label) in enumerate(INSTRUCTIONS_LEGEND):
        y = 285 + i * 40
        x = 60
        if sprite in (Sprite.PLAYER_BULLET, Sprite.BOSS_BULLET):
            x += BULLET_OFFSET
        elif sprite is Sprite.LIFE:
            x += 8
        ops.append(DrawSprite(sprite, x, y))
        ops.append(DrawText(label, 120, y + 5, 18))

    ops.append(DrawText("OBJECTIVE", 50, 580, 24, CYAN))
    ops.extend(
        DrawText(line, 50, 620 + i * 30, 18)
        for i, line in enumerate(INSTRUCTIONS_OBJECTIVES)
    )
    ops.append(
        DrawText(
            "Press ESC or BACKSPACE to return to menu",
            cx,
            layout.window[1] - 80,
            18,
            GRAY,
            "center",
        )
    )
    return ops


def render_playing(world: ShooterWorld, layout: Layout) -> list[Drawable]:
    return [
        *draw_field(layout),
        *draw_grid(world, layout),
        *draw_effects(world, layout),
        *draw_hud(world, layout),
    ]


def render_level_up(
    world: ShooterWorld, layout: Layout
) -> list[Drawable]:
    cx, cy = layout.field_center
    ops: list[Drawable] = [
        *draw_field(layout),
        DrawSprite(
            Sprite.PLAYER, *layout.cell_origin(PLAYER_ROW, world.player_col)
        ),
    ]
    if world.level_up_blink:
        ops.append(DrawText("LEVEL UP!", cx, cy - 30, 40, GREEN, "center"))
    ops.extend(draw_hud(world, layout, full=False))
    return ops


def render_paused(world: ShooterWorld, layout: Layout) -> list[Drawable]:
    cx, cy = layout.field_center
    x, y = layout.cell_origin(0, 0)
    return [
        *draw_field(layout),
        *draw_grid(world, layout, blink=False),
        DrawRect(x, y, layout.field_width, layout.field_height, PAUSE_OVERLAY),
        DrawText("PAUSED", cx, cy - 200, 40, CYAN, "center"),
        *draw_menu_items(world, cx, cy - 50),
    ]


SCREENS: dict[
    GameState, Callable[[ShooterWorld, Layout], list[Drawable]]
] = {
    GameState.MENU: render_menu,
    GameState.INSTRUCTIONS: render_instructions,
    GameState.PLAYING: render_playing,
    GameState.LEVEL_UP: render_level_up,
    GameState.PAUSED: render_paused,
    GameState.GAME_OVER: render_game_over,
    GameState.VICTORY: render_victory,
}


def render_frame(
    world: ShooterWorld, layout: Layout = LAYOUT
) -> list[Drawable]:
    """
    Drawables for one frame of the current state

    The backend clears to the renderer background colour before these run.

    :param world: The world to draw
    :type world: ShooterWorld

    :param layout: Window geometry
    :type layout: Layout

    :return: Drawables in paint order
    :rtype: list[Drawable]
    """
    return SCREENS[world.state](world, layout)
