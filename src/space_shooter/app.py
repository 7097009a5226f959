"""
Main application for Space Shooter using mini-arcade-core and the pygame
backend.
"""

from __future__ import annotations

import sys

import pygame
from mini_arcade_core import (  # pyright: ignore[reportMissingImports]
    GameConfig,
    SceneRegistry,
    run_game,
)

# Justification: in editable installs, this module is provided by the package.
# pylint: disable=no-name-in-module
from mini_arcade_pygame_backend import (  # pyright: ignore[reportMissingImports]
    PygameBackend,
    PygameBackendSettings,
)

from space_shooter.constants import (
    BACKGROUND,
    FONT_PATH,
    FPS,
    TITLE,
    WINDOW_SIZE,
)
from space_shooter.utils import AssetError, find_assets_root, logger

# pylint: enable=no-name-in-module

INITIAL_SCENE = "space_shooter"


def build_settings() -> PygameBackendSettings:
    """
    Backend settings for the game window and font.

    :raises AssetError: If the assets directory or the font is missing.
    """
    font_path = find_assets_root() / FONT_PATH
    if not font_path.is_file():
        raise AssetError(f"Font not found: {font_path}")

    w_width, w_height = WINDOW_SIZE

    settings_data = {
        "window": {
            "width": w_width,
            "height": w_height,
            "title": TITLE,
            "high_dpi": False,
            "resizable": False,
        },
        "renderer": {"background_color": BACKGROUND},
        "fonts": [{"name": "default", "path": str(font_path), "size": 20}],
        "audio": {
            "enable": False,
        },
    }
    return PygameBackendSettings.from_dict(settings_data)


def run():
    """
    Main entry point for Space Shooter.

    - Auto-discovers scenes from the `space_shooter.scenes` package.
    - Configures the pygame backend with the game window and font.
    - Runs the game with the initial scene set to "space_shooter" until
      the window is closed or "Exit" is selected.

    :raises AssetError: If the assets directory or the font is missing.
    """
    scene_registry = SceneRegistry(_factories={}).discover(
        "space_shooter.scenes", "mini_arcade_core.scenes"
    )

    backend_settings = build_settings()
    backend = PygameBackend(settings=backend_settings)

    game_config = GameConfig(
        initial_scene=INITIAL_SCENE,
        fps=FPS,
        backend=backend,
    )
    logger.info("Starting Space Shooter...")
    logger.info(backend_settings.to_dict())
    try:
        run_game(game_config=game_config, scene_registry=scene_registry)
    finally:
        # the window is opened by the game loop but never closed by it
        pygame.quit()


def main() -> int:
    try:
        run()
    except AssetError as e:
        logger.error(f"Startup failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
