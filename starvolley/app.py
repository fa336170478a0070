"""The game window: a pygame renderer and the main loop."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from starvolley.geometry import WIN_HEIGHT, WIN_WIDTH, Rect
from starvolley.keyboard import Key
from starvolley.stage import Stage
from starvolley.world import Sprite, World

WINDOW_TITLE = "TITLE"
BACKGROUND_COLOR = (0, 0, 0)
FRAME_WAIT_MS = 16

_KEY_CODES = {
    Key.LEFT: pygame.K_LEFT,
    Key.RIGHT: pygame.K_RIGHT,
    Key.SPACE: pygame.K_SPACE,
    Key.ESCAPE: pygame.K_ESCAPE,
}


class PygameRenderer:
    """Draws sprites from an assets directory onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, assets_dir: str | Path = "Assets") -> None:
        self.surface = surface
        self.assets_dir = Path(assets_dir)
        self._cache: dict[str, pygame.Surface | None] = {}

    def _load(self, image: Sprite) -> pygame.Surface | None:
        if image.path not in self._cache:
            try:
                sheet = pygame.image.load(str(self.assets_dir / image.path))
            except (pygame.error, OSError):
                sheet = None
            self._cache[image.path] = sheet
        return self._cache[image.path]

    def draw_image(
        self, image: Sprite, rect: Rect, frame: int = 0, alpha: int = 255
    ) -> None:
        """Draw one frame of ``image`` over ``rect``; images that fail to load are skipped."""
        sheet = self._load(image)
        if sheet is None:
            return
        if not 0 <= frame < image.frame_count:
            raise IndexError(f"frame {frame} out of range for {image.path}")
        cell_w = sheet.get_width() // image.columns
        cell_h = sheet.get_height() // image.rows
        row, col = divmod(frame, image.columns)
        cell = sheet.subsurface((col * cell_w, row * cell_h, cell_w, cell_h))
        size = (max(0, round(rect.width)), max(0, round(rect.height)))
        scaled = pygame.transform.scale(cell, size)
        if alpha < 255:
            scaled.set_alpha(alpha)
        self.surface.blit(scaled, (int(rect.x), int(rect.y)))


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="starvolley", description="A small space shooter.")
    parser.add_argument("--assets", default="Assets", help="directory holding the images")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = PygameRenderer(screen, args.assets)
        world = World()
        Stage(world)

        previous = pygame.time.get_ticks()
        while True:
            screen.fill(BACKGROUND_COLOR)
            state = pygame.key.get_pressed()
            world.keyboard.update(key for key, code in _KEY_CODES.items() if state[code])

            now = pygame.time.get_ticks()
            world.step((now - previous) / 1000.0, renderer)

            pygame.display.flip()
            pygame.time.wait(FRAME_WAIT_MS)
            previous = now

            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            if pygame.key.get_pressed()[pygame.K_ESCAPE]:
                break
    finally:
        pygame.quit()
    return 0