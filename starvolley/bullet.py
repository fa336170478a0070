"""Positioned sprites, pooled shots and the player's laser shot."""

from typing import ClassVar

from starvolley.geometry import Rect
from starvolley.world import GameObject, Renderer, Sprite, World

BULLET_SPRITE = Sprite("laserBlue031.png")
BULLET_WIDTH = 13
BULLET_HEIGHT = 33
BULLET_SPEED = 200.0


class Body(GameObject):
    """A game object with a position and a fixed on-screen size."""

    width: ClassVar[float]
    height: ClassVar[float]

    def __init__(self, world: World, x: float, y: float) -> None:
        self.set_pos(x, y)
        super().__init__(world)

    def set_pos(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


class Shot(Body):
    """A pooled projectile that is drawn only while fired."""

    sprite: ClassVar[Sprite]

    def __init__(self, world: World, x: float, y: float, speed: float) -> None:
        self.speed = speed
        self.fired = False
        super().__init__(world, x, y)

    def draw(self, renderer: Renderer) -> None:
        if self.fired:
            renderer.draw_image(self.sprite, self.rect())


class Bullet(Shot):
    """A pooled shot that flies upwards and returns to the pool off screen."""

    sprite = BULLET_SPRITE
    width = BULLET_WIDTH
    height = BULLET_HEIGHT

    def __init__(self, world: World, x: float = -1.0, y: float = -1.0) -> None:
        super().__init__(world, x, y, BULLET_SPEED)

    def update(self) -> None:
        self.y -= self.speed * self.dt
        if self.y < 0:
            self.fired = False

    def draw(self, renderer: Renderer) -> None:
        """Draw the shot while it is in flight."""
        if self.fired:
            renderer.draw_image(BULLET_SPRITE, self.rect())

    def set_pos(self, x: float, y: float) -> None:
        """Move the shot's top-left corner to ``(x, y)``."""
        self.x = float(x)
        self.y = float(y)

    def rect(self) -> Rect:
        """The area the shot covers on screen."""
        return Rect(self.x, self.y, BULLET_WIDTH, BULLET_HEIGHT)