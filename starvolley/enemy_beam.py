"""The shot fired by enemies."""

from starvolley.bullet import Shot
from starvolley.geometry import WIN_HEIGHT, Point, Rect
from starvolley.world import Renderer, Sprite, World

BEAM_SPRITE = Sprite("beams1.png")
BEAM_WIDTH = 11
BEAM_HEIGHT = 21
BEAM_SPEED = 250.0


class EnemyBeam(Shot):
    """A pooled shot that falls downwards and returns to the pool off screen."""

    sprite = BEAM_SPRITE
    width = BEAM_WIDTH
    height = BEAM_HEIGHT

    def __init__(self, world: World, x: float = -10.0, y: float = -10.0) -> None:
        self.target = Point()
        super().__init__(world, x, y, BEAM_SPEED)

    def update(self) -> None:
        self.y += self.speed * self.dt
        if self.y > WIN_HEIGHT:
            self.fired = False

    def draw(self, renderer: Renderer) -> None:
        """Draw the beam while it is in flight."""
        if self.fired:
            renderer.draw_image(BEAM_SPRITE, self.rect())

    def set_target(self, pos: Point) -> None:
        """Remember the horizontal position of the target."""
        self.target = Point(pos.x, self.target.y)

    def set_pos(self, x: float, y: float) -> None:
        """Move the beam's top-left corner to ``(x, y)``."""
        self.x = float(x)
        self.y = float(y)

    def rect(self) -> Rect:
        """The area the beam covers on screen."""
        return Rect(self.x, self.y, BEAM_WIDTH, BEAM_HEIGHT)