"""A short explosion animation."""

from starvolley.geometry import Point, Rect
from starvolley.world import GameObject, Renderer, Sprite, World

EFFECT_SPRITE = Sprite("explosion.png", columns=3, rows=3)
EFFECT_SIZE = 48
ANIM_TIME = 1.0
FRAME_TIME = ANIM_TIME / EFFECT_SPRITE.frame_count


class Effect(GameObject):
    """Plays the explosion sheet once at a position, then dies."""

    def __init__(self, world: World, pos: Point) -> None:
        self.pos = Point(pos.x, pos.y)
        self.anim_timer = ANIM_TIME
        self.frame = 0
        self.frame_timer = FRAME_TIME
        super().__init__(world)

    def update(self) -> None:
        elapsed = self.dt
        self.anim_timer -= elapsed
        if self.anim_timer < 0:
            self.alive = False

        self.frame_timer -= elapsed
        if self.frame_timer < 0:
            self.frame += 1
            self.frame_timer = FRAME_TIME - self.frame_timer

    def draw(self, renderer: Renderer) -> None:
        last_frame = EFFECT_SPRITE.frame_count - 1
        area = Rect(self.pos.x, self.pos.y, EFFECT_SIZE, EFFECT_SIZE)
        renderer.draw_image(EFFECT_SPRITE, area, min(self.frame, last_frame))