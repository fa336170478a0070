"""The player's ship."""

from __future__ import annotations

from starvolley.bullet import Bullet
from starvolley.effect import Effect
from starvolley.geometry import WIN_HEIGHT, WIN_WIDTH, Point, Rect
from starvolley.keyboard import Key
from starvolley.world import GameObject, Renderer, Sprite, World

PLAYER_SPRITE = Sprite("tiny_ship5.png")
PLAYER_SPEED = 200.0
PLAYER_WIDTH = 48
PLAYER_HEIGHT = 48
PLAYER_BASE_MARGIN = 32
PLAYER_INIT_X = float(WIN_WIDTH // 2 - PLAYER_WIDTH // 2)
PLAYER_INIT_Y = float(WIN_HEIGHT - PLAYER_HEIGHT - PLAYER_BASE_MARGIN)
BULLET_MARGIN = 17
BULLET_INTERVAL = 0.5
PLAYER_BULLET_COUNT = 5
BULLET_PARKING = -10.0


class Player(GameObject):
    """The ship steered with the arrow keys that fires with space."""

    def __init__(self, world: World) -> None:
        self.x = PLAYER_INIT_X
        self.y = PLAYER_INIT_Y
        self.speed = PLAYER_SPEED
        self.bullet_timer = 0.0
        self._bullets = [
            Bullet(world, BULLET_PARKING, BULLET_PARKING)
            for _ in range(PLAYER_BULLET_COUNT)
        ]
        super().__init__(world)

    @property
    def bullets(self) -> tuple[Bullet, ...]:
        """Every bullet the player owns, fired or not."""
        return tuple(self._bullets)

    def update(self) -> None:
        keyboard = self.world.keyboard
        dt = self.dt

        next_x = self.x
        if keyboard.held_frames(Key.LEFT):
            next_x = self.x - self.speed * dt
        if keyboard.held_frames(Key.RIGHT):
            next_x = self.x + self.speed * dt
        if next_x >= 0 and next_x + PLAYER_WIDTH <= WIN_WIDTH:
            self.x = next_x

        if self.bullet_timer > 0.0:
            self.bullet_timer -= dt
        if keyboard.is_key_down(Key.SPACE) and self.bullet_timer <= 0.0:
            self.shoot()
            self.bullet_timer = BULLET_INTERVAL

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_image(PLAYER_SPRITE, self.rect())

    def shoot(self) -> None:
        """Fire the first idle bullet from the ship's nose, if any."""
        bullet = next((b for b in self._bullets if not b.fired), None)
        if bullet is not None:
            bullet.set_pos(self.x + BULLET_MARGIN, self.y)
            bullet.fired = True

    def spawn_effect(self) -> None:
        """Start an explosion where the ship is."""
        Effect(self.world, Point(self.x, self.y))

    def on_removed(self) -> None:
        self.spawn_effect()

    def rect(self) -> Rect:
        return Rect(self.x, self.y, PLAYER_WIDTH, PLAYER_HEIGHT)