"""Enemy ships that sway from side to side and drop beams."""

import enum
import math
from dataclasses import dataclass
from weakref import WeakKeyDictionary

from starvolley.bullet import Body
from starvolley.effect import Effect
from starvolley.enemy_beam import EnemyBeam
from starvolley.geometry import Point, Rect
from starvolley.world import Renderer, Sprite, World

ENEMY_WIDTH = 48
ENEMY_HEIGHT = 48
ENEMY_INIT_X = 100.0
ENEMY_INIT_Y = 100.0
ENEMY_SPEED = 100.0
ENEMY_BEAM_COUNT = 1
SWAY_PERIOD = 10.0
VOLLEY_INTERVAL = 3.0
BEAM_PARKING = -100.0


class EnemyType(enum.Enum):
    """Kinds of enemy ship; each value is the ship's image file."""

    ZAKO = "tiny_ship10.png"
    MID = "tiny_ship18.png"
    KNIGHT = "tiny_ship16.png"
    BOSS = "tiny_ship9.png"

    @property
    def sprite(self) -> Sprite:
        return Sprite(self.value)


@dataclass
class _VolleyClock:
    """Countdown to the next enemy shot, shared by all enemies of a world."""

    remaining: float = VOLLEY_INTERVAL


_volleys: "WeakKeyDictionary[World, _VolleyClock]" = WeakKeyDictionary()


class Enemy(Body):
    """An enemy ship swaying around its origin and firing from a beam pool."""

    width = ENEMY_WIDTH
    height = ENEMY_HEIGHT

    def __init__(
        self, world: World, enemy_id: int = 0, kind: EnemyType = EnemyType.ZAKO
    ) -> None:
        self.enemy_id = enemy_id
        self.kind = kind
        self.speed = ENEMY_SPEED
        self.x_move_max = 0.0
        self.x_origin = 0.0
        self.move_time = 0.0
        self._beams = [
            EnemyBeam(world, BEAM_PARKING, BEAM_PARKING) for _ in range(ENEMY_BEAM_COUNT)
        ]
        super().__init__(world, ENEMY_INIT_X, ENEMY_INIT_Y)

    @property
    def beams(self) -> tuple[EnemyBeam, ...]:
        """Every beam this enemy owns, fired or not."""
        return tuple(self._beams)

    def update(self) -> None:
        step = self.dt
        omega = 2.0 * math.pi / SWAY_PERIOD
        self.move_time += step
        self.x = self.x_origin + self.x_move_max / 2.0 * math.sin(omega * self.move_time)

        clock = _volleys.setdefault(self.world, _VolleyClock())
        if clock.remaining < 0:
            self.shoot()
            clock.remaining = VOLLEY_INTERVAL
        clock.remaining -= step

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_image(self.kind.sprite, self.rect())

    def shoot(self) -> None:
        """Fire the first idle beam from the ship's bottom centre, if any."""
        beam = next((beam for beam in self._beams if not beam.fired), None)
        if beam is not None:
            beam.set_pos(self.x + ENEMY_WIDTH // 2, self.y + ENEMY_HEIGHT)
            beam.fired = True

    def spawn_effect(self) -> None:
        """Start an explosion where the ship is."""
        Effect(self.world, Point(self.x, self.y))

    def set_pos(self, x: float, y: float) -> None:
        """Move the ship's top-left corner to ``(x, y)``."""
        self.x = float(x)
        self.y = float(y)

    def rect(self) -> Rect:
        """The area the ship covers on screen."""
        return Rect(self.x, self.y, ENEMY_WIDTH, ENEMY_HEIGHT)