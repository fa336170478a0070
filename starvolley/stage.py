"""The stage: title screen, the battle and its end screens."""

from __future__ import annotations

import enum

from starvolley.enemy import Enemy, EnemyType
from starvolley.geometry import WIN_HEIGHT, WIN_WIDTH, Rect, intersects
from starvolley.keyboard import Key
from starvolley.player import Player
from starvolley.world import GameObject, Renderer, Sprite, World

ENEMY_COLUMNS = 10
ENEMY_ROWS = 7
ENEMY_COUNT = ENEMY_COLUMNS * ENEMY_ROWS
ENEMY_ALIGN_X = 55.0
ENEMY_ALIGN_Y = 50.0
ENEMY_LEFT_MARGIN = int((WIN_WIDTH - ENEMY_ALIGN_X * ENEMY_COLUMNS) / 2)
ENEMY_TOP_MARGIN = 75
ROW_KINDS = (
    EnemyType.BOSS,
    EnemyType.KNIGHT,
    EnemyType.ZAKO,
    EnemyType.ZAKO,
    EnemyType.ZAKO,
    EnemyType.ZAKO,
    EnemyType.ZAKO,
)

BACKGROUND_SPRITE = Sprite("bg.png")
BACKGROUND_ALPHA = 100
TITLE_BANNER = Sprite("Title.png")
GAMEOVER_BANNER = Sprite("GameOver.png")
CLEAR_BANNER = Sprite("Clear.png")
BANNER_RECT = Rect(WIN_WIDTH // 2 - 400, WIN_HEIGHT // 2 - 200, 850, 400)


class StageState(enum.Enum):
    TITLE = 0
    PLAY = 1
    GAMEOVER = 2
    CLEAR = 3


class Stage(GameObject):
    """Runs the game's screens and settles hits between shots and ships."""

    def __init__(self, world: World) -> None:
        super().__init__(world)
        self.player: Player | None = None
        self.enemies: list[Enemy] = []
        self.banner: Sprite | None = None
        self.state = StageState.TITLE
        self.destroyed = 0

    def update(self) -> None:
        handlers = {
            StageState.TITLE: self._update_title,
            StageState.PLAY: self._update_play,
            StageState.GAMEOVER: self._update_gameover,
            StageState.CLEAR: self._update_clear,
        }
        handlers[self.state]()

    def _update_title(self) -> None:
        self.banner = TITLE_BANNER
        if not self.world.keyboard.is_key_down(Key.SPACE):
            return
        self.player = Player(self.world)
        self.state = StageState.PLAY
        self.enemies = []
        for index in range(ENEMY_COUNT):
            row, col = divmod(index, ENEMY_COLUMNS)
            enemy = Enemy(self.world, index, ROW_KINDS[row])
            enemy.x_move_max = float(ENEMY_LEFT_MARGIN)
            x = col * ENEMY_ALIGN_X + ENEMY_LEFT_MARGIN
            enemy.set_pos(x, row * ENEMY_ALIGN_Y + ENEMY_TOP_MARGIN)
            enemy.x_origin = x
            self.enemies.append(enemy)
        self.banner = None

    def _update_play(self) -> None:
        self._resolve_hits()
        if not self.player.alive:
            for enemy in self.enemies:
                enemy.alive = False
            self.banner = GAMEOVER_BANNER
            self.state = StageState.GAMEOVER
        if self.destroyed >= ENEMY_COUNT:
            self.banner = CLEAR_BANNER
            self.state = StageState.CLEAR

    def _update_gameover(self) -> None:
        if self.world.keyboard.held_frames(Key.SPACE):
            self.state = StageState.TITLE

    def _update_clear(self) -> None:
        if self.world.keyboard.held_frames(Key.SPACE):
            self.player.alive = False
            self.state = StageState.TITLE

    def _resolve_hits(self) -> None:
        player = self.player
        bullets = player.bullets
        for enemy in self.enemies:
            beams = enemy.beams
            for bullet in bullets:
                if bullet.fired and enemy.alive and intersects(enemy.rect(), bullet.rect()):
                    bullet.fired = False
                    enemy.spawn_effect()
                    enemy.alive = False
                    self.destroyed += 1

                for beam in beams:
                    if beam.fired and player.alive and intersects(beam.rect(), player.rect()):
                        beam.fired = False
                        player.spawn_effect()
                        player.alive = False
                    if beam.fired and bullet.fired and intersects(beam.rect(), bullet.rect()):
                        bullet.fired = False
                        beam.fired = False
                    if not player.alive:
                        beam.fired = False

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_image(
            BACKGROUND_SPRITE, Rect(0, 0, WIN_WIDTH, WIN_HEIGHT), 0, BACKGROUND_ALPHA
        )
        if self.banner is not None:
            renderer.draw_image(self.banner, BANNER_RECT)