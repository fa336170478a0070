from types import SimpleNamespace

import pytest

from starvolley.bullet import Bullet
from starvolley.effect import Effect
from starvolley.geometry import WIN_HEIGHT, WIN_WIDTH, Rect
from starvolley.keyboard import Key
from starvolley.player import (
    BULLET_INTERVAL,
    BULLET_MARGIN,
    PLAYER_BASE_MARGIN,
    PLAYER_BULLET_COUNT,
    PLAYER_HEIGHT,
    PLAYER_INIT_X,
    PLAYER_INIT_Y,
    PLAYER_SPRITE,
    PLAYER_WIDTH,
    Player,
)
from starvolley.world import World


def make_player():
    world = World()
    return world, Player(world)


def frames(world, player, dt, *pressed_sets):
    world.dt = dt
    for pressed in pressed_sets:
        world.keyboard.update(pressed)
        player.update()


def fired_count(player):
    return sum(b.fired for b in player.bullets)


def test_player_starts_centred_above_bottom_margin():
    _, player = make_player()
    assert (player.x, player.y) == (PLAYER_INIT_X, PLAYER_INIT_Y)
    assert player.x + PLAYER_WIDTH / 2 == WIN_WIDTH / 2
    assert player.y + PLAYER_HEIGHT + PLAYER_BASE_MARGIN == WIN_HEIGHT


def test_bullet_pool_is_registered_before_player():
    world, player = make_player()
    assert len(player.bullets) == PLAYER_BULLET_COUNT
    assert world.pending == (*player.bullets, player)
    assert all(isinstance(b, Bullet) and not b.fired for b in player.bullets)


@pytest.mark.parametrize(
    "keys,held,direction",
    [
        ({Key.LEFT}, 1, 0),
        ({Key.LEFT}, 2, -1),
        ({Key.LEFT, Key.RIGHT}, 2, 1),
    ],
)
def test_movement_needs_held_keys(keys, held, direction):
    world, player = make_player()
    start = player.x
    for _ in range(held - 1):
        world.keyboard.update(keys)
    frames(world, player, 0.5, keys)
    assert player.x == pytest.approx(start + direction * player.speed * 0.5)


@pytest.mark.parametrize(
    "key,edge",
    [(Key.LEFT, 0.0), (Key.RIGHT, float(WIN_WIDTH - PLAYER_WIDTH))],
)
def test_player_stays_inside_window(key, edge):
    world, player = make_player()
    player.x = edge
    world.keyboard.update({key})
    frames(world, player, 0.5, {key})
    assert player.x == edge


def test_space_fires_bullet_from_nose():
    world, player = make_player()
    frames(world, player, 0.1, {Key.SPACE})
    fired = [b for b in player.bullets if b.fired]
    assert fired == [player.bullets[0]]
    assert (fired[0].x, fired[0].y) == (player.x + BULLET_MARGIN, player.y)


def test_cooldown_blocks_rapid_fire():
    world, player = make_player()
    frames(world, player, BULLET_INTERVAL / 5, {Key.SPACE}, (), {Key.SPACE})
    assert fired_count(player) == 1
    frames(world, player, BULLET_INTERVAL * 2, (), {Key.SPACE})
    assert fired_count(player) == 2


def test_shoot_with_empty_pool_changes_nothing():
    _, player = make_player()
    for _ in range(PLAYER_BULLET_COUNT):
        player.shoot()
    positions = [(b.x, b.y) for b in player.bullets]
    player.x = 0.0
    player.shoot()
    assert [(b.x, b.y) for b in player.bullets] == positions
    assert fired_count(player) == PLAYER_BULLET_COUNT


def test_spawn_effect_and_removal_leave_explosions():
    world, player = make_player()
    player.spawn_effect()
    player.on_removed()
    effects = [o for o in world.pending if isinstance(o, Effect)]
    assert len(effects) == 2
    assert all((e.pos.x, e.pos.y) == (player.x, player.y) for e in effects)


def test_draw_uses_ship_sprite():
    _, player = make_player()
    calls = []
    player.draw(SimpleNamespace(draw_image=lambda *args, **kwargs: calls.append(args)))
    assert calls[0][:2] == (
        PLAYER_SPRITE,
        Rect(player.x, player.y, PLAYER_WIDTH, PLAYER_HEIGHT),
    )