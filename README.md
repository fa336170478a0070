# starvolley

A small fixed-shooter arcade game. Your ship sits at the bottom of a
1024×768 window. Above it, seventy enemy ships in ten columns and seven
rows sway from side to side and drop beams on you.

## Installing

```
pip install starvolley
```

This pulls in `pygame`, which opens the window and draws the game.

## Playing

```
starvolley
starvolley --assets path/to/images
```

| Key         | What it does                                 |
|-------------|----------------------------------------------|
| Space       | Start from the title screen, then fire       |
| Left, Right | Move your ship                               |
| Escape      | Quit (closing the window also quits)         |

- Each press of Space fires one shot. Up to five of your shots can be in
  flight at once, and after a shot you must wait half a second before you
  can fire again.
- Each enemy ship carries one beam. All enemies share one three-second
  countdown, and every enemy counts it down on every frame, so beams come
  faster while many ships remain. The ship that finds the countdown run out
  fires its beam if it is not already in flight.
- Your shots and enemy beams cancel each other out when they meet.
- Shoot down all seventy ships to reach the clear screen. If a beam hits
  you, your ship explodes and the game is over.
- On the game-over or clear screen, hold Space to go back to the title,
  then press it again to start a new game.

The game loads its pictures from the directory given with `--assets`
(`Assets` in the current directory by default). It looks for `bg.png`,
`Title.png`, `GameOver.png`, `Clear.png`, `tiny_ship5.png`, `tiny_ship9.png`,
`tiny_ship10.png`, `tiny_ship16.png`, `tiny_ship18.png`, `laserBlue031.png`,
`beams1.png` and `explosion.png`. `explosion.png` is cut into nine frames in
a 3×3 grid. A picture that cannot be loaded is simply not drawn.

## What it does not do

There is one stage and one life. The game keeps no score, shows no text
on screen and plays no sound.

## Using the pieces

The game logic does not depend on pygame, so you can drive it yourself.

- `starvolley.world.World` holds the game objects. Each call to
  `World.step(dt, renderer=None)` moves the game on by one frame: it admits
  objects created since the last step, updates them all, draws them if a
  renderer is given, and drops the ones that are no longer alive.
- A renderer is any object with a
  `draw_image(image, rect, frame=0, alpha=255)` method, where `image` is a
  `starvolley.world.Sprite` and `rect` a `starvolley.geometry.Rect`.
  `starvolley.app.PygameRenderer` is the one the game uses.
- `starvolley.keyboard.Keyboard` takes the set of `Key` values held down in
  each frame through `update(pressed)` and answers `is_key_down(key)`
  (pressed this frame), `is_key_up(key)` (released this frame) and
  `held_frames(key)` (frames held after the one it was pressed on).
- `starvolley.stage.Stage` runs the title, play, game-over and clear screens;
  create one in a `World` to start a game.
- `starvolley.geometry.intersects(a, b)` tells whether two rectangles
  overlap; touching edges do not count.

## Running the tests

```
pip install "starvolley[test]"
pytest
```