# zombiearena

A top-down arcade game. You move around a square arena built from
50-pixel tiles. The border tiles are walls and the inner tiles are chosen at
random from three floor tiles. The player cannot move past the wall ring, and
turns to face the mouse pointer.

## Installing

```
pip install .
```

The game needs `pygame`. It loads its images from a `graphics/` directory in
the current working directory:

- `graphics/player.png`, the player sprite (50x50);
- `graphics/background_sheet.png`, one 50-pixel-wide column of four 50x50
  tiles stacked top to bottom: three floor tiles, then the wall tile.

If an image cannot be loaded, a plain grey surface is drawn in its place.

## Playing

```
zombiearena
```

The game opens full screen in the game-over state.

| Key         | What it does                                          |
|-------------|-------------------------------------------------------|
| Enter       | Go from game over to level-up; pause or resume play   |
| 1 to 6      | In level-up, start playing a 500x500 arena            |
| W A S D     | Move up, left, down and right                         |
| Mouse       | Aim                                                   |
| Escape      | Quit                                                  |

The view follows the player while playing.

## What it does not do

This is the movement-and-arena core of the game. There are no zombies, no
weapons or shooting, no pickups, no score and no on-screen text. The level-up
keys 1 to 6 all just start the level; they do not apply an upgrade. The
paused, level-up and game-over states draw a black screen.

## Using the pieces from Python

The game logic does not need a window, so you can drive it from code:

```python
from zombiearena.background import Arena, create_background
from zombiearena.player import Player

arena = Arena(left=0, top=0, width=500, height=500)
background = create_background(arena, seed=1)

player = Player()
player.spawn(arena, (1920.0, 1080.0), background.tile_size)
player.move_right()
player.update(0.5, (960, 540))
print(player.position, player.rotation)
```

- `zombiearena.background`: `create_background(arena, seed=None)` returns a
  `Background` whose `vertices` are `Vertex` objects (`position`,
  `tex_coords`), four per tile; `Background.quads()` yields them in groups of
  four. The floor choice depends on `seed`, or on the current time if it is
  omitted.
- `zombiearena.player`: `Player` keeps position, speed, health and rotation.
  `move_*`/`stop_*` set the directions of movement, `update(elapsed_time,
  mouse_position)` moves and aims, `hit(time_hit)` takes 10 health at most
  once every 200 ms (times in milliseconds), `bounds()` gives the sprite's
  bounding box, and `upgrade_speed`, `upgrade_health` and
  `increase_health_level` adjust speed and health.
- `zombiearena.game`: `Game` holds the `State` machine (`GAME_OVER`,
  `LEVELING_UP`, `PLAYING`, `PAUSED`). `key_pressed("return")` and
  `key_pressed("escape")` handle state changes and quitting, `level_up(choice)`
  starts a level, `steer(up, down, left, right)` sets movement, and
  `update(dt, mouse_position)` advances play. `main()` runs the window loop.

## Running the tests

```
pip install ".[test]"
pytest
```