# kinki

kinki is a small vertical shooter. You steer a ship in a 520×960 play
field. Crows slide back and forth above you. Each crow fires bursts of
three bullets straight down and then rests. A boss sits near the top and
can be shot down. A panel on the right shows your magic points (MP) and
one icon for each life you have left.

## Installing

```
pip install .
```

The game needs pygame. The image and font files are not part of the
package. Put them in a directory laid out like this:

```
image/background.jpg
image/player.png
image/enemy_crow.png
image/enemy_black.png
image/nomal_bullet.png
image/nomal_bullet_enemy.png
image/health.png
font/arial.ttf
```

The background image must be present, or the game exits with an error.
When any other image is missing, the error goes to standard error and that
object is not drawn. When the font is missing, pygame's default font is
used in its place.

## Playing

```
kinki [--assets DIR] [--frames N]
```

* `--assets DIR`: the directory that holds `image/` and `font/`. The
  default is the current directory.
* `--frames N`: stop after N frames. By default the game runs until you
  close the window.

| Key     | Action                                              |
|---------|-----------------------------------------------------|
| W A S D | Move (you cannot leave the play field)              |
| Space   | Fire, for as long as the key is held                |
| C       | Switch between the straight shot and the wave shot  |

* The straight shot fires one bullet straight up and costs 1 MP.
* The wave shot fires a fan of five bullets and costs 4 MP.
* You start with 600 MP. Once your MP is used up, firing stops and the
  message "Short Magic Points!" stays on the screen.
* A crow takes 3 hits. The boss takes 50 hits, and then it disappears.
* An enemy bullet that touches the small 6×6 hitbox at the centre of your
  ship costs you one life. You start with 3 lives. When you have none
  left, your ship is removed from the field and "Game Over!" is shown.

## Using it as a library

The game rules do not need a display. You can drive them directly:

```python
import random

from kinki.entities import GameState
from kinki.world import update_objects

state = GameState.new(random.Random(1))
state.player.move.shoot = True
for _ in range(120):
    update_objects(state)
print(state.player.magic, len(state.bullets))
```

The modules:

* `kinki.settings`: screen sizes, limits, and the `BulletType` and
  `EnemyType` enums.
* `kinki.entities`: the `Player`, `Enemy`, `Boss`, `Bullet` and `Move`
  dataclasses, and `GameState`. `GameState.new(rng)` builds a fresh game.
* `kinki.controls`: `handle_key(player, key, pressed)` takes a `Key`.
* `kinki.world`: the per-frame updates. `update_objects(state)` advances
  the game by one frame.
* `kinki.shooting`, `kinki.collision` and `kinki.magic`: firing, hits and
  MP costs.
* `kinki.render`: `Renderer(surface, asset_dir)` draws a frame onto a
  pygame surface with `render_frame(state)`.
* `kinki.app`: `run(asset_dir, max_frames)` opens the window and runs the
  loop. `main(argv)` is the command line.

## What it does not do

The boss does not move and does not attack. There is no score, no stage
progression, no restart after "Game Over!", and no sound. To play again,
close the window and start the game again.

## Tests

```
pip install .[test]
pytest
```