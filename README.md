# agario3d

A small arcade game set in three-dimensional space. You are a blue sphere
among green food pellets and reddish enemy cells. Cells that touch food eat
it, and a cell that touches a much lighter cell absorbs it. That includes
enemies absorbing you.

## Installing

```
pip install .
```

The game window is drawn with `pygame`, which is installed along with the
package.

## Playing

```
agario3d [--width PIXELS] [--height PIXELS] [--seed N]
```

`--width` and `--height` set the window size (default 800 x 600, both must be
positive). `--seed` makes the random placement of food and enemies
repeatable.

The camera flies forward on its own. The keys:

| Key          | Action                                   |
|--------------|------------------------------------------|
| Up / Down    | pitch the camera                         |
| Left / Right | yaw the camera                           |
| S            | push the player backwards                |
| A / D        | push the player left / right             |
| Escape       | quit (closing the window also quits)     |

The rules:

- A player touching a food pellet adds the pellet's mass to its own, and the
  pellet disappears.
- When two cells (player or enemy) touch and one has more than 1.1 times the
  other's mass, the heavier one absorbs the lighter one.
- After eating, a cell's radius is the square root of its mass divided by 10.
  Heavier cells have a lower top speed, and all motion is slowed by drag.
- Every two seconds a new pellet appears, as long as there are fewer than
  100.

Spheres are drawn as flat circles, sized by perspective and painted from the
farthest to the nearest, on a white background.

## Using it as a library

The game logic runs without a window. You can drive it one frame at a time:

```python
import random

from agario3d.app import Game
from agario3d.world import Key

game = Game(rng=random.Random(1), width=800, height=600)
game.setup()
removed = game.step(1 / 60, pressed={Key.S})
circles = game.visible_spheres()
```

- `Game.setup()` adds the resources, camera, lights, player, 100 food pellets
  and 5 enemies.
- `Game.step(dt, pressed)` runs one frame and returns the ids of entities
  eaten in it.
- `Game.project(position)` gives the screen x, y and depth of a world point,
  or `None` if the point is behind the camera. `Game.visible_spheres()` lists
  `(x, y, radius, color)` for every visible sphere, farthest first.

Other modules:

- `agario3d.world` holds `World`, a small entity store (`spawn`, `despawn`,
  `insert`, `get`, `query`, `insert_resource`, `resource`), and the `Key`
  enum.
- `agario3d.systems` and `agario3d.camera` hold the per-frame rules that act
  on a `World`.
- `agario3d.entities` and `agario3d.components` hold the entity and component
  data.
- `agario3d.rendering` holds colours, lights and sphere models.
- `agario3d.geometry` holds `Vec3`, `Quat`, `Transform` and scalar helpers.
- `agario3d.config.GameConfig` holds a set of tuning values with
  `to_dict` / `from_dict`. `Game` stores it as a resource, but the systems use
  their own fixed values and do not read it.

## What it does not do

- Enemies do not move or chase anything. They only absorb what touches them.
- There is no multiplayer or network play.
- The `Health` component exists, but nothing in the game uses it.
- There is no score display, menu or saved state.

## Running the tests

```
pip install ".[test]"
pytest
```