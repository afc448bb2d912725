"""The player, food and enemy entities and the routines that create them."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from agario3d.components import Physics, Size
from agario3d.geometry import Transform
from agario3d.rendering import Color, SphereSprite
from agario3d.world import World

INITIAL_FOOD_COUNT = 100
ENEMY_COUNT = 5


@dataclass
class Player:
    """The sphere controlled by the user."""

    mass: float = 10.0
    speed: float = 5.0
    max_speed: float = 10.0


@dataclass
class Food:
    """A pellet that makes whoever eats it grow."""

    nutrition: float = 1.0
    respawn_timer: float = 0.0


@dataclass
class Enemy:
    """A computer-controlled sphere."""

    target: Optional[int] = None
    aggression: float = 0.5


def spawn_player(world: World) -> int:
    """Place the blue player sphere at the origin and return its entity."""
    return world.spawn(
        SphereSprite(25.0, Color.srgb(0.0, 0.0, 1.0)),
        Transform.from_xyz(0.0, 0.0, 0.0),
        Player(),
        Physics(),
        Size(1.0, 10.0),
    )


def spawn_initial_food(world: World, rng: Optional[random.Random] = None) -> list[int]:
    """Scatter the starting food pellets in a box around the origin."""
    rng = rng or random.Random()
    spawned = []
    for _ in range(INITIAL_FOOD_COUNT):
        x = rng.uniform(-50.0, 50.0)
        y = rng.uniform(-50.0, 50.0)
        z = rng.uniform(-25.0, 25.0)
        green = rng.uniform(0.5, 1.0)
        red = rng.uniform(0.0, 0.5)
        spawned.append(
            world.spawn(
                SphereSprite(5.0, Color.srgb(red, green, 0.0)),
                Transform.from_xyz(x, y, z),
                Food(),
                Size(0.2, 1.0),
            )
        )
    return spawned


def spawn_enemies(world: World, rng: Optional[random.Random] = None) -> list[int]:
    """Place the reddish enemy spheres at random positions."""
    rng = rng or random.Random()
    spawned = []
    for _ in range(ENEMY_COUNT):
        x = rng.uniform(-100.0, 100.0)
        y = rng.uniform(-100.0, 100.0)
        z = rng.uniform(-50.0, 50.0)
        red = rng.uniform(0.8, 1.0)
        green = rng.uniform(0.0, 0.3)
        blue = rng.uniform(0.0, 0.2)
        spawned.append(
            world.spawn(
                SphereSprite(15.0, Color.srgb(red, green, blue)),
                Transform.from_xyz(x, y, z),
                Enemy(),
                Physics(),
                Size(0.8, 8.0),
            )
        )
    return spawned