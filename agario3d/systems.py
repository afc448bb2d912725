"""Per-frame game rules: movement, eating, growth and food respawning."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Collection, Iterable, Optional

from agario3d.components import Physics, Size
from agario3d.entities import Enemy, Food, Player
from agario3d.geometry import Transform, Vec3, mass_to_radius
from agario3d.rendering import Color, SphereSprite
from agario3d.world import Key, World

DRAG = 0.98
BASE_MASS = 10.0
BASE_MAX_SPEED = 10.0
EAT_RATIO = 1.1
MAX_FOOD = 100


@dataclass
class SpawnTimer:
    """A repeating timer that fires every ``duration`` seconds."""

    duration: float = 2.0
    elapsed: float = 0.0
    just_finished: bool = False

    def tick(self, dt: float) -> bool:
        """Advance by ``dt`` seconds; report whether the timer fired."""
        self.elapsed += dt
        self.just_finished = self.elapsed >= self.duration
        if self.just_finished:
            self.elapsed %= self.duration
        return self.just_finished


def player_input(world: World, pressed: Collection[Key]) -> None:
    """Turn the pressed keys into each player's acceleration."""
    for _, transform, physics, player in world.query(Transform, Physics, Player):
        direction = Vec3.ZERO
        if Key.S in pressed:
            direction -= transform.forward()
        if Key.A in pressed:
            direction -= transform.right()
        if Key.D in pressed:
            direction += transform.right()
        length = direction.length()
        if length > 0.0:
            physics.acceleration = direction / length * player.speed
        else:
            physics.acceleration = Vec3.ZERO


def apply_physics(world: World, dt: float) -> None:
    """Integrate velocity and position, with drag and a mass-based speed cap."""
    for _, transform, physics, size in world.query(Transform, Physics, Size):
        velocity = (physics.velocity + physics.acceleration * dt) * DRAG
        max_speed = BASE_MAX_SPEED / math.sqrt(size.mass / BASE_MASS)
        speed = velocity.length()
        if speed > max_speed:
            velocity = velocity / speed * max_speed
        physics.velocity = velocity
        transform.translation = transform.translation + velocity * dt


def _grow(size: Size, mass: float) -> None:
    size.mass += mass
    size.radius = mass_to_radius(size.mass, BASE_MASS)


def check_player_food_collision(world: World) -> list[int]:
    """Let players eat overlapping food; return the eaten food entities."""
    players = [row for row in world.query(Transform, Size, Player) if world.get(row[0], Food) is None]
    foods = [row for row in world.query(Transform, Size, Food) if world.get(row[0], Player) is None]
    eaten: list[int] = []
    for _, player_transform, player_size, _ in players:
        for food_entity, food_transform, food_size, _ in foods:
            gap = player_transform.translation.distance(food_transform.translation)
            if gap < player_size.radius + food_size.radius:
                _grow(player_size, food_size.mass)
                if food_entity not in eaten:
                    eaten.append(food_entity)
    for entity in eaten:
        world.despawn(entity)
    return eaten


def check_sphere_collisions(world: World) -> list[int]:
    """Let a sphere swallow an overlapping one it outweighs by a tenth; return the swallowed."""
    spheres = [
        (entity, transform, size)
        for entity, transform, size in world.query(Transform, Size)
        if world.get(entity, Player) is not None or world.get(entity, Enemy) is not None
    ]
    swallowed: list[int] = []
    for index, (entity_a, transform_a, size_a) in enumerate(spheres):
        for entity_b, transform_b, size_b in spheres[index + 1 :]:
            gap = transform_a.translation.distance(transform_b.translation)
            if gap >= size_a.radius + size_b.radius:
                continue
            if size_a.mass > size_b.mass * EAT_RATIO:
                _grow(size_a, size_b.mass)
                loser = entity_b
            elif size_b.mass > size_a.mass * EAT_RATIO:
                _grow(size_b, size_a.mass)
                loser = entity_a
            else:
                continue
            if loser not in swallowed:
                swallowed.append(loser)
    for entity in swallowed:
        world.despawn(entity)
    return swallowed


def update_visual_size(world: World, changed: Iterable[int]) -> None:
    """Scale the transforms of entities whose size changed to match their radius."""
    for entity in changed:
        if not world.contains(entity):
            continue
        transform = world.get(entity, Transform)
        size = world.get(entity, Size)
        if transform is not None and size is not None:
            transform.scale = Vec3.splat(size.radius)


def spawn_food(world: World, dt: float, rng: Optional[random.Random] = None) -> Optional[int]:
    """Add a food pellet whenever the spawn timer fires and food is below the cap."""
    try:
        timer = world.resource(SpawnTimer)
    except KeyError:
        timer = SpawnTimer()
        world.insert_resource(timer)
    fired = timer.tick(dt)
    if not fired or len(world.query(Food)) >= MAX_FOOD:
        return None
    rng = rng or random.Random()
    x = rng.uniform(-50.0, 50.0)
    y = rng.uniform(-50.0, 50.0)
    z = rng.uniform(-25.0, 25.0)
    green = rng.uniform(0.7, 1.0)
    red = rng.uniform(0.0, 0.3)
    blue = rng.uniform(0.0, 0.2)
    return world.spawn(
        SphereSprite(10.0, Color.srgb(red, green, blue)),
        Transform.from_xyz(x, y, z),
        Food(),
        Size(0.2, 1.0),
    )