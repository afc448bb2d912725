import random

from agario3d.components import Physics, Size
from agario3d.entities import (
    Enemy,
    Food,
    Player,
    spawn_enemies,
    spawn_initial_food,
    spawn_player,
)
from agario3d.geometry import Transform, Vec3
from agario3d.rendering import Color, SphereSprite
from agario3d.world import World


def test_spawn_player_components():
    world = World()
    entity = spawn_player(world)
    assert world.get(entity, Player) == Player(mass=10.0, speed=5.0, max_speed=10.0)
    assert world.get(entity, Size) == Size(1.0, 10.0)
    assert world.get(entity, Transform).translation == Vec3.ZERO
    sprite = world.get(entity, SphereSprite)
    assert sprite.radius == 25.0
    assert sprite.color == Color.srgb(0.0, 0.0, 1.0)
    assert world.get(entity, Physics) == Physics()


def test_spawn_initial_food_count_and_bounds():
    world = World()
    spawned = spawn_initial_food(world, random.Random(7))
    assert len(spawned) == 100
    assert len(world.query(Food)) == 100
    for entity in spawned:
        position = world.get(entity, Transform).translation
        assert -50.0 <= position.x <= 50.0
        assert -50.0 <= position.y <= 50.0
        assert -25.0 <= position.z <= 25.0
        sprite = world.get(entity, SphereSprite)
        assert sprite.radius == 5.0
        assert 0.5 <= sprite.color.green <= 1.0
        assert 0.0 <= sprite.color.red <= 0.5
        assert sprite.color.blue == 0.0
        assert world.get(entity, Size) == Size(0.2, 1.0)
        assert world.get(entity, Food) == Food(nutrition=1.0, respawn_timer=0.0)


def test_spawn_initial_food_is_seeded():
    first, second = World(), World()
    a = spawn_initial_food(first, random.Random(3))
    b = spawn_initial_food(second, random.Random(3))
    positions_a = [first.get(e, Transform).translation for e in a]
    positions_b = [second.get(e, Transform).translation for e in b]
    assert positions_a == positions_b


def test_spawn_enemies():
    world = World()
    spawned = spawn_enemies(world, random.Random(11))
    assert len(spawned) == 5
    for entity in spawned:
        enemy = world.get(entity, Enemy)
        assert enemy.target is None
        assert enemy.aggression == 0.5
        position = world.get(entity, Transform).translation
        assert -100.0 <= position.x <= 100.0
        assert -100.0 <= position.y <= 100.0
        assert -50.0 <= position.z <= 50.0
        color = world.get(entity, SphereSprite).color
        assert 0.8 <= color.red <= 1.0
        assert 0.0 <= color.green <= 0.3
        assert 0.0 <= color.blue <= 0.2
        assert world.get(entity, Size) == Size(0.8, 8.0)
        assert world.get(entity, Physics) == Physics()