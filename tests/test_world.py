from dataclasses import dataclass

import pytest

from agario3d.world import Key, World


@dataclass
class Position:
    value: float


@dataclass
class Tag:
    name: str


@dataclass
class Score:
    points: int


def test_spawn_returns_distinct_ids_and_stores_components():
    world = World()
    a = world.spawn(Position(1.0))
    b = world.spawn(Position(2.0), Tag("b"))
    assert a != b
    assert world.get(a, Position) == Position(1.0)
    assert world.get(b, Tag) == Tag("b")
    assert len(world) == 2


def test_get_returns_same_object_for_mutation():
    world = World()
    position = Position(1.0)
    entity = world.spawn(position)
    world.get(entity, Position).value = 5.0
    assert position.value == 5.0


def test_get_missing_component_is_none():
    world = World()
    entity = world.spawn(Position(1.0))
    assert world.get(entity, Tag) is None


def test_get_unknown_entity_raises():
    with pytest.raises(KeyError):
        World().get(42, Position)


def test_despawn_removes_entity():
    world = World()
    entity = world.spawn(Position(1.0))
    world.despawn(entity)
    assert world.contains(entity) is False
    assert entity not in world
    with pytest.raises(KeyError):
        world.despawn(entity)


def test_spawn_duplicate_component_type_raises():
    with pytest.raises(ValueError):
        World().spawn(Position(1.0), Position(2.0))


def test_insert_adds_and_replaces():
    world = World()
    entity = world.spawn(Position(1.0))
    world.insert(entity, Tag("x"), Position(9.0))
    assert world.get(entity, Tag) == Tag("x")
    assert world.get(entity, Position) == Position(9.0)


def test_insert_unknown_entity_raises():
    with pytest.raises(KeyError):
        World().insert(3, Tag("x"))


def test_query_filters_and_keeps_spawn_order():
    world = World()
    a = world.spawn(Position(1.0), Tag("a"))
    world.spawn(Position(2.0))
    c = world.spawn(Tag("c"), Position(3.0))
    rows = world.query(Position, Tag)
    assert rows == [(a, Position(1.0), Tag("a")), (c, Position(3.0), Tag("c"))]


def test_query_result_is_safe_to_despawn_during():
    world = World()
    for i in range(4):
        world.spawn(Score(i))
    for entity, _score in world.query(Score):
        world.despawn(entity)
    assert len(world) == 0


def test_resources():
    world = World()
    world.insert_resource(Score(3))
    assert world.resource(Score) == Score(3)
    world.insert_resource(Score(7))
    assert world.resource(Score) == Score(7)
    with pytest.raises(KeyError):
        world.resource(Tag)


def test_key_lookup_by_value_round_trips():
    for key in (Key.W, Key.UP, Key.DOWN):
        assert Key(key.value) is key
    assert Key(Key.UP.value) is not Key.DOWN