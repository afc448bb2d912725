import pytest

from agario3d.components import Health, Physics, Size
from agario3d.geometry import Vec3


def test_health_defaults_full():
    health = Health()
    assert health.maximum == 100.0
    assert health.current == health.maximum
    assert health.alive is True


def test_health_starts_at_given_maximum():
    health = Health(40.0)
    assert health.current == 40.0


def test_lethal_damage_clamps_to_zero_and_kills():
    health = Health(50.0)
    health.take_damage(80.0)
    assert health.current == 0.0
    assert health.alive is False


def test_exact_damage_kills():
    health = Health(50.0)
    health.take_damage(50.0)
    assert health.current == 0.0
    assert health.alive is False


def test_partial_damage_then_heal_restores():
    health = Health(50.0)
    health.take_damage(20.0)
    assert health.alive is True
    assert health.current < health.maximum
    health.heal(20.0)
    assert health.current == pytest.approx(health.maximum)


def test_heal_is_capped_at_maximum():
    health = Health(50.0)
    health.take_damage(10.0)
    health.heal(1000.0)
    assert health.current == 50.0


def test_physics_defaults_at_rest():
    physics = Physics()
    assert physics.velocity == Vec3.ZERO
    assert physics.acceleration == Vec3.ZERO


def test_size_defaults():
    size = Size()
    assert size.radius == 1.0
    assert size.mass == 10.0


def test_size_fields():
    size = Size(0.2, 1.0)
    assert (size.radius, size.mass) == (0.2, 1.0)