import math

from agario3d.camera import GameCamera, fps_camera_control, setup_camera
from agario3d.geometry import Transform, Vec3
from agario3d.world import Key, World


def test_setup_camera_looks_at_origin():
    world = World()
    entity = setup_camera(world)
    transform = world.get(entity, Transform)
    assert transform.translation == Vec3(0.0, 10.0, 30.0)
    expected = (Vec3.ZERO - transform.translation).normalize()
    assert transform.forward().is_close(expected)
    assert world.get(entity, GameCamera).sensitivity == 0.002


def test_camera_drifts_forward():
    world = World()
    entity = setup_camera(world)
    transform = world.get(entity, Transform)
    start = transform.translation
    rotation = transform.rotation
    assert fps_camera_control(world, set(), 1.0) is True
    moved = transform.translation - start
    assert math.isclose(moved.length(), 2.0)
    assert moved.normalize().is_close(transform.forward())
    assert transform.rotation == rotation


def test_pitch_up_raises_forward():
    world = World()
    entity = world.spawn(Transform(), GameCamera())
    fps_camera_control(world, {Key.UP}, 0.5)
    assert world.get(entity, Transform).forward().y > 0.0


def test_yaw_left_turns_forward_left():
    world = World()
    entity = world.spawn(Transform(), GameCamera())
    fps_camera_control(world, {Key.LEFT}, 0.5)
    assert world.get(entity, Transform).forward().x < 0.0


def test_opposite_turns_undo_each_other():
    world = World()
    entity = world.spawn(Transform(), GameCamera())
    fps_camera_control(world, {Key.UP}, 0.3)
    fps_camera_control(world, {Key.DOWN}, 0.3)
    fps_camera_control(world, {Key.LEFT}, 0.2)
    fps_camera_control(world, {Key.RIGHT}, 0.2)
    assert world.get(entity, Transform).forward().is_close(Vec3.NEG_Z)


def test_no_single_camera_does_nothing():
    world = World()
    assert fps_camera_control(world, {Key.UP}, 1.0) is False
    first = world.spawn(Transform(), GameCamera())
    world.spawn(Transform(), GameCamera())
    assert fps_camera_control(world, {Key.UP}, 1.0) is False
    assert world.get(first, Transform).translation == Vec3.ZERO