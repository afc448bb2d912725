"""The first-person camera that drifts forward and turns with the arrow keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Collection

from agario3d.geometry import Quat, Transform, Vec3
from agario3d.world import Key, World

MOVEMENT_SPEED = 2.0
ROTATION_SPEED = 0.5


@dataclass
class GameCamera:
    """Marks the entity whose transform is the viewpoint."""

    sensitivity: float = 0.002


def setup_camera(world: World) -> int:
    """Place the camera above and behind the origin, looking at it."""
    return world.spawn(
        Transform.from_xyz(0.0, 10.0, 30.0).looking_at(Vec3.ZERO, Vec3.Y),
        GameCamera(),
    )


def fps_camera_control(world: World, pressed: Collection[Key], dt: float) -> bool:
    """Move the single camera forward and turn it; return whether a camera was moved."""
    rows = world.query(Transform, GameCamera)
    if len(rows) != 1:
        return False
    _, transform, _ = rows[0]
    forward = transform.rotation * Vec3.NEG_Z
    transform.translation = transform.translation + forward * (MOVEMENT_SPEED * dt)

    turns = (
        (Key.UP, Quat.from_rotation_x(ROTATION_SPEED * dt)),
        (Key.DOWN, Quat.from_rotation_x(-ROTATION_SPEED * dt)),
        (Key.LEFT, Quat.from_rotation_y(ROTATION_SPEED * dt)),
        (Key.RIGHT, Quat.from_rotation_y(-ROTATION_SPEED * dt)),
    )
    for key, turn in turns:
        if key in pressed:
            transform.rotation = transform.rotation * turn
    return True