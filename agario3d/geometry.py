"""Vectors, rotations and transforms for the 3D play field, plus scalar helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import ClassVar, Iterator, Union

_EPSILON = 1e-12


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vec3]
    ONE: ClassVar[Vec3]
    X: ClassVar[Vec3]
    Y: ClassVar[Vec3]
    Z: ClassVar[Vec3]
    NEG_Z: ClassVar[Vec3]

    @classmethod
    def splat(cls, value: float) -> Vec3:
        return cls(value, value, value)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return self * -1.0

    def __mul__(self, other: Union[float, Vec3]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec3(self.x * other, self.y * other, self.z * other)

    __rmul__ = __mul__

    def __truediv__(self, other: float) -> Vec3:
        return self * (1.0 / other)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> Vec3:
        """The unit vector in this direction; a zero vector has none."""
        length = self.length()
        if length <= _EPSILON or not math.isfinite(length):
            raise ValueError(f"cannot normalize {self!r}")
        return self / length

    def distance(self, other: Vec3) -> float:
        return (self - other).length()

    def is_close(self, other: Vec3, abs_tol: float = 1e-6) -> bool:
        return all(math.isclose(a, b, abs_tol=abs_tol) for a, b in zip(self, other))


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.ONE = Vec3(1.0, 1.0, 1.0)
Vec3.X = Vec3(1.0, 0.0, 0.0)
Vec3.Y = Vec3(0.0, 1.0, 0.0)
Vec3.Z = Vec3(0.0, 0.0, 1.0)
Vec3.NEG_Z = Vec3(0.0, 0.0, -1.0)


@dataclass(frozen=True)
class Quat:
    """A rotation quaternion stored as (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    IDENTITY: ClassVar[Quat]

    @classmethod
    def from_rotation_x(cls, angle: float) -> Quat:
        return cls(math.sin(angle / 2), 0.0, 0.0, math.cos(angle / 2))

    @classmethod
    def from_rotation_y(cls, angle: float) -> Quat:
        return cls(0.0, math.sin(angle / 2), 0.0, math.cos(angle / 2))

    @classmethod
    def from_axes(cls, x_axis: Vec3, y_axis: Vec3, z_axis: Vec3) -> Quat:
        """The rotation whose basis vectors are the three given orthonormal axes."""
        m00, m01, m02 = x_axis
        m10, m11, m12 = y_axis
        m20, m21, m22 = z_axis
        trace = m00 + m11 + m22
        if trace > 0.0:
            s = 0.5 / math.sqrt(trace + 1.0)
            return cls((m12 - m21) * s, (m20 - m02) * s, (m01 - m10) * s, 0.25 / s)
        if m00 >= m11 and m00 >= m22:
            s = 2.0 * math.sqrt(1.0 + m00 - m11 - m22)
            return cls(0.25 * s, (m01 + m10) / s, (m02 + m20) / s, (m12 - m21) / s)
        if m11 >= m22:
            s = 2.0 * math.sqrt(1.0 + m11 - m00 - m22)
            return cls((m01 + m10) / s, 0.25 * s, (m12 + m21) / s, (m20 - m02) / s)
        s = 2.0 * math.sqrt(1.0 + m22 - m00 - m11)
        return cls((m02 + m20) / s, (m12 + m21) / s, 0.25 * s, (m01 - m10) / s)

    def __mul__(self, other: Union[Quat, Vec3]) -> Union[Quat, Vec3]:
        if isinstance(other, Vec3):
            return self.rotate(other)
        return Quat(
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
        )

    def rotate(self, vector: Vec3) -> Vec3:
        """Apply this rotation to ``vector``."""
        axis = Vec3(self.x, self.y, self.z)
        twice_cross = axis.cross(vector) * 2.0
        return vector + twice_cross * self.w + axis.cross(twice_cross)

    def is_close(self, other: Quat, abs_tol: float = 1e-6) -> bool:
        pairs = zip((self.x, self.y, self.z, self.w), (other.x, other.y, other.z, other.w))
        return all(math.isclose(a, b, abs_tol=abs_tol) for a, b in pairs)


Quat.IDENTITY = Quat()


@dataclass
class Transform:
    """Position, orientation and scale of an entity."""

    translation: Vec3 = Vec3.ZERO
    rotation: Quat = Quat.IDENTITY
    scale: Vec3 = Vec3.ONE

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> Transform:
        return cls(translation=Vec3(x, y, z))

    def looking_at(self, target: Vec3, up: Vec3) -> Transform:
        """A copy rotated so that its forward axis points at ``target``."""
        direction = target - self.translation
        back = -direction.normalize() if direction.length_squared() > _EPSILON else Vec3.Z
        up_dir = up.normalize() if up.length_squared() > _EPSILON else Vec3.Y
        right = up_dir.cross(back)
        if right.length_squared() > _EPSILON:
            right = right.normalize()
        else:
            right = Vec3.X if abs(up_dir.x) < 0.9 else Vec3.Y.cross(up_dir).normalize()
        return replace(self, rotation=Quat.from_axes(right, back.cross(right), back))

    def forward(self) -> Vec3:
        return self.rotation.rotate(Vec3.NEG_Z)

    def right(self) -> Vec3:
        return self.rotation.rotate(Vec3.X)


def distance_squared(pos1: Vec3, pos2: Vec3) -> float:
    return (pos1 - pos2).length_squared()


def distance(pos1: Vec3, pos2: Vec3) -> float:
    return (pos1 - pos2).length()


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def clamp(value: float, minimum: float, maximum: float) -> float:
    return min(max(value, minimum), maximum)


def mass_to_radius(mass: float, base_mass: float) -> float:
    return math.sqrt(mass / base_mass)