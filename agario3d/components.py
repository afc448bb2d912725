"""Data carried by game entities: health, motion and size."""

from __future__ import annotations

from dataclasses import dataclass, field

from agario3d.geometry import Vec3


@dataclass
class Health:
    """Hit points that start full; reaching zero marks the owner dead."""

    maximum: float = 100.0
    current: float = field(init=False)
    alive: bool = field(init=False, default=True)

    def __post_init__(self) -> None:
        self.current = self.maximum

    def take_damage(self, damage: float) -> None:
        self.current -= damage
        if self.current <= 0.0:
            self.current = 0.0
            self.alive = False

    def heal(self, amount: float) -> None:
        self.current = min(self.current + amount, self.maximum)


@dataclass
class Physics:
    """Velocity and acceleration of a moving entity."""

    velocity: Vec3 = Vec3.ZERO
    acceleration: Vec3 = Vec3.ZERO


@dataclass
class Size:
    """Collision radius and mass of an entity."""

    radius: float = 1.0
    mass: float = 10.0