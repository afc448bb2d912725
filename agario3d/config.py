"""Tunable game settings."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

_COUNT_FIELDS = frozenset({"max_food_count", "enemy_count"})


@dataclass
class GameConfig:
    """Settings for the world, spawning, players and camera."""

    world_size: float = 30.0
    max_food_count: int = 100
    food_spawn_rate: float = 2.0
    player_base_speed: float = 5.0
    player_base_mass: float = 10.0
    enemy_count: int = 5
    camera_follow_speed: float = 0.02

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GameConfig:
        """Build a config from a mapping holding every field; extra keys are ignored."""
        missing = [f.name for f in fields(cls) if f.name not in data]
        if missing:
            raise ValueError(f"missing field(s): {', '.join(missing)}")
        values: dict[str, Any] = {}
        for f in fields(cls):
            value = data[f.name]
            if isinstance(value, bool):
                raise ValueError(f"{f.name}: expected a number, got {value!r}")
            if f.name in _COUNT_FIELDS:
                if not isinstance(value, int) or value < 0:
                    raise ValueError(f"{f.name}: expected a non-negative integer, got {value!r}")
            else:
                if not isinstance(value, (int, float)):
                    raise ValueError(f"{f.name}: expected a number, got {value!r}")
                value = float(value)
            values[f.name] = value
        return cls(**values)