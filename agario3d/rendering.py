"""Colours, lights and the sphere models that give entities their look."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from agario3d.geometry import Transform, Vec3
from agario3d.world import World

SPHERE_SCALE = 0.01


@dataclass(frozen=True)
class Color:
    """An sRGB colour with alpha."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    WHITE: ClassVar[Color]

    @classmethod
    def srgb(cls, red: float, green: float, blue: float) -> Color:
        return cls(red, green, blue)


Color.WHITE = Color(1.0, 1.0, 1.0)


@dataclass
class GameColors:
    """Base colours for the player, food and enemies."""

    player_color: Color
    food_color: Color
    enemy_color: Color


@dataclass
class SphereSprite:
    """Request to draw an entity as a sphere of the given radius and colour."""

    radius: float
    color: Color


@dataclass
class AmbientLight:
    color: Color = Color.WHITE
    brightness: float = 0.3
    affects_lightmapped_meshes: bool = False


@dataclass
class DirectionalLight:
    color: Color = Color.WHITE
    illuminance: float = 10000.0
    shadows_enabled: bool = False
    affects_lightmapped_mesh_diffuse: bool = False
    shadow_depth_bias: float = 0.02
    shadow_normal_bias: float = 0.6


@dataclass
class PointLight:
    color: Color = Color.WHITE
    intensity: float = 2000.0
    range: float = 100.0
    radius: float = 0.0
    shadows_enabled: bool = False
    affects_lightmapped_mesh_diffuse: bool = False
    shadow_depth_bias: float = 0.02
    shadow_normal_bias: float = 0.6
    shadow_map_near_z: float = 0.1


@dataclass
class SphereModel:
    """Mesh and material attached to an entity drawn as a sphere."""

    color: Color
    metallic: float = 0.1
    perceptual_roughness: float = 0.8
    sectors: int = 32
    stacks: int = 18


def setup_colors(world: World) -> GameColors:
    colors = GameColors(
        player_color=Color.srgb(0.0, 0.0, 1.0),
        food_color=Color.srgb(0.0, 1.0, 0.0),
        enemy_color=Color.srgb(1.0, 0.0, 0.0),
    )
    world.insert_resource(colors)
    return colors


def setup_lighting(world: World) -> tuple[int, int]:
    """Add ambient, directional and point lights; return the two light entities."""
    world.insert_resource(AmbientLight())
    directional = world.spawn(
        DirectionalLight(),
        Transform.from_xyz(0.0, 0.0, 10.0).looking_at(Vec3.ZERO, Vec3.Y),
    )
    point = world.spawn(PointLight(), Transform.from_xyz(5.0, 5.0, 5.0))
    return directional, point


def update_sphere_sprites(world: World) -> list[int]:
    """Give every sprite entity without a model its sphere model and scale."""
    updated = []
    for entity, sprite, transform in world.query(SphereSprite, Transform):
        if world.get(entity, SphereModel) is not None:
            continue
        world.insert(
            entity,
            SphereModel(color=sprite.color),
            Transform(
                translation=transform.translation,
                rotation=transform.rotation,
                scale=Vec3.splat(sprite.radius * SPHERE_SCALE),
            ),
        )
        updated.append(entity)
    return updated