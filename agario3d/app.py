"""The game loop: world setup, per-frame updates, projection and the window."""

from __future__ import annotations

import argparse
import math
import random
from typing import Collection, Optional, Sequence

from agario3d.camera import GameCamera, fps_camera_control, setup_camera
from agario3d.components import Size
from agario3d.config import GameConfig
from agario3d.entities import spawn_enemies, spawn_initial_food, spawn_player
from agario3d.geometry import Quat, Transform, Vec3
from agario3d.rendering import (
    AmbientLight,
    Color,
    SphereSprite,
    setup_colors,
    setup_lighting,
    update_sphere_sprites,
)
from agario3d.systems import (
    SpawnTimer,
    apply_physics,
    check_player_food_collision,
    check_sphere_collisions,
    player_input,
    spawn_food,
    update_visual_size,
)
from agario3d.world import Key, World

FIELD_OF_VIEW = math.pi / 4.0
NEAR_PLANE = 0.1


class Game:
    """A world together with the systems that run on it each frame."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        width: int = 800,
        height: int = 600,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"screen size must be positive, got {width}x{height}")
        self.world = World()
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.width = width
        self.height = height
        self.focal_length = (height / 2.0) / math.tan(FIELD_OF_VIEW / 2.0)
        self._sizes: dict[int, tuple[float, float]] = {}

    def setup(self) -> None:
        """Run the start-up routines: resources, camera, lights and entities."""
        self.world.insert_resource(self.config)
        self.world.insert_resource(SpawnTimer())
        setup_colors(self.world)
        setup_camera(self.world)
        setup_lighting(self.world)
        spawn_player(self.world)
        spawn_initial_food(self.world, self.rng)
        spawn_enemies(self.world, self.rng)

    def step(self, dt: float, pressed: Collection[Key] = frozenset()) -> list[int]:
        """Advance the game by ``dt`` seconds; return the entities removed this frame."""
        player_input(self.world, pressed)
        apply_physics(self.world, dt)
        removed = check_player_food_collision(self.world)
        removed += check_sphere_collisions(self.world)
        sizes = {entity: (size.radius, size.mass) for entity, size in self.world.query(Size)}
        changed = [entity for entity, value in sizes.items() if self._sizes.get(entity) != value]
        self._sizes = sizes
        update_visual_size(self.world, changed)
        spawn_food(self.world, dt, self.rng)
        fps_camera_control(self.world, pressed, dt)
        update_sphere_sprites(self.world)
        return removed

    def project(self, position: Vec3) -> Optional[tuple[float, float, float]]:
        """Screen x, y and depth of a world point, or None if it lies behind the camera."""
        rows = self.world.query(Transform, GameCamera)
        if not rows:
            raise LookupError("the world has no camera")
        camera = rows[0][1]
        rotation = camera.rotation
        inverse = Quat(-rotation.x, -rotation.y, -rotation.z, rotation.w)
        local = inverse.rotate(position - camera.translation)
        depth = -local.z
        if depth <= NEAR_PLANE:
            return None
        scale = self.focal_length / depth
        return self.width / 2.0 + local.x * scale, self.height / 2.0 - local.y * scale, depth

    def visible_spheres(self) -> list[tuple[float, float, float, Color]]:
        """Screen circles (x, y, radius, colour) ordered from farthest to nearest."""
        circles = []
        for _, sprite, transform in self.world.query(SphereSprite, Transform):
            projected = self.project(transform.translation)
            if projected is not None:
                x, y, depth = projected
                circles.append((depth, x, y, transform.scale.x * self.focal_length / depth, sprite.color))
        circles.sort(key=lambda item: item[0], reverse=True)
        return [circle[1:] for circle in circles]


def _rgb(color: Color, factor: float = 1.0) -> tuple[int, int, int]:
    return tuple(
        max(0, min(255, round(channel * factor * 255)))
        for channel in (color.red, color.green, color.blue)
    )


def _draw(game: Game, surface, pygame) -> None:
    surface.fill(_rgb(Color.WHITE))
    ambient = game.world.resource(AmbientLight).brightness
    for x, y, radius, color in game.visible_spheres():
        if radius >= 0.5:
            pygame.draw.circle(surface, _rgb(color, ambient + 0.7), (round(x), round(y)), round(radius))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="agario3d", description="Eat food, grow, swallow enemies.")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")

    import pygame

    print("Starting Agario 2D...")
    game = Game(rng=random.Random(args.seed), width=args.width, height=args.height)
    game.setup()
    key_map = {
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_ESCAPE: Key.ESCAPE,
    }

    pygame.init()
    try:
        surface = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("agario3d")
        pygame.mouse.set_visible(False)
        pygame.event.set_grab(True)
        clock = pygame.time.Clock()
        while not any(event.type == pygame.QUIT for event in pygame.event.get()):
            dt = clock.tick(60) / 1000.0
            state = pygame.key.get_pressed()
            pressed = {key for code, key in key_map.items() if state[code]}
            if Key.ESCAPE in pressed:
                break
            game.step(dt, pressed)
            _draw(game, surface, pygame)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0