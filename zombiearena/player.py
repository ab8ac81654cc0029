"""The player: movement, facing, health and hits."""

from __future__ import annotations

import math

from zombiearena.background import Arena

SPRITE_SIZE = 50
_PI = 3.141
_HIT_COOLDOWN_MS = 200
_HIT_DAMAGE = 10


class Player:
    """State of the player character inside an arena."""

    START_SPEED = 200.0
    START_HEALTH = 100.0

    def __init__(self) -> None:
        self.speed: float = self.START_SPEED
        self.health: int = int(self.START_HEALTH)
        self.max_health: int = int(self.START_HEALTH)
        self.position: tuple[float, float] = (0.0, 0.0)
        self.sprite_position: tuple[float, float] = (0.0, 0.0)
        self.rotation: float = 0.0
        self.arena = Arena()
        self.tile_size = 0
        self.resolution: tuple[float, float] = (0.0, 0.0)
        self.last_hit_time: int = 0
        self._up = self._down = self._left = self._right = False

    def spawn(self, arena: Arena, resolution: tuple[float, float], tile_size: int) -> None:
        """Place the player in the middle of ``arena``."""
        self.position = (float(arena.width // 2), float(arena.height // 2))
        self.arena = arena
        self.tile_size = tile_size
        self.resolution = (float(resolution[0]), float(resolution[1]))

    def hit(self, time_hit: int) -> bool:
        """Register a hit at ``time_hit`` milliseconds; return whether it did damage."""
        if time_hit - self.last_hit_time > _HIT_COOLDOWN_MS:
            self.last_hit_time = time_hit
            self.health -= _HIT_DAMAGE
            return True
        return False

    def bounds(self) -> tuple[float, float, float, float]:
        """Axis-aligned bounds (left, top, width, height) of the rotated sprite."""
        half = SPRITE_SIZE / 2
        angle = math.radians(self.rotation)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        cx, cy = self.sprite_position
        xs, ys = [], []
        for dx, dy in ((-half, -half), (half, -half), (half, half), (-half, half)):
            xs.append(cx + dx * cos_a - dy * sin_a)
            ys.append(cy + dx * sin_a + dy * cos_a)
        return min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys)

    def move_left(self) -> None:
        self._left = True

    def move_right(self) -> None:
        self._right = True

    def move_up(self) -> None:
        self._up = True

    def move_down(self) -> None:
        self._down = True

    def stop_left(self) -> None:
        self._left = False

    def stop_right(self) -> None:
        self._right = False

    def stop_up(self) -> None:
        self._up = False

    def stop_down(self) -> None:
        self._down = False

    def update(self, elapsed_time: float, mouse_position: tuple[int, int]) -> None:
        """Advance by ``elapsed_time`` seconds and turn to face the mouse."""
        x, y = self.position
        step = self.speed * elapsed_time
        if self._up:
            y -= step
        if self._down:
            y += step
        if self._right:
            x += step
        if self._left:
            x -= step

        # The sprite follows the unclamped position; clamping applies next frame.
        self.sprite_position = (x, y)

        arena, tile = self.arena, self.tile_size
        if x > arena.width - tile:
            x = arena.width - tile
        if x < arena.left + tile:
            x = arena.left + tile
        if y > arena.height - tile:
            y = arena.height - tile
        if y < arena.top + tile:
            y = arena.top + tile
        self.position = (float(x), float(y))

        mx, my = mouse_position
        rx, ry = self.resolution
        angle = math.atan2(my - ry / 2, mx - rx / 2) * 180 / _PI
        self.rotation = angle % 360.0

    def upgrade_speed(self) -> None:
        """Raise speed by a fifth of the starting speed."""
        self.speed += self.START_SPEED * 0.2

    def upgrade_health(self) -> None:
        """Raise maximum health by a fifth of the starting health."""
        self.max_health = int(self.max_health + self.START_HEALTH * 0.2)

    def increase_health_level(self, amount: int) -> None:
        """Heal by ``amount``, never above maximum health."""
        self.health = min(self.health + amount, self.max_health)