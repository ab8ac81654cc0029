"""Game state machine and the window loop."""

from __future__ import annotations

import enum

from zombiearena.background import (
    TILE_SIZE,
    TILE_TYPES,
    Arena,
    Background,
    create_background,
)
from zombiearena.player import SPRITE_SIZE, Player

_LEVEL_UP_CHOICES = range(1, 7)


class State(enum.Enum):
    PAUSED = enum.auto()
    LEVELING_UP = enum.auto()
    GAME_OVER = enum.auto()
    PLAYING = enum.auto()


class Game:
    """Everything the main loop updates, independent of any display."""

    def __init__(self, resolution: tuple[float, float] = (1920, 1080), seed: int | None = None):
        self.resolution = (float(resolution[0]), float(resolution[1]))
        self.seed = seed
        self.state = State.GAME_OVER
        self.running = True
        self.player = Player()
        self.arena = Arena()
        self.background = Background()
        self.game_time_total = 0.0
        self.view_center = (self.resolution[0] / 2, self.resolution[1] / 2)
        self.mouse_world_position = (0.0, 0.0)

    def key_pressed(self, key: str) -> None:
        """React to a key press: ``"return"`` cycles states, ``"escape"`` quits."""
        key = key.lower()
        if key == "escape":
            self.running = False
        elif key == "return":
            if self.state is State.PLAYING:
                self.state = State.PAUSED
            elif self.state is State.PAUSED:
                self.state = State.PLAYING
            elif self.state is State.GAME_OVER:
                self.state = State.LEVELING_UP

    def level_up(self, choice: int) -> bool:
        """Pick an upgrade (1-6) and start the level; return whether play began."""
        if self.state is not State.LEVELING_UP or choice not in _LEVEL_UP_CHOICES:
            return False
        self.state = State.PLAYING
        self.arena = Arena(left=0, top=0, width=500, height=500)
        self.background = create_background(self.arena, self.seed)
        self.player.spawn(self.arena, self.resolution, self.background.tile_size)
        return True

    def steer(self, up: bool, down: bool, left: bool, right: bool) -> None:
        """Set which directions the player is moving in, while playing."""
        if self.state is not State.PLAYING:
            return
        p = self.player
        p.move_up() if up else p.stop_up()
        p.move_down() if down else p.stop_down()
        p.move_left() if left else p.stop_left()
        p.move_right() if right else p.stop_right()

    def update(self, dt: float, mouse_position: tuple[int, int]) -> None:
        """Advance the world by ``dt`` seconds while playing."""
        if self.state is not State.PLAYING:
            return
        self.game_time_total += dt
        cx, cy = self.view_center
        rx, ry = self.resolution
        self.mouse_world_position = (
            cx - rx / 2 + mouse_position[0],
            cy - ry / 2 + mouse_position[1],
        )
        self.player.update(dt, mouse_position)
        self.view_center = self.player.position


def _load_texture(pygame, path: str, size: tuple[int, int]):
    try:
        return pygame.image.load(path).convert_alpha()
    except (pygame.error, OSError):
        surface = pygame.Surface(size)
        surface.fill((90, 90, 90))
        return surface


def main(argv=None) -> int:
    """Run the game full screen until Escape is pressed."""
    import pygame

    pygame.init()
    info = pygame.display.Info()
    resolution = (info.current_w, info.current_h)
    window = pygame.display.set_mode(resolution, pygame.FULLSCREEN)
    pygame.display.set_caption("Zombie Arena")

    game = Game(resolution)
    background_sheet = _load_texture(
        pygame, "graphics/background_sheet.png", (TILE_SIZE, TILE_SIZE * (TILE_TYPES + 1))
    )
    player_texture = _load_texture(pygame, "graphics/player.png", (SPRITE_SIZE, SPRITE_SIZE))
    number_keys = {
        pygame.K_1: 1, pygame.K_2: 2, pygame.K_3: 3,
        pygame.K_4: 4, pygame.K_5: 5, pygame.K_6: 6,
    }
    clock = pygame.time.Clock()

    while game.running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                game.running = False
            elif event.type == pygame.KEYDOWN:
                before = game.state
                if event.key == pygame.K_RETURN:
                    game.key_pressed("return")
                elif event.key in number_keys:
                    game.level_up(number_keys[event.key])
                if game.state is State.PLAYING and before is not State.PLAYING:
                    clock.tick()

        keys = pygame.key.get_pressed()
        if keys[pygame.K_ESCAPE]:
            game.key_pressed("escape")
        game.steer(keys[pygame.K_w], keys[pygame.K_s], keys[pygame.K_a], keys[pygame.K_d])

        if game.state is State.PLAYING:
            dt = clock.tick() / 1000.0
            game.update(dt, pygame.mouse.get_pos())

        window.fill((0, 0, 0))
        if game.state is State.PLAYING:
            ox = game.view_center[0] - game.resolution[0] / 2
            oy = game.view_center[1] - game.resolution[1] / 2
            tile = game.background.tile_size
            for quad in game.background.quads():
                tx, ty = quad[0].tex_coords
                px, py = quad[0].position
                window.blit(
                    background_sheet,
                    (px - ox, py - oy),
                    pygame.Rect(int(tx), int(ty), tile, tile),
                )
            sprite = pygame.transform.rotate(player_texture, -game.player.rotation)
            sx, sy = game.player.sprite_position
            window.blit(sprite, sprite.get_rect(center=(sx - ox, sy - oy)))
        pygame.display.flip()

    pygame.quit()
    return 0