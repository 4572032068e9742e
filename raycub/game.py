"""The game window: key handling, the frame loop and the command entry point."""

from __future__ import annotations

import argparse
import sys
import time
from enum import IntEnum

from raycub.cubfile import CubError
from raycub.engine import Textures, render_frame
from raycub.image import Image
from raycub.mapcheck import Scene, load_scene
from raycub.player import Player

SIZE_X = 1024
SIZE_Y = 768
TITLE = "Cub3d"
FPS_POSITION = (100, 100)
FPS_COLOR = (255, 255, 255)


class Key(IntEnum):
    """Keys the game reacts to, as X keysyms."""

    ESC = 0xFF1B
    W = 0x77
    S = 0x73
    A = 0x61
    D = 0x64
    LEFT = 0xFF51
    RIGHT = 0xFF53


class Game:
    """A running scene: player state, frame buffer and frame-rate counter."""

    def __init__(
        self,
        scene: Scene,
        textures: Textures,
        width: int = SIZE_X,
        height: int = SIZE_Y,
    ) -> None:
        self.scene = scene
        self.textures = textures
        self.width = width
        self.height = height
        self.frame = Image(width, height, 32, False)
        self.player = Player.from_map(scene.grid)
        self.ceiling = scene.params.ceiling_color
        self.floor = scene.params.floor_color
        self.fps = 0
        self.frame_count = 0
        self.last_fps_time = 0.0
        self.running = True

    def handle_key(self, key: int) -> bool:
        """Apply a key press; returns False once the game should stop."""
        try:
            key = Key(key)
        except ValueError:
            return self.running
        grid = self.scene.grid
        if key is Key.ESC:
            self.running = False
        elif key is Key.W:
            self.player.forward(grid)
        elif key is Key.S:
            self.player.backward(grid)
        elif key is Key.A:
            self.player.leftward(grid)
        elif key is Key.D:
            self.player.rightward(grid)
        elif key is Key.LEFT:
            self.player.rotate_left()
        elif key is Key.RIGHT:
            self.player.rotate_right()
        return self.running

    def tick_fps(self, now: float) -> str:
        """Count one frame at time now (seconds) and return the frame-rate label."""
        self.frame_count += 1
        if now - self.last_fps_time >= 1.0:
            self.fps = self.frame_count
            self.frame_count = 0
            self.last_fps_time = now
        return f"{self.fps} fps"

    def render(self) -> str:
        """Draw the current view into the frame and return the frame-rate label."""
        render_frame(
            self.frame,
            self.scene.grid,
            self.player,
            self.textures,
            self.ceiling,
            self.floor,
        )
        return self.tick_fps(time.process_time())

    def run(self) -> None:
        """Open a window and run the event and drawing loop until the game stops."""
        import pygame

        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(TITLE)
            pygame.key.set_repeat(150, 30)
            font = pygame.font.Font(None, 24)
            keys = {
                pygame.K_ESCAPE: Key.ESC,
                pygame.K_w: Key.W,
                pygame.K_s: Key.S,
                pygame.K_a: Key.A,
                pygame.K_d: Key.D,
                pygame.K_LEFT: Key.LEFT,
                pygame.K_RIGHT: Key.RIGHT,
            }
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        key = keys.get(event.key)
                        if key is not None:
                            self.handle_key(key)
                if not self.running:
                    break
                label = self.render()
                surface = pygame.image.frombuffer(
                    self.frame.to_rgb_bytes(), (self.width, self.height), "RGB"
                )
                screen.blit(surface, (0, 0))
                screen.blit(font.render(label, True, FPS_COLOR), FPS_POSITION)
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Load a .cub scene given on the command line and play it."""
    parser = argparse.ArgumentParser(prog="raycub", description="Play a .cub scene.")
    parser.add_argument("scene", help="path to a .cub scene file")
    args = parser.parse_args(argv)
    try:
        scene = load_scene(args.scene)
        textures = Textures.load(scene.params)
    except CubError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1
    Game(scene, textures).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())