"""The player: position, viewing direction, camera plane and movement."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

MOVE_SPEED = 0.1
ROTATION_SPEED = 0.1
WALL = "1"

# Start marker -> (dir_x, dir_y, plane_x, plane_y)
_FACINGS = {
    "N": (0.0, -1.0, -0.66, 0.0),
    "S": (0.0, 1.0, 0.66, 0.0),
    "E": (1.0, 0.0, 0.0, -0.66),
    "W": (-1.0, 0.0, 0.0, 0.66),
}


@dataclass
class Player:
    """Player state in map coordinates; x is the column, y the row."""

    x: float = 0.0
    y: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    move_speed: float = MOVE_SPEED

    @classmethod
    def from_map(cls, grid: Sequence[str]) -> Player:
        """Place the player at the centre of its start cell, facing its marker."""
        player = cls()
        for i, row in enumerate(grid):
            for j, char in enumerate(row):
                facing = _FACINGS.get(char)
                if facing is not None:
                    player.x, player.y = float(j), float(i)
                    player.dir_x, player.dir_y, player.plane_x, player.plane_y = facing
        player.x += 0.5
        player.y += 0.5
        return player

    def _rotate(self, angle: float) -> None:
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def rotate_left(self) -> None:
        """Turn by the rotation step in the positive direction."""
        self._rotate(ROTATION_SPEED)

    def rotate_right(self) -> None:
        """Turn by the rotation step in the negative direction."""
        self._rotate(-ROTATION_SPEED)

    def _step(self, grid: Sequence[str], dx: float, dy: float) -> None:
        step_x = dx * self.move_speed
        if grid[int(self.y)][int(self.x + step_x)] != WALL:
            self.x += step_x
        step_y = dy * self.move_speed
        if grid[int(self.y + step_y)][int(self.x)] != WALL:
            self.y += step_y

    def forward(self, grid: Sequence[str]) -> None:
        """Move along the viewing direction, axis by axis, not into walls."""
        self._step(grid, self.dir_x, self.dir_y)

    def backward(self, grid: Sequence[str]) -> None:
        """Move against the viewing direction."""
        self._step(grid, -self.dir_x, -self.dir_y)

    def leftward(self, grid: Sequence[str]) -> None:
        """Strafe along (-dir_y, dir_x)."""
        self._step(grid, -self.dir_y, self.dir_x)

    def rightward(self, grid: Sequence[str]) -> None:
        """Strafe along (dir_y, -dir_x)."""
        self._step(grid, self.dir_y, -self.dir_x)