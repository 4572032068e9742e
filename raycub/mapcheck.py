"""Extracting the map from a scene and checking that it is closed."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from raycub.cubfile import HOLE, CubError, is_player, read_scene_lines, valid_char
from raycub.params import SceneParams, check_param

_BORDER = frozenset(("1", HOLE, "\n"))


@dataclass(frozen=True)
class Scene:
    """A checked scene: its rectangular map and its parameters."""

    grid: tuple[str, ...]
    params: SceneParams

    @property
    def height(self) -> int:
        """Number of map rows."""
        return len(self.grid)

    @property
    def width(self) -> int:
        """Number of map columns, without the trailing newline."""
        return len(self.grid[0]) - 1 if self.grid else 0


def extract_map(lines: Sequence[str], map_index: int) -> list[str]:
    """The scene lines from the first map line to the end."""
    return list(lines[map_index:])


def map_to_rectangle(rows: Iterable[str]) -> list[str]:
    """Pad map rows to the widest one, turning spaces and padding into holes.

    Every row of the result ends with a newline.
    """
    trimmed = [row[:-1] if row.endswith("\n") else row for row in rows]
    width = max((len(row) for row in trimmed), default=0)
    if width <= 1:
        raise CubError("map should have more than one column")
    return [row.replace(" ", HOLE).ljust(width, HOLE) + "\n" for row in trimmed]


def one_player(grid: Iterable[str]) -> bool:
    """True if the map has exactly one player and at least one floor cell."""
    players = 0
    walkable = 0
    for row in grid:
        for char in row:
            if is_player(char):
                players += 1
            elif char == "0":
                walkable += 1
    return players == 1 and walkable > 0


def check_valid_chars(grid: Sequence[str]) -> None:
    """Raise CubError unless the map has one player, floor, and only valid cells."""
    if not one_player(grid):
        raise CubError("input 1 player max and at least 1 walkable")
    if not all(valid_char(row) for row in grid):
        raise CubError("invalid char")


def end_with_walls(grid: Sequence[str]) -> bool:
    """True if the last column of every row is a wall or a hole."""
    if not grid:
        return True
    last = len(grid[0]) - 2
    return all(row[last] in ("1", HOLE) for row in grid)


def has_holes(grid: Sequence[str], i: int, j: int) -> bool:
    """True if cell (i, j) breaks the map border or touches a hole."""
    cell = grid[i][j]
    if (j == 0 and cell not in _BORDER) or (i == 0 and grid[0][j] not in _BORDER):
        return True
    if cell == "0" or is_player(cell):
        row = grid[i]
        if j + 1 < len(row) and row[j + 1] == HOLE:
            return True
        if j > 0 and row[j - 1] == HOLE:
            return True
        if i > 0 and grid[i - 1][j] == HOLE:
            return True
        if i + 1 < len(grid) and grid[i + 1][j] == HOLE:
            return True
    return False


def check_holes(grid: Sequence[str]) -> None:
    """Raise CubError if the map is not closed by walls."""
    if not end_with_walls(grid):
        raise CubError("doesn't end with walls")
    for i, row in enumerate(grid):
        for j in range(len(row)):
            if has_holes(grid, i, j):
                raise CubError("hole in the map")


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read and check a .cub file."""
    lines, map_index = read_scene_lines(path)
    params = check_param(lines, map_index)
    grid = map_to_rectangle(extract_map(lines, map_index))
    check_valid_chars(grid)
    check_holes(grid)
    return Scene(grid=tuple(grid), params=params)