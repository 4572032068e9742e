"""Ray casting and frame drawing for the first-person view."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from raycub.image import Image
from raycub.params import SceneParams, check_textures
from raycub.player import Player

WALL = "1"
SIDE_X = 0
"""The ray crossed a vertical grid line last: an east or west face."""
SIDE_Y = 1
"""The ray crossed a horizontal grid line last: a north or south face."""
MIN_DISTANCE = 0.1
_FAR = 1e30


@dataclass(frozen=True)
class RayHit:
    """Where one screen column's ray met a wall."""

    dir_x: float
    dir_y: float
    side: int
    distance: float
    map_x: int
    map_y: int


@dataclass(frozen=True)
class Textures:
    """Wall textures for the four faces."""

    north: Image
    south: Image
    west: Image
    east: Image

    @classmethod
    def load(cls, params: SceneParams) -> Textures:
        """Load the four XPM textures named by the scene parameters."""
        north, south, west, east = check_textures(params)
        return cls(north=north, south=south, west=west, east=east)


def create_color(r: int, g: int, b: int) -> int:
    """Pack red, green and blue into 0xRRGGBB."""
    return r << 16 | g << 8 | b


def _delta(component: float) -> float:
    return _FAR if component == 0 else abs(1 / component)


def cast_ray(grid: Sequence[str], player: Player, x: int, width: int) -> RayHit:
    """Trace the ray of screen column x through the grid until it meets a wall."""
    camera_x = 2 * x / width - 1
    dir_x = player.dir_x + player.plane_x * camera_x
    dir_y = player.dir_y + player.plane_y * camera_x
    delta_x = _delta(dir_x)
    delta_y = _delta(dir_y)
    map_x = int(player.x)
    map_y = int(player.y)

    if dir_x < 0:
        step_x = -1
        side_dist_x = (player.x - map_x) * delta_x
    else:
        step_x = 1
        side_dist_x = (map_x + 1.0 - player.x) * delta_x
    if dir_y < 0:
        step_y = -1
        side_dist_y = (player.y - map_y) * delta_y
    else:
        step_y = 1
        side_dist_y = (map_y + 1.0 - player.y) * delta_y

    side = SIDE_X
    while True:
        if side_dist_x < side_dist_y:
            side_dist_x += delta_x
            map_x += step_x
            side = SIDE_X
        else:
            side_dist_y += delta_y
            map_y += step_y
            side = SIDE_Y
        if not (0 <= map_y < len(grid) and 0 <= map_x < len(grid[map_y])):
            raise ValueError(f"ray left the map at ({map_x}, {map_y})")
        if grid[map_y][map_x] == WALL:
            break

    distance = side_dist_x - delta_x if side == SIDE_X else side_dist_y - delta_y
    return RayHit(dir_x, dir_y, side, distance, map_x, map_y)


def wall_span(distance: float, height: int) -> tuple[int, int]:
    """First and past-the-last screen rows of a wall slice at a distance.

    Distances below the minimum are treated as the minimum. The span may
    reach beyond the screen.
    """
    distance = max(distance, MIN_DISTANCE)
    line = int(height / distance)
    half = line // 2
    return -half + height // 2, half + height // 2


def wall_texture(textures: Textures, hit: RayHit) -> Image:
    """The texture of the face the ray hit."""
    if hit.side == SIDE_X:
        return textures.east if hit.dir_x > 0 else textures.west
    return textures.south if hit.dir_y > 0 else textures.north


def _draw_column(
    frame: Image,
    x: int,
    hit: RayHit,
    player: Player,
    texture: Image,
    ceiling: int,
    floor: int,
) -> None:
    height = frame.height
    start, end = wall_span(hit.distance, height)
    distance = max(hit.distance, MIN_DISTANCE)

    for y in range(0, min(start, height)):
        frame.put_pixel(x, y, ceiling)

    if hit.side == SIDE_X:
        wall_x = player.y + distance * hit.dir_y
    else:
        wall_x = player.x + distance * hit.dir_x
    wall_x -= math.floor(wall_x)
    tex_x = min(int(wall_x * texture.width), texture.width - 1)
    span = end - start
    for y in range(max(start, 0), min(end, height)):
        tex_y = min(int((y - start) / span * texture.height), texture.height - 1)
        frame.put_pixel(x, y, texture.get_pixel(tex_x, tex_y))

    for y in range(max(end, 0), height):
        frame.put_pixel(x, y, floor)


def render_frame(
    frame: Image,
    grid: Sequence[str],
    player: Player,
    textures: Textures,
    ceiling: tuple[int, int, int],
    floor: tuple[int, int, int],
) -> None:
    """Draw the view from the player into frame, one column per ray."""
    ceiling_color = create_color(*ceiling)
    floor_color = create_color(*floor)
    for x in range(frame.width):
        hit = cast_ray(grid, player, x, frame.width)
        _draw_column(
            frame, x, hit, player, wall_texture(textures, hit),
            ceiling_color, floor_color,
        )