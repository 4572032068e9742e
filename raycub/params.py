"""Scene parameters: wall textures and floor and ceiling colours."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from raycub.cubfile import CubError, skip_spaces
from raycub.image import Image
from raycub.xpm import XpmError, load_xpm

_IDS = ("SO ", "NO ", "WE ", "EA ", "F ", "C ")
_COLOR_CHARS = frozenset("0123456789,\n")
_ATOI = re.compile(r"\s*([0-9]*)")


@dataclass(frozen=True)
class SceneParams:
    """Texture paths and colour specifications of a scene."""

    no_path: str | None
    so_path: str | None
    we_path: str | None
    ea_path: str | None
    floor_str: str
    ceiling_str: str

    @property
    def floor_color(self) -> tuple[int, int, int]:
        """Floor colour as (R, G, B)."""
        return parse_color(self.floor_str)

    @property
    def ceiling_color(self) -> tuple[int, int, int]:
        """Ceiling colour as (R, G, B)."""
        return parse_color(self.ceiling_str)


def _atoi(text: str) -> int:
    digits = _ATOI.match(text).group(1)
    return int(digits) if digits else 0


def parse_color(text: str) -> tuple[int, int, int]:
    """Parse an 'R,G,B' colour with each part in 0..255."""
    trimmed = text.strip(" \t\n")
    if any(char not in _COLOR_CHARS for char in trimmed):
        raise CubError("colors should be described as [R,G,B]")
    parts = [part for part in trimmed.split(",") if part]
    if len(parts) != 3:
        raise CubError("colors should be [R,G,B]")
    values = tuple(_atoi(part) for part in parts)
    if any(not 0 <= value <= 255 for value in values):
        raise CubError("colors not within range")
    return values  # type: ignore[return-value]


def check_param(lines: Iterable[str], map_index: int) -> SceneParams:
    """Check that each parameter appears once before the map and read them."""
    if map_index == -1:
        raise CubError("map not found")
    lines = list(lines)
    counts = dict.fromkeys(_IDS, 0)
    last_seen = dict.fromkeys(_IDS, -1)
    values: dict[str, str] = {}
    for index, line in enumerate(lines):
        trimmed = skip_spaces(line)
        ident = next((key for key in _IDS if trimmed.startswith(key)), None)
        if ident is None:
            continue
        counts[ident] += 1
        last_seen[ident] = index
        values[ident] = trimmed[len(ident):].strip(" \n")
    if any(count != 1 for count in counts.values()):
        raise CubError("make sure all parameters are described correctly")
    if max(last_seen.values()) > map_index:
        raise CubError("map description should be last")
    return SceneParams(
        no_path=values["NO "],
        so_path=values["SO "],
        we_path=values["WE "],
        ea_path=values["EA "],
        floor_str=values["F "],
        ceiling_str=values["C "],
    )


def check_textures(params: SceneParams) -> tuple[Image, Image, Image, Image]:
    """Load the north, south, west and east textures, failing on the first bad one."""
    images = []
    for path in (params.no_path, params.so_path, params.we_path, params.ea_path):
        if path is None:
            raise CubError("texture path is NULL")
        try:
            images.append(load_xpm(path))
        except XpmError as exc:
            raise CubError("invalid texture path") from exc
    return tuple(images)  # type: ignore[return-value]