"""Reading .cub scene files and classifying their lines."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

HOLE = "*"
"""Marker for cells outside the playable area once a map is made rectangular."""

_MAP_CHARS = frozenset(" 01NSEW\n")
_PLAYER_CHARS = frozenset("NSEW")
_GRID_CHARS = frozenset("01NSEW\n") | {HOLE, "\0"}


class CubError(ValueError):
    """Raised when a scene file or its contents are not valid."""


def strspn(text: str, accept: str) -> int:
    """Length of the leading part of text made only of characters in accept."""
    count = 0
    for char in text:
        if char not in accept:
            break
        count += 1
    return count


def is_map_line(line: str) -> bool:
    """True if a line holds only map characters and is not blank."""
    if not line or any(char not in _MAP_CHARS for char in line):
        return False
    return strspn(line, " \n") != len(line)


def is_player(char: str) -> bool:
    """True for one of the player start markers N, S, E and W."""
    return char in _PLAYER_CHARS


def valid_char(line: str) -> bool:
    """True if every character of a rectangular map row is allowed."""
    return all(char in _GRID_CHARS for char in line)


def skip_spaces(line: str) -> str:
    """The line without its leading spaces and tabs."""
    return line.lstrip(" \t")


def valid_name(name: str | os.PathLike[str]) -> str:
    """Check that a file name ends in .cub and return it as a string."""
    name = os.fspath(name)
    if len(name) < 5:
        raise CubError("input must be : <name.cub>")
    if name[-4:] != ".cub":
        raise CubError("extension format : <.cub>")
    return name


def split_scene(lines: Iterable[str]) -> tuple[list[str], int]:
    """Collect scene lines and find where the map starts.

    Returns the kept lines and the index of the first map line, or -1 when
    there is none. Once the map has started, a line starting with a newline,
    a NUL or a tab is an error: the map must close the file.
    """
    kept: list[str] = []
    map_index = -1
    for line in lines:
        if map_index == -1 and is_map_line(line):
            map_index = len(kept)
        if map_index != -1:
            if line[:1] in ("", "\n", "\0", "\t"):
                raise CubError("map description must be last")
        elif not line:
            continue
        kept.append(line)
    if not kept:
        raise CubError("infile is empty")
    return kept, map_index


def _raw_lines(text: str) -> Iterator[str]:
    pieces = text.split("\n")
    for piece in pieces[:-1]:
        yield piece + "\n"
    if pieces[-1]:
        yield pieces[-1]


def read_scene_lines(path: str | os.PathLike[str]) -> tuple[list[str], int]:
    """Read a .cub file and split it as split_scene does."""
    name = valid_name(path)
    try:
        data = Path(name).read_bytes()
    except OSError as exc:
        raise CubError("opening map") from exc
    text = data.decode("utf-8", errors="surrogateescape")
    return split_scene(_raw_lines(text))