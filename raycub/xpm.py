"""Reading XPM images into Image buffers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from raycub.colornames import lookup_color
from raycub.image import Image
from raycub.textscan import find, find_unquoted, split_words

_TRANSPARENT = 0xFF000000
_ATOI = re.compile(r"\s*([+-]?\d+)")
_STRTOL_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_NAME_LIMIT = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def strip_comments(text: str) -> str:
    """Blank out C comments outside quoted strings, keeping the text length."""
    while (begin := find_unquoted(text, "/*", len(text))) != -1:
        rest = text[begin + 2:]
        end = find(rest, "*/", len(rest))
        stop = len(text) if end == -1 else begin + end + 4
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := find_unquoted(text, "//", len(text))) != -1:
        rest = text[begin + 2:]
        end = find(rest, "\n", len(rest))
        stop = len(text) if end == -1 else begin + end + 3
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings."""
    pos = 0
    while True:
        rest = text[pos:]
        start = find(rest, '"', len(rest))
        if start == -1:
            return
        after = rest[start + 1:]
        end = find(after, '"', len(after))
        if end == -1:
            return
        yield after[:end]
        pos += start + end + 2


def text_rgb(name: str, end: str | None = None) -> int:
    """Colour value of an XPM colour spec: '#hex', a colour name, or 0 if unknown."""
    if name.startswith("#"):
        match = _STRTOL_HEX.match(name[1:])
        digits = match.group(2) if match else ""
        value = int(digits, 16) if digits else 0
        return -value if match and match.group(1) == "-" else value
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    color = lookup_color(name)
    return 0 if color is None else color


def color_key(chars: str) -> int:
    """Integer key for the characters that name a colour in the pixel rows."""
    key = 0
    for char in chars:
        key = (key << 8) + ord(char)
    return key


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an Image from XPM strings: header, colour lines, then pixel rows."""
    rows = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(rows)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError("header values must be non-zero")
    last_wins = cpp <= 2

    colors: dict[int, int] = {}
    for _ in range(ncolors):
        line = next_line("colour line")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour in line {line!r}") from None
        if index >= len(words):
            raise XpmError(f"no colour in line {line!r}")
        end = words[index + 1] if index + 1 < len(words) else None
        rgb = text_rgb(words[index], end)
        key = color_key(line[:cpp])
        if last_wins:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    image = Image(width, height, 32, False)
    for y in range(height):
        line = next_line("pixel row")
        if len(line) < cpp * width:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            col = colors.get(color_key(line[cpp * x:cpp * (x + 1)]), 0)
            if col == -1:
                col = _TRANSPARENT
            image.put_pixel(x, y, col)
    return image


def load_xpm(path: str | Path) -> Image:
    """Read an XPM file into an Image."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))