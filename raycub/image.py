"""In-memory pixel images with a configurable pixel size and byte order."""

from __future__ import annotations

_SUPPORTED_BPP = (8, 16, 24, 32)


class Image:
    """A rectangular pixel buffer laid out in rows padded to 32 bits."""

    def __init__(
        self,
        width: int,
        height: int,
        bits_per_pixel: int = 32,
        big_endian: bool = False,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        if bits_per_pixel not in _SUPPORTED_BPP:
            raise ValueError(f"unsupported bits per pixel: {bits_per_pixel}")
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.big_endian = big_endian
        self.bytes_per_pixel = bits_per_pixel // 8
        self.size_line = (width * bits_per_pixel + 31) // 32 * 4
        self.data = bytearray(self.size_line * height)

    @property
    def _byteorder(self) -> str:
        return "big" if self.big_endian else "little"

    def _offset(self, x: int, y: int) -> int:
        return y * self.size_line + x * self.bytes_per_pixel

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store a colour at (x, y); points outside the image are ignored."""
        if not self._contains(x, y):
            return
        opp = self.bytes_per_pixel
        value = color & ((1 << (8 * opp)) - 1)
        offset = self._offset(x, y)
        self.data[offset:offset + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the stored pixel value at (x, y)."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        offset = self._offset(x, y)
        return int.from_bytes(
            self.data[offset:offset + self.bytes_per_pixel], self._byteorder
        )

    def fill(self, color: int) -> None:
        """Set every pixel to one colour."""
        opp = self.bytes_per_pixel
        pixel = (color & ((1 << (8 * opp)) - 1)).to_bytes(opp, self._byteorder)
        row = pixel * self.width
        row += bytes(self.size_line - len(row))
        self.data[:] = row * self.height

    def to_rgb_bytes(self) -> bytes:
        """Pixels as packed 8-bit R, G, B triples, row after row, padding dropped."""
        out = bytearray(self.width * self.height * 3)
        row_rgb = self.width * 3
        for y in range(self.height):
            start = y * self.size_line
            target = out[y * row_rgb:(y + 1) * row_rgb]
            if self.bits_per_pixel == 32:
                row = self.data[start:start + self.width * 4]
                if self.big_endian:
                    target[0::3], target[1::3], target[2::3] = row[1::4], row[2::4], row[3::4]
                else:
                    target[0::3], target[1::3], target[2::3] = row[2::4], row[1::4], row[0::4]
            else:
                for x in range(self.width):
                    value = self.get_pixel(x, y)
                    target[x * 3:x * 3 + 3] = bytes(
                        ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
                    )
            out[y * row_rgb:(y + 1) * row_rgb] = target
        return bytes(out)


def _shift_and_width(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"invalid colour mask: {mask:#x}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


def channel_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Shift and bit width of each channel: (r_shift, r_bits, g_shift, g_bits, b_shift, b_bits)."""
    return (
        *_shift_and_width(red_mask),
        *_shift_and_width(green_mask),
        *_shift_and_width(blue_mask),
    )


def good_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert 0xRRGGBB to a pixel value for a visual of the given depth."""
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )