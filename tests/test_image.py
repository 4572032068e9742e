import pytest

from raycub.image import Image, channel_shifts, good_color


def _map_color(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize("size,kind", [(42, 1), (242, 1), (242, 2)])
@pytest.mark.parametrize("big_endian", [False, True])
def test_color_map_round_trip(size, kind, big_endian):
    img = Image(size, size, 32, big_endian)
    expected = {}
    for y in range(size):
        for x in range(size):
            color = _map_color(x, y, size, size, kind)
            img.put_pixel(x, y, color)
            expected[(x, y)] = color
    for (x, y), color in expected.items():
        assert img.get_pixel(x, y) == color


def test_local_endian_byte_layout():
    little = Image(1, 1, 32, False)
    little.put_pixel(0, 0, 0x11223344)
    assert bytes(little.data[:4]) == bytes([0x44, 0x33, 0x22, 0x11])
    big = Image(1, 1, 32, True)
    big.put_pixel(0, 0, 0x11223344)
    assert bytes(big.data[:4]) == bytes([0x11, 0x22, 0x33, 0x44])


@pytest.mark.parametrize("bpp", [8, 16, 24, 32])
def test_size_line_is_padded_to_32_bits(bpp):
    img = Image(42, 3, bpp)
    assert img.size_line % 4 == 0
    assert img.size_line >= 42 * bpp // 8
    assert len(img.data) == img.size_line * 3


def test_out_of_bounds_put_is_ignored():
    img = Image(4, 4)
    before = bytes(img.data)
    img.put_pixel(-1, 0, 0xFFFFFF)
    img.put_pixel(4, 0, 0xFFFFFF)
    img.put_pixel(0, 4, 0xFFFFFF)
    assert bytes(img.data) == before


def test_out_of_bounds_get_raises():
    img = Image(4, 4)
    with pytest.raises(IndexError):
        img.get_pixel(4, 0)


def test_fill_sets_every_pixel():
    img = Image(5, 3, 24, True)
    img.fill(0x123456)
    assert {img.get_pixel(x, y) for x in range(5) for y in range(3)} == {0x123456}


@pytest.mark.parametrize("bpp,big_endian", [(32, False), (32, True), (24, False)])
def test_rgb_bytes_match_pixels(bpp, big_endian):
    img = Image(7, 5, bpp, big_endian)
    for y in range(5):
        for x in range(7):
            img.put_pixel(x, y, _map_color(x, y, 7, 5, 1))
    rgb = img.to_rgb_bytes()
    assert len(rgb) == 7 * 5 * 3
    for y in range(5):
        for x in range(7):
            value = img.get_pixel(x, y)
            i = (y * 7 + x) * 3
            assert rgb[i] == (value >> 16) & 0xFF
            assert rgb[i + 1] == (value >> 8) & 0xFF
            assert rgb[i + 2] == value & 0xFF


def test_invalid_images_rejected():
    with pytest.raises(ValueError):
        Image(0, 4)
    with pytest.raises(ValueError):
        Image(4, 4, 12)


def test_good_color_deep_visual_is_identity():
    shifts = channel_shifts(0xFF0000, 0xFF00, 0xFF)
    assert good_color(0x123456, 24, shifts) == 0x123456


def test_good_color_16_bit_extremes():
    red, green, blue = 0xF800, 0x07E0, 0x001F
    shifts = channel_shifts(red, green, blue)
    assert good_color(0xFFFFFF, 16, shifts) == red | green | blue
    assert good_color(0x000000, 16, shifts) == 0
    assert good_color(0xFF0000, 16, shifts) == red
    assert good_color(0x0000FF, 16, shifts) == blue


def test_channel_shifts_rejects_empty_mask():
    with pytest.raises(ValueError):
        channel_shifts(0, 0xFF00, 0xFF)