import pytest
from PIL import Image as PILImage

from softraster.image import Image


def _rgb_2x2():
    # (0,0) red, (1,0) green, (0,1) blue, (1,1) white
    data = bytes([255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 255])
    return Image(2, 2, 3, data)


def _rgba_2x1():
    data = bytes([10, 20, 30, 40, 50, 60, 70, 80])
    return Image(2, 1, 4, data)


def test_at_returns_pixel():
    img = _rgb_2x2()
    assert img.at(1, 0) == bytes([0, 255, 0])
    assert img.at(0, 1) == bytes([0, 0, 255])


def test_at_clamps_coordinates():
    img = _rgb_2x2()
    assert img.at(10, 10) == img.at(1, 1)
    assert img.at(5, 0) == img.at(1, 0)
    assert img.at(-3, 0) == img.at(0, 0)


def test_channel_at():
    img = _rgb_2x2()
    assert img.channel_at(0, 0, 0) == 255
    assert img.channel_at(0, 1, 2) == 255
    assert img.channel_at(0, 1, 0) == 0


def test_channel_at_bad_index():
    with pytest.raises(IndexError):
        _rgb_2x2().channel_at(0, 0, 3)


def test_alpha_without_alpha_channel():
    img = _rgb_2x2()
    assert img.alpha_at(0, 0) == 255
    assert img.alpha_at_unchecked(1, 1) == 255
    assert img.has_alpha() is False


def test_alpha_with_alpha_channel():
    img = _rgba_2x1()
    assert img.has_alpha() is True
    assert img.alpha_at(0, 0) == 40
    assert img.alpha_at(9, 9) == 80
    assert img.alpha_at_unchecked(1, 0) == 80


def test_at_unchecked_reads_without_clamping():
    img = _rgb_2x2()
    assert img.at_unchecked(1, 1) == bytes([255, 255, 255])
    # x past the row end runs into the next row
    assert img.at_unchecked(2, 0) == img.at(0, 1)


def test_at_unchecked_outside_data():
    with pytest.raises(IndexError):
        _rgb_2x2().at_unchecked(0, 2)


def test_data_size_mismatch():
    with pytest.raises(ValueError):
        Image(2, 2, 3, bytes(5))


def test_default_data_is_zeroed():
    img = Image(3, 2, 4)
    assert len(img.data) == 3 * 2 * 4
    assert set(img.data) == {0}


def test_free_then_access_raises():
    img = _rgb_2x2()
    img.free()
    assert len(img.data) == 0
    with pytest.raises(ValueError):
        img.at(0, 0)


def test_empty_image_access_raises():
    with pytest.raises(ValueError):
        Image().at(0, 0)


def test_load_rgb_round_trip(tmp_path):
    src = PILImage.new("RGB", (3, 2))
    src.putpixel((2, 1), (12, 34, 56))
    src.putpixel((0, 0), (200, 100, 50))
    path = tmp_path / "rgb.png"
    src.save(path)

    img = Image.load(path)
    assert (img.width, img.height, img.channels) == (3, 2, 3)
    assert img.at(2, 1) == bytes([12, 34, 56])
    assert img.at(0, 0) == bytes([200, 100, 50])
    assert img.has_alpha() is False


def test_load_rgba_round_trip(tmp_path):
    src = PILImage.new("RGBA", (2, 2), (1, 2, 3, 4))
    src.putpixel((1, 1), (9, 8, 7, 6))
    path = tmp_path / "rgba.png"
    src.save(path)

    img = Image.load(str(path))
    assert img.channels == 4
    assert img.at(1, 1) == bytes([9, 8, 7, 6])
    assert img.alpha_at(0, 0) == 4


def test_load_unsupported_mode(tmp_path):
    path = tmp_path / "grey.png"
    PILImage.new("L", (2, 2)).save(path)
    with pytest.raises(ValueError):
        Image.load(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        Image.load(tmp_path / "missing.png")