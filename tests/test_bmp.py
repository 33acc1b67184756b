import struct

import pytest

from raycube.bmp import bmp_header, encode_bmp, write_bmp
from raycube.colors import create_trgb
from raycube.image import Image


def _sample():
    img = Image.blank(3, 2)
    img.put(0, 0, 0x112233)
    img.put(2, 0, 0x445566)
    img.put(0, 1, 0x778899)
    img.put(1, 1, 0xAABBCC)
    return img


def test_header_fixed_fields():
    header = bmp_header(5, 7)
    assert len(header) == 54
    assert header[:2] == b"BM"
    assert header[10] == 54
    assert header[14] == 40
    assert struct.unpack_from("<H", header, 26)[0] == 1
    assert struct.unpack_from("<H", header, 28)[0] == 24


def test_header_dimensions():
    header = bmp_header(5, 7)
    assert struct.unpack_from("<ii", header, 18) == (5, 7)


def test_header_filesize_matches_encoding():
    img = _sample()
    data = encode_bmp(img)
    assert struct.unpack_from("<I", data, 2)[0] == len(data)
    assert data[:54] == bmp_header(img.width, img.height)


def test_bottom_row_written_first():
    img = _sample()
    data = encode_bmp(img)
    pixels = data[54:]
    first = [int.from_bytes(pixels[i * 3:i * 3 + 3], "little") for i in range(img.width)]
    assert first == [img.pixel(x, img.height - 1) for x in range(img.width)]
    second = pixels[img.width * 3:]
    assert [int.from_bytes(second[i * 3:i * 3 + 3], "little") for i in range(img.width)] == [
        img.pixel(x, 0) for x in range(img.width)
    ]


def test_alpha_is_dropped():
    img = Image(1, 1, [create_trgb(0xFF, 1, 2, 3)])
    data = encode_bmp(img)
    assert int.from_bytes(data[54:57], "little") == create_trgb(0, 1, 2, 3)


def test_write_bmp(tmp_path):
    img = _sample()
    path = tmp_path / "img.bmp"
    write_bmp(img, path)
    assert path.read_bytes() == encode_bmp(img)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        bmp_header(-1, 2)