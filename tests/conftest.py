from io import BytesIO
import struct
import zlib

from PIL import Image
import pytest

from png_frame.signature import PNG_SIGNATURE


def chunk_bytes(tag: bytes, payload: bytes, crc: bytes | None = None) -> bytes:
    if crc is None:
        crc = struct.pack(">I", zlib.crc32(payload, zlib.crc32(tag)))
    return struct.pack(">I4s", len(payload), tag) + payload + crc


def ihdr_payload(width=16, height=16, bit_depth=8, color_type=2, compression=0, filter_method=0, interlace=0) -> bytes:
    return struct.pack(">IIBBBBB", width, height, bit_depth, color_type, compression, filter_method, interlace)


@pytest.fixture
def make_chunk():
    return chunk_bytes


@pytest.fixture
def make_ihdr_payload():
    return ihdr_payload


@pytest.fixture
def make_png(make_chunk, make_ihdr_payload):
    def _make_png(**fields) -> bytes:
        return PNG_SIGNATURE + make_chunk(b"IHDR", make_ihdr_payload(**fields))
    return _make_png


@pytest.fixture
def pillow_png():
    def _pillow_png(mode: str, size: tuple[int, int]) -> bytes:
        buf = BytesIO()
        Image.new(mode, size).save(buf, format="PNG")
        return buf.getvalue()
    return _pillow_png
