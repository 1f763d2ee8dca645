from __future__ import annotations
from enum import Enum
from typing import NamedTuple
import logging
import struct
import zlib

from png_frame.errors import Truncated, UnknownChunkType


# https://www.w3.org/TR/png-3/#5Chunk-layout

logger = logging.getLogger(__name__)

LENGTH_SIZE = 4
TYPE_SIZE = 4
CRC_SIZE = 4
CHUNK_OVERHEAD = LENGTH_SIZE + TYPE_SIZE + CRC_SIZE


class ChunkType(Enum):
    IHDR = b"IHDR"
    PLTE = b"PLTE"
    IDAT = b"IDAT"
    IEND = b"IEND"
    iCCP = b"iCCP"

    @classmethod
    def from_tag(cls, tag: bytes) -> ChunkType:
        try:
            return cls(bytes(tag))
        except ValueError:
            raise UnknownChunkType(tag) from None

    @property
    def description(self) -> str:
        return {
            ChunkType.IHDR: "image header",
            ChunkType.PLTE: "palette",
            ChunkType.IDAT: "image data",
            ChunkType.IEND: "image trailer",
            ChunkType.iCCP: "embedded ICC profile",
        }[self]


class Chunk(NamedTuple):
    """
    A single chunk record. chunk_data and crc are views into the buffer the chunk
    was read from, so the chunk is only valid while that buffer is.
    """
    length: int
    chunk_type: ChunkType
    chunk_data: memoryview
    crc: memoryview

    @property
    def chunk_size(self) -> int:
        # length + type + data + crc, ie how far to move a cursor to reach the next chunk
        return CHUNK_OVERHEAD + self.length

    def __bytes__(self) -> bytes:
        head = struct.pack(">I4s", self.length, self.chunk_type.value)
        return b"".join([head, self.chunk_data, self.crc])

    @staticmethod
    def calc_crc(chunk_data, chunk_type: ChunkType) -> int:
        return zlib.crc32(
            chunk_data, zlib.crc32(struct.pack(">4s", chunk_type.value))
        )


def _take(view: memoryview, start: int, size: int, field: str) -> memoryview:
    available = max(len(view) - start, 0)
    if size > available:
        raise Truncated(field, size, available)
    return view[start:start + size]


def read_chunk(buffer: bytes | bytearray | memoryview, offset: int = 0) -> Chunk:
    """
    Parses the chunk record starting at offset.
    Nothing is copied: the returned chunk holds views into buffer.

    Raises:
        Truncated: The buffer ends before the length, type, data or crc field is complete.
        UnknownChunkType: The type tag is not one of the recognised chunk types.

    Returns:
        Chunk: Use chunk.chunk_size to advance to the next chunk.
    """
    view = memoryview(buffer)[offset:]
    cursor = 0

    length, *_ = struct.unpack(">I", _take(view, cursor, LENGTH_SIZE, "length"))
    cursor += LENGTH_SIZE

    chunk_type = ChunkType.from_tag(_take(view, cursor, TYPE_SIZE, "chunk type"))
    cursor += TYPE_SIZE

    chunk_data = _take(view, cursor, length, "chunk data")
    cursor += length

    crc = _take(view, cursor, CRC_SIZE, "crc")

    logger.debug("Read %s chunk at offset %d with length %d", chunk_type.name, offset, length)
    return Chunk(length, chunk_type, chunk_data, crc)
