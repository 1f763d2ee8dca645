from __future__ import annotations
from enum import IntEnum
from typing import NamedTuple, Self
import logging
import struct

from png_frame.chunks import Chunk, ChunkType
from png_frame.errors import (
    InvalidEnumValue,
    InvalidHeaderField,
    UnexpectedChunkLength,
    UnexpectedChunkType,
)


logger = logging.getLogger(__name__)

IHDR_FORMAT = ">IIBBBBB"
IHDR_LENGTH = struct.calcsize(IHDR_FORMAT)
MAX_DIMENSION = 2**31 - 1


class ClosedEnum(IntEnum):
    @classmethod
    def decode(cls, field: str, value: int) -> Self:
        try:
            return cls(value)
        except ValueError:
            raise InvalidEnumValue(field, value) from None


class ColorType(ClosedEnum):
    GREYSCALE = 0
    TRUECOLOR = 2
    INDEXED = 3
    GREYSCALE_WITH_ALPHA = 4
    TRUECOLOR_WITH_ALPHA = 6

    @property
    def channels(self) -> int:
        return {
            ColorType.GREYSCALE: 1,
            ColorType.TRUECOLOR: 3,
            ColorType.INDEXED: 1,
            ColorType.GREYSCALE_WITH_ALPHA: 2,
            ColorType.TRUECOLOR_WITH_ALPHA: 4,
        }[self]

    @property
    def allowed_bit_depths(self) -> frozenset[int]:
        match self:
            case ColorType.GREYSCALE:
                return frozenset({1, 2, 4, 8, 16})
            case ColorType.INDEXED:
                return frozenset({1, 2, 4, 8})
            case _:
                return frozenset({8, 16})


class CompressionMethod(ClosedEnum):
    DEFLATE = 0


class FilterMethod(ClosedEnum):
    ADAPTIVE = 0


class InterlaceMethod(ClosedEnum):
    NONE = 0
    ADAM7 = 1


class ImageHeader(NamedTuple):
    width: int
    height: int
    bit_depth: int
    color_type: ColorType
    compression_method: CompressionMethod
    filter_method: FilterMethod
    interlace_method: InterlaceMethod
    raw_chunk: Chunk | None = None

    def __bytes__(self) -> bytes:
        return struct.pack(IHDR_FORMAT, *self[:7])

    def __repr__(self) -> str:
        # raw_chunk is left out, its views make for noisy output
        fields = ", ".join(f"{name}={value!r}" for name, value in zip(self._fields[:7], self))
        return f"{type(self).__name__}({fields})"

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    def validate(self) -> None:
        """
        The PNG spec puts limits on IHDR values that the raw layout can still represent.

        Raises:
            InvalidHeaderField: Width / Height - Must be between 1 and 2**31 - 1.
            InvalidHeaderField: Bit Depth - Must be one of the depths allowed for the colour type.
        """
        for field, value in (("width", self.width), ("height", self.height)):
            if not 0 < value <= MAX_DIMENSION:
                raise InvalidHeaderField(field, value, f"must be between 1 and {MAX_DIMENSION}")

        allowed = self.color_type.allowed_bit_depths
        if self.bit_depth not in allowed:
            raise InvalidHeaderField(
                "bit depth",
                self.bit_depth,
                f"{self.color_type.name} allows {sorted(allowed)}",
            )


def decode_header(chunk: Chunk, strict: bool = False) -> ImageHeader:
    """
    Decodes the 13 byte IHDR payload into typed fields.
    Every single byte code goes through its closed enumeration, there is no fallback value.

    Raises:
        UnexpectedChunkType: The chunk is not an IHDR chunk.
        UnexpectedChunkLength: The payload is not exactly 13 bytes.
        InvalidEnumValue: Colour type, compression, filter or interlace method is out of range.
        InvalidHeaderField: Only with strict=True, see ImageHeader.validate.
    """
    if chunk.chunk_type is not ChunkType.IHDR:
        raise UnexpectedChunkType(ChunkType.IHDR, chunk.chunk_type)

    if len(chunk.chunk_data) != IHDR_LENGTH:
        raise UnexpectedChunkLength(IHDR_LENGTH, len(chunk.chunk_data))

    width, height, bit_depth, colour_type, compression, filter_method, interlace = struct.unpack(
        IHDR_FORMAT, chunk.chunk_data
    )

    header = ImageHeader(
        width=width,
        height=height,
        bit_depth=bit_depth,
        color_type=ColorType.decode("color type", colour_type),
        compression_method=CompressionMethod.decode("compression method", compression),
        filter_method=FilterMethod.decode("filter method", filter_method),
        interlace_method=InterlaceMethod.decode("interlace method", interlace),
        raw_chunk=chunk,
    )

    if strict:
        header.validate()

    logger.debug("Decoded %r", header)
    return header
