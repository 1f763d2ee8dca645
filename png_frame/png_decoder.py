from __future__ import annotations
from functools import cached_property
from pathlib import Path
import logging

from png_frame.chunks import Chunk, read_chunk
from png_frame.header import ImageHeader, decode_header
from png_frame.signature import PNG_SIGNATURE, validate_signature


# https://www.w3.org/TR/png-3/#5PNG-file-signature

logger = logging.getLogger(__name__)


class Services:
    def __init__(self, config: dict) -> None:
        self.config = config

    @cached_property
    def png_decoder(self) -> PNGDecoder:
        return PNGDecoder.from_path(self.config["fp"], strict=self.config.get("strict", False))


class PNGDecoder:
    first_chunk: Chunk | None
    _ihdr: ImageHeader | None

    def __init__(self, buffer: bytes | bytearray | memoryview, strict: bool = False) -> None:
        self.buffer = buffer
        self.strict = strict
        self.first_chunk = None
        self._ihdr = None

    @classmethod
    def from_path(cls, fp: str | Path, strict: bool = False) -> PNGDecoder:
        path = cls._parse_fp(fp)
        if not path.exists():
            raise ValueError("Path does not exist.")

        logger.debug("Reading %s", path)
        return cls(path.read_bytes(), strict=strict)

    @staticmethod
    def _parse_fp(fp: str | Path) -> Path:
        if not isinstance(fp, (str, Path)):
            raise ValueError(
                "Invalid path type. Path should be a string or Pathlib.Path"
            )
        if isinstance(fp, Path):
            return fp
        else:
            return Path(fp)

    @property
    def ihdr(self) -> ImageHeader:
        if self._ihdr is None:
            return self.decode()
        return self._ihdr

    @property
    def cursor(self) -> int:
        """Offset of the chunk following the IHDR chunk."""
        if self.first_chunk is None:
            return len(PNG_SIGNATURE)
        return len(PNG_SIGNATURE) + self.first_chunk.chunk_size

    def decode(self) -> ImageHeader:
        """
        Validates the signature, reads the chunk that follows it and decodes it as the image header.
        The IHDR chunk must come first in a PNG datastream, anything else in that position is an error.

        Raises:
            FormatError: Any of the signature, chunk or header errors.

        Returns:
            ImageHeader: Decoded header, with raw_chunk pointing back at the chunk it came from.
        """
        validate_signature(self.buffer)

        self.first_chunk = read_chunk(self.buffer, len(PNG_SIGNATURE))
        self._ihdr = decode_header(self.first_chunk, strict=self.strict)
        return self._ihdr
