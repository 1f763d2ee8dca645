import logging

from png_frame.errors import BadSignature, Truncated


logger = logging.getLogger(__name__)

PNG_SIGNATURE = bytes.fromhex("89504E470D0A1A0A")


def validate_signature(buffer: bytes | bytearray | memoryview) -> None:
    """
    Checks the first 8 bytes of the buffer match the expected PNG signature bytes.

    Raises:
        Truncated: The buffer holds fewer than 8 bytes.
        BadSignature: The first 8 bytes are anything other than 89 50 4E 47 0D 0A 1A 0A.
    """
    if len(buffer) < len(PNG_SIGNATURE):
        raise Truncated("signature", len(PNG_SIGNATURE), len(buffer))

    signature = bytes(buffer[: len(PNG_SIGNATURE)])
    if signature != PNG_SIGNATURE:
        raise BadSignature(signature)

    logger.debug("That there's a PNG.")
