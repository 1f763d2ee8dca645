import pytest

from png_frame.errors import BadSignature, FormatError, Truncated
from png_frame.signature import PNG_SIGNATURE, validate_signature


def test_signature_bytes():
    assert PNG_SIGNATURE == b"\x89PNG\r\n\x1a\n"


@pytest.mark.parametrize(["trailing"], (
    (b"",),
    (b"\x00\x00\x00\x0dIHDR",),
    (bytes(range(256)),),
))
def test_valid_signature(trailing):
    validate_signature(PNG_SIGNATURE + trailing)


def test_valid_signature_memoryview():
    validate_signature(memoryview(bytearray(PNG_SIGNATURE)))


@pytest.mark.parametrize(["buffer"], (
    (b"GIF89a\x00\x00",),
    (b"\x89PNG\r\n\n\n",),  # text mode mangled the DOS EOF byte
    (b"\x09PNG\r\n\x1a\n",),  # high bit stripped
    (bytes(8),),
))
def test_bad_signature(buffer):
    # Act
    with pytest.raises(BadSignature) as exc_info:
        validate_signature(buffer)

    # Assert
    assert exc_info.value.found == buffer[:8]
    assert isinstance(exc_info.value, FormatError)


@pytest.mark.parametrize(["length"], ((0,), (1,), (7,)))
def test_short_buffer_is_truncated(length):
    with pytest.raises(Truncated) as exc_info:
        validate_signature(PNG_SIGNATURE[:length])

    assert exc_info.value.field == "signature"
    assert exc_info.value.needed == 8
    assert exc_info.value.available == length


def test_pillow_output_has_signature(pillow_png):
    validate_signature(pillow_png("RGB", (4, 4)))
