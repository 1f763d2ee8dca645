class FormatError(ValueError):
    """Base class for everything that can go wrong while decoding PNG framing."""


class BadSignature(FormatError):
    def __init__(self, found: bytes) -> None:
        self.found = bytes(found)
        super().__init__(f"That's not a PNG chief. Signature was {self.found.hex(' ')}")


class Truncated(FormatError):
    def __init__(self, field: str, needed: int, available: int) -> None:
        self.field = field
        self.needed = needed
        self.available = available
        super().__init__(
            f"Data ends before {field} could be read: needed {needed} bytes, {available} available"
        )


class UnknownChunkType(FormatError):
    def __init__(self, tag: bytes) -> None:
        self.tag = bytes(tag)
        super().__init__(f"Unknown chunk type: {self.tag!r}")


class UnexpectedChunkType(FormatError):
    def __init__(self, expected, actual) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected a {expected.name} chunk, Got: {actual.name}")


class UnexpectedChunkLength(FormatError):
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid chunk length: Expected {expected}, Got: {actual}")


class InvalidEnumValue(FormatError):
    def __init__(self, field: str, value: int) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value}")


class InvalidHeaderField(FormatError):
    def __init__(self, field: str, value: int, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}. Got {value}")
