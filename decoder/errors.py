"""
Decode error taxonomy.

Every failure is raised at the offending read and aborts the whole decode.
Only the public entry points (decoder.api) catch these.
"""


class DecodeError(ValueError):
    """Base class for all structural decode failures."""

    kind = "decode_error"

    def __init__(self, message: str, offset: int | None = None):
        super().__init__(message)
        self.offset = offset

    def __str__(self) -> str:
        msg = super().__str__()
        if self.offset is None:
            return f"{self.kind}: {msg}"
        return f"{self.kind} at offset {self.offset}: {msg}"


class ShortBuffer(DecodeError):
    """Buffer too short to hold the 8-byte discriminator."""

    kind = "short_buffer"


class OutOfBounds(DecodeError):
    """A fixed-width or length-prefixed read runs past the end of the buffer."""

    kind = "out_of_bounds"


class InvalidEncoding(DecodeError):
    """String bytes are not UTF-8, or input text is not valid base58/base64/hex."""

    kind = "invalid_encoding"


class InvalidLength(DecodeError):
    """A key field is not exactly 32 bytes."""

    kind = "invalid_length"


class DeserializeError(DecodeError):
    """Schema decode hit a structural mismatch (short, unknown tag, trailing bytes)."""

    kind = "deserialize_error"
