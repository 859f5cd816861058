"""
Sequential little-endian reader over an immutable byte buffer.

One Cursor belongs to exactly one decode call. Every read either consumes
its full width and advances, or raises and leaves the position untouched.
"""
import struct

from decoder.constants import BOOL_SIZE, PUBKEY_SIZE, STRING_PREFIX_SIZE, U32_SIZE, U64_SIZE
from decoder.encoding import encode_pubkey
from decoder.errors import InvalidEncoding, OutOfBounds


class Cursor:
    __slots__ = ("buf", "position")

    def __init__(self, data: bytes | bytearray | memoryview, offset: int = 0):
        self.buf = memoryview(data).cast("B")
        if not 0 <= offset <= len(self.buf):
            raise OutOfBounds(f"start offset outside buffer of {len(self.buf)} bytes", offset)
        self.position = offset

    @property
    def remaining(self) -> int:
        return len(self.buf) - self.position

    def _require(self, n: int, what: str) -> None:
        if n < 0:
            raise OutOfBounds(f"{what}: negative width {n}", self.position)
        if n > self.remaining:
            raise OutOfBounds(
                f"{what} needs {n} bytes, {self.remaining} remaining", self.position
            )

    def read_bytes(self, n: int) -> bytes:
        self._require(n, f"read of {n} bytes")
        out = self.buf[self.position : self.position + n].tobytes()
        self.position += n
        return out

    def _unpack(self, fmt: str, width: int, what: str):
        self._require(width, what)
        value = struct.unpack_from(fmt, self.buf, self.position)[0]
        self.position += width
        return value

    def read_u8(self) -> int:
        return self._unpack("<B", 1, "u8")

    def read_u32(self) -> int:
        return self._unpack("<I", U32_SIZE, "u32")

    def read_u64(self) -> int:
        return self._unpack("<Q", U64_SIZE, "u64")

    def read_bool(self) -> bool:
        return self._unpack("<B", BOOL_SIZE, "bool") != 0

    def read_string(self) -> str:
        """u32 length prefix followed by that many UTF-8 bytes."""
        start = self.position
        self._require(STRING_PREFIX_SIZE, "string length prefix")
        length = struct.unpack_from("<I", self.buf, start)[0]
        body = start + STRING_PREFIX_SIZE
        if length > len(self.buf) - body:
            raise OutOfBounds(
                f"string of {length} bytes, {len(self.buf) - body} remaining", body
            )
        try:
            value = self.buf[body : body + length].tobytes().decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidEncoding(f"string is not valid UTF-8: {e.reason}", body) from e
        self.position = body + length
        return value

    def read_pubkey(self) -> str:
        """32 raw bytes, rendered as base58."""
        self._require(PUBKEY_SIZE, "public key")
        key = encode_pubkey(self.buf[self.position : self.position + PUBKEY_SIZE].tobytes())
        self.position += PUBKEY_SIZE
        return key
