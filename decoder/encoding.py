"""
Byte <-> text conversions: base58 public keys and raw-input decoding.
"""
import base64
import binascii

import base58

from decoder.constants import PUBKEY_SIZE
from decoder.errors import InvalidEncoding, InvalidLength

INPUT_ENCODINGS = ("base58", "base64", "hex")


def encode_pubkey(raw: bytes) -> str:
    """Render a 32-byte public key as base58."""
    if len(raw) != PUBKEY_SIZE:
        raise InvalidLength(f"public key must be {PUBKEY_SIZE} bytes, got {len(raw)}")
    return base58.b58encode(bytes(raw)).decode()


def bytes_from_text(text: str, encoding: str = "base58") -> bytes:
    """
    Decode instruction/account data as returned by Solana RPC.

    jsonParsed instruction data is base58; getAccountInfo data is base64.
    Hex is accepted for hand-written test vectors.
    """
    text = text.strip()
    try:
        if encoding == "base58":
            return base58.b58decode(text)
        if encoding == "base64":
            return base64.b64decode(text, validate=True)
        if encoding == "hex":
            return bytes.fromhex(text.removeprefix("0x"))
    except (ValueError, binascii.Error) as e:
        raise InvalidEncoding(f"not valid {encoding}: {e}") from e
    raise InvalidEncoding(
        f"unknown input encoding {encoding!r} (expected one of {', '.join(INPUT_ENCODINGS)})"
    )
