"""
8-byte Anchor discriminator handling.

The tag is dropped without being compared to any expected value: a buffer
from the wrong program decodes as whatever its bytes happen to spell, or
fails structurally. identify_instruction() is the opt-in lookup for callers
that want to choose a parser by tag.
"""
from decoder.constants import DISCRIMINATOR_SIZE, KNOWN_DISCRIMINATORS
from decoder.errors import ShortBuffer


def split_discriminator(data: bytes | bytearray | memoryview) -> tuple[bytes, memoryview]:
    """Return (tag, payload). Raises ShortBuffer if data has fewer than 8 bytes."""
    view = memoryview(data).cast("B")
    if len(view) < DISCRIMINATOR_SIZE:
        raise ShortBuffer(
            f"need {DISCRIMINATOR_SIZE} discriminator bytes, got {len(view)}"
        )
    return view[:DISCRIMINATOR_SIZE].tobytes(), view[DISCRIMINATOR_SIZE:]


def strip_discriminator(data: bytes | bytearray | memoryview) -> memoryview:
    return split_discriminator(data)[1]


def identify_instruction(data: bytes | bytearray | memoryview) -> str | None:
    """Format name for a known discriminator, or None."""
    try:
        tag, _ = split_discriminator(data)
    except ShortBuffer:
        return None
    return KNOWN_DISCRIMINATORS.get(tag)
