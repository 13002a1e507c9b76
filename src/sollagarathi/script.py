"""Script detection for incoming queries."""

TAMIL_BLOCK_START = 0x0B80
TAMIL_BLOCK_END = 0x0BFF


def is_tamil(text: str) -> bool:
    """Return True if any character of ``text`` is in the Tamil Unicode block."""
    return any(TAMIL_BLOCK_START <= ord(ch) <= TAMIL_BLOCK_END for ch in text)
