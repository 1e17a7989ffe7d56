"""
Version packing helpers.

The settings file records the application version as a single integer so
that newer (incompatible) files can be detected with a plain comparison.
"""

from typing import Tuple

from .. import __version__


def pack_version(version: str) -> int:
    """
    Pack a dotted ``MAJOR.MINOR.PATCH`` version into an integer.

    Args:
        version: Version string, e.g. "1.2.3"

    Returns:
        ``(MAJOR << 16) | (MINOR << 8) | PATCH``

    Raises:
        ValueError: If the string is malformed or a component exceeds 255
    """
    parts = version.strip().split('.')
    if len(parts) != 3:
        raise ValueError(f"Expected MAJOR.MINOR.PATCH, got {version!r}")

    packed = 0
    for part in parts:
        number = int(part)
        if not 0 <= number <= 0xFF:
            raise ValueError(f"Version component out of range: {part}")
        packed = (packed << 8) | number

    return packed


def unpack_version(packed: int) -> Tuple[int, int, int]:
    """Split a packed version back into (major, minor, patch)."""
    if packed < 0 or packed > 0xFFFFFF:
        raise ValueError(f"Packed version out of range: {packed}")
    return (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF


def format_version(packed: int) -> str:
    """Render a packed version as a dotted string."""
    return ".".join(str(part) for part in unpack_version(packed))


VER_PACKED = pack_version(__version__)
