"""RGB colours and colour helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour channel {name}={value} outside 0..255")

    def to_hex(self) -> int:
        """Return the colour packed as ``0xRRGGBB``."""
        return int(self.r) << 16 | int(self.g) << 8 | int(self.b)


def clamp(value: float, maximum: float) -> float:
    """Return ``value`` limited from above by ``maximum``."""
    if value > maximum:
        return maximum
    return value