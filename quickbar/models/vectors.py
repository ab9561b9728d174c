"""Small geometric value types shared by bars and shortcuts."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, slots=True)
class Vector4:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def to_abgr(self) -> int:
        """Pack an RGBA colour (components 0..1) into a 32-bit ABGR integer."""
        channels = [max(0, min(255, round(c * 255))) for c in (self.x, self.y, self.z, self.w)]
        r, g, b, a = channels
        return (a << 24) | (b << 16) | (g << 8) | r
