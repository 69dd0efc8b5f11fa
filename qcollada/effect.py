"""Effects: Phong shading colours and an optional texture sampler."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from .assets import Asset

__all__ = ["Color", "Phong", "Sampler2D", "Effect"]


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour; a colour with missing or out-of-range parts is invalid."""

    red: int | None = None
    green: int | None = None
    blue: int | None = None
    alpha: int | None = 255

    @classmethod
    def from_floats(cls, red: float, green: float, blue: float, alpha: float) -> Color:
        """Build a colour from components in the range 0..1, truncating to 0..255."""
        return cls(*(int(_f32(_f32(c) * 255)) for c in (red, green, blue, alpha)))

    def is_valid(self) -> bool:
        """True when every component is set and within 0..255."""
        parts = (self.red, self.green, self.blue, self.alpha)
        return all(p is not None and 0 <= p <= 255 for p in parts)


@dataclass
class Phong:
    """Colours and shininess of the Phong shading model."""

    emission: Color = field(default_factory=Color)
    ambient: Color = field(default_factory=Color)
    diffuse: Color = field(default_factory=Color)
    specular: Color = field(default_factory=Color)
    shininess: float = 0.0


@dataclass
class Sampler2D:
    """A 2D texture sampler reading from an image."""

    source: str


@dataclass
class Effect(Asset):
    """A shading effect, textured when it has a sampler."""

    phong: Phong
    sampler2d: Sampler2D | None = None