"""Animations: keyframe sources, the sampler that reads them and the channel they drive."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .assets import Asset
from .sources import Source

__all__ = ["SamplerSemantic", "Sampler", "Channel", "Animation"]


class SamplerSemantic(enum.Enum):
    """Role of one sampler input."""

    INPUT = "INPUT"
    OUTPUT = "OUTPUT"
    INTERPOLATION = "INTERPOLATION"


@dataclass
class Sampler:
    """Maps each sampler role to the URL of the source that fills it."""

    inputs: dict[SamplerSemantic, str] = field(default_factory=dict)


@dataclass
class Channel:
    """Connects a sampler to the scene element it animates."""

    source: str
    target: str


@dataclass
class Animation(Asset):
    """An animation made of named sources, one sampler and one channel."""

    sources: dict[str, Source]
    sampler: Sampler
    channel: Channel

    def __post_init__(self) -> None:
        self.sources = dict(self.sources)

    def source_ids(self) -> list[str]:
        """Ids of the sources, in sorted order."""
        return sorted(self.sources)

    def get_source(self, url: str) -> Source:
        """Return the source a URL such as ``#id`` points to."""
        source_id = url[1:]
        try:
            return self.sources[source_id]
        except KeyError:
            raise KeyError(f"no source with id {source_id!r}") from None