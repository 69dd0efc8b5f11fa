"""Geometry: meshes built from sources, vertices and triangle lists."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .assets import Asset
from .sources import Source

__all__ = [
    "VerticesSemantic",
    "Vertices",
    "TrianglesSemantic",
    "Triangles",
    "Mesh",
    "Geometry",
]


class VerticesSemantic(enum.Enum):
    """Role of one vertices input."""

    POSITION = "POSITION"


@dataclass
class Vertices:
    """Maps vertex roles to the URLs of their sources."""

    inputs: dict[VerticesSemantic, str] = field(default_factory=dict)

    def add_input(self, semantic: VerticesSemantic, source: str) -> None:
        """Set the source for a role, replacing any earlier one."""
        self.inputs[semantic] = source

    @staticmethod
    def semantic_to_string(semantic) -> str:
        """Document name of a semantic, or an empty string for anything else."""
        return semantic.value if isinstance(semantic, VerticesSemantic) else ""


class TrianglesSemantic(enum.Enum):
    """Role of one triangles input."""

    VERTEX = "VERTEX"
    NORMAL = "NORMAL"
    TEXCOORD = "TEXCOORD"
    COLOR = "COLOR"


@dataclass
class Triangles:
    """A triangle list: inputs with offsets and the interleaved index data."""

    count: int
    material: str
    inputs: dict[TrianglesSemantic, tuple[str, int]] = field(default_factory=dict)
    p: list[int] = field(default_factory=list)

    @staticmethod
    def semantic_to_string(semantic) -> str:
        """Document name of a semantic, or an empty string for anything else."""
        return semantic.value if isinstance(semantic, TrianglesSemantic) else ""


@dataclass
class Mesh:
    """A mesh: its sources, its vertices and its triangle lists."""

    sources: dict[str, Source]
    vertices: Vertices
    triangles: list[Triangles] = field(default_factory=list)

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


@dataclass
class Geometry(Asset):
    """A geometry asset holding a mesh."""

    mesh: Mesh