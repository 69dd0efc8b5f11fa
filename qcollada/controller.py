"""Skin controllers: bind matrix, joints and per-vertex weights."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .assets import Asset
from .sources import Source

__all__ = [
    "JointsSemantic",
    "Joints",
    "VertexWeightsSemantic",
    "VertexWeights",
    "Skin",
    "Controller",
]

Matrix4 = tuple[tuple[float, float, float, float], ...]

_IDENTITY: Matrix4 = tuple(
    tuple(1.0 if row == col else 0.0 for col in range(4)) for row in range(4)
)


def _as_matrix(rows) -> Matrix4:
    matrix = tuple(tuple(float(value) for value in row) for row in rows)
    if len(matrix) != 4 or any(len(row) != 4 for row in matrix):
        raise ValueError("a 4x4 matrix needs 4 rows of 4 values")
    return matrix


class JointsSemantic(enum.Enum):
    """Role of one joints input."""

    JOINT = "JOINT"
    INV_BIND_MATRIX = "INV_BIND_MATRIX"


@dataclass
class Joints:
    """Maps joint roles to the URLs of their sources."""

    inputs: dict[JointsSemantic, str] = field(default_factory=dict)

    def add_input(self, semantic: JointsSemantic, source: str) -> None:
        """Set the source for a role, replacing any earlier one."""
        self.inputs[semantic] = source


class VertexWeightsSemantic(enum.Enum):
    """Role of one vertex-weights input."""

    JOINT = "JOINT"
    WEIGHT = "WEIGHT"


@dataclass
class VertexWeights:
    """Joint influences per vertex: counts, index pairs and their inputs."""

    count: int
    vcount: list[int]
    v: list[int]
    inputs: dict[VertexWeightsSemantic, tuple[str, int]] = field(default_factory=dict)


@dataclass
class Skin:
    """Binds a mesh to a skeleton."""

    source: str
    bind_shape_matrix: Matrix4
    sources: dict[str, Source]
    joints: Joints
    vertex_weights: VertexWeights

    def __post_init__(self) -> None:
        self.bind_shape_matrix = _as_matrix(self.bind_shape_matrix)
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
class Controller(Asset):
    """A controller asset; only skins are supported."""

    skin: Skin