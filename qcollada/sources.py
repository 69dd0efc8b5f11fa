"""Data sources shared by meshes, animations and skins."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

__all__ = ["ParamType", "Param", "Accessor", "Source", "FloatSource", "NameSource"]


class ParamType(enum.Enum):
    """Value type of one accessor parameter."""

    FLOAT = "float"
    FLOAT4X4 = "float4x4"
    NAME = "name"


@dataclass
class Param:
    """One named parameter of an accessor; ``type`` is None when unrecognised."""

    name: str = ""
    type: ParamType | None = None


@dataclass
class Accessor:
    """Describes how the values of a source are grouped."""

    params: list[Param] = field(default_factory=list)
    count: int = 0
    stride: int = 0

    def add_param(self, param: Param) -> None:
        """Append a parameter, keeping document order."""
        self.params.append(param)


@dataclass
class Source:
    """Base for arrays of values read through an accessor."""

    count: int = 0
    accessor: Accessor = field(default_factory=Accessor)


@dataclass
class FloatSource(Source):
    """A source holding floating-point values."""

    data: list[float] = field(default_factory=list)


@dataclass
class NameSource(Source):
    """A source holding names, such as joint identifiers."""

    data: list[str] = field(default_factory=list)