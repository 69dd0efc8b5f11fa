"""Instances that refer to library entries by URL."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = [
    "NodeItem",
    "InstanceCamera",
    "InstanceLight",
    "InstanceMaterial",
    "InstanceGeometry",
    "InstanceController",
    "InstanceAnimation",
    "InstanceEffect",
    "InstanceVisualScene",
]


@dataclass
class NodeItem:
    """Something placed in a scene node, referring to a library entry."""

    url: str


@dataclass
class InstanceCamera(NodeItem):
    """A camera placed in a node."""


@dataclass
class InstanceLight(NodeItem):
    """A light placed in a node."""


@dataclass
class InstanceMaterial:
    """Binds a material symbol used by geometry to a material in the library."""

    symbol: str
    target: str


@dataclass
class InstanceGeometry(NodeItem):
    """A geometry placed in a node with its material bindings."""

    instance_materials: list[InstanceMaterial] = field(default_factory=list)


@dataclass
class InstanceController(NodeItem):
    """A skin controller placed in a node, with its skeleton root."""

    skeleton: str = ""
    instance_materials: list[InstanceMaterial] = field(default_factory=list)


@dataclass
class InstanceAnimation:
    """Reference to an animation from an animation clip."""

    url: str


@dataclass
class InstanceEffect:
    """Reference to an effect from a material."""

    url: str


@dataclass
class InstanceVisualScene:
    """Reference to the visual scene that a document shows."""

    url: str