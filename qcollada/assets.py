"""Library assets: cameras, lights, images, materials and animation clips."""

from __future__ import annotations

from dataclasses import dataclass, field

from .instances import InstanceAnimation, InstanceEffect

__all__ = [
    "Asset",
    "Camera",
    "PerspectiveCamera",
    "Light",
    "PointLight",
    "Image",
    "Material",
    "AnimationClip",
]


class Asset:
    """Base for anything stored in a document library and addressable by id."""


class Camera(Asset):
    """Base for cameras."""


@dataclass
class PerspectiveCamera(Camera):
    """A camera with a perspective projection."""

    xfov: float
    aspect: float
    znear: float
    zfar: float


class Light(Asset):
    """Base for lights."""


@dataclass
class PointLight(Light):
    """A point light with an RGB colour and attenuation factors."""

    color: tuple[float, float, float]
    constant_attenuation: float
    linear_attenuation: float
    quadratic_attenuation: float

    def __post_init__(self) -> None:
        components = tuple(float(c) for c in self.color)
        if len(components) != 3:
            raise ValueError(f"light colour needs 3 components, got {len(components)}")
        self.color = components


@dataclass
class Image(Asset):
    """An image referred to by its location."""

    init_from: str


@dataclass
class Material(Asset):
    """A named material that instantiates an effect."""

    name: str
    instance_effect: InstanceEffect


@dataclass
class AnimationClip(Asset):
    """A named group of animations played together."""

    name: str
    instance_animations: list[InstanceAnimation] = field(default_factory=list)