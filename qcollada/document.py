"""A whole COLLADA document: its libraries keyed by id and the scene it shows."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from .animation import Animation
from .assets import AnimationClip, Asset, Camera, Image, Light, Material
from .controller import Controller
from .effect import Effect
from .geometry import Geometry
from .parse_animation import parse_animation_clips, parse_animations
from .parse_assets import (
    parse_cameras,
    parse_effects,
    parse_images,
    parse_lights,
    parse_materials,
)
from .parse_controller import parse_controllers
from .parse_geometry import parse_geometries
from .parse_scene import parse_scene, parse_visual_scenes
from .visualscene import Scene, VisualScene
from .xmlutil import parse_xml

__all__ = ["Collada"]


@dataclass
class Collada:
    """The libraries of a document and the scene it shows."""

    cameras: dict[str, Camera] = field(default_factory=dict)
    lights: dict[str, Light] = field(default_factory=dict)
    images: dict[str, Image] = field(default_factory=dict)
    effects: dict[str, Effect] = field(default_factory=dict)
    materials: dict[str, Material] = field(default_factory=dict)
    geometries: dict[str, Geometry] = field(default_factory=dict)
    animations: dict[str, Animation] = field(default_factory=dict)
    animation_clips: dict[str, AnimationClip] = field(default_factory=dict)
    controllers: dict[str, Controller] = field(default_factory=dict)
    visual_scenes: dict[str, VisualScene] = field(default_factory=dict)
    scene: Scene | None = None

    def _libraries(self) -> Iterator[Mapping[str, Asset]]:
        # Lookup order decides which asset wins when ids are shared.
        yield self.cameras
        yield self.lights
        yield self.images
        yield self.effects
        yield self.materials
        yield self.geometries
        yield self.animations
        yield self.animation_clips
        yield self.controllers
        yield self.visual_scenes

    def resolve(self, url: str) -> Asset | None:
        """Return the asset a URL such as ``#id`` names, or None when there is none."""
        asset_id = url[1:]
        for library in self._libraries():
            if asset_id in library:
                return library[asset_id]
        return None

    @classmethod
    def from_element(cls, root: ET.Element) -> Collada:
        """Build a document from its parsed root element."""
        return cls(
            cameras=parse_cameras(root),
            lights=parse_lights(root),
            images=parse_images(root),
            effects=parse_effects(root),
            materials=parse_materials(root),
            geometries=parse_geometries(root),
            animations=parse_animations(root),
            animation_clips=parse_animation_clips(root),
            controllers=parse_controllers(root),
            visual_scenes=parse_visual_scenes(root),
            scene=parse_scene(root),
        )

    @classmethod
    def from_string(cls, text: str | bytes) -> Collada:
        """Build a document from XML text; malformed XML raises ValueError."""
        return cls.from_element(parse_xml(text))

    @classmethod
    def parse(cls, filename: str | os.PathLike) -> Collada:
        """Read a document from a file; a missing or unreadable file raises OSError."""
        with open(filename, "rb") as handle:
            data = handle.read()
        return cls.from_string(data)