"""Readers for the camera, light, image, effect and material libraries."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterable

from .assets import Camera, Image, Light, Material, PerspectiveCamera, PointLight
from .effect import Color, Effect, Phong, Sampler2D
from .instances import InstanceEffect
from .xmlutil import find_all, first, split_ws, text_of, to_float

__all__ = [
    "parse_camera",
    "parse_cameras",
    "parse_light",
    "parse_lights",
    "parse_image",
    "parse_images",
    "parse_effect",
    "parse_effects",
    "parse_material",
    "parse_materials",
]


def _attr(element: ET.Element | None, name: str) -> str:
    return "" if element is None else element.get(name, "")


def _collect(elements: Iterable[ET.Element], parse: Callable) -> dict:
    assets = {}
    for element in elements:
        asset = parse(element)
        if asset is not None:
            assets[_attr(element, "id")] = asset
    return assets


def _library(root: ET.Element, library: str, item: str) -> list[ET.Element]:
    return find_all(first(root, library), item)


def _float_of(element: ET.Element, tag: str) -> float:
    return to_float(text_of(first(element, tag)))


def parse_camera(element: ET.Element) -> Camera | None:
    """Read a camera; only perspective cameras are supported, others give None."""
    if not find_all(element, "perspective"):
        return None
    return PerspectiveCamera(
        xfov=_float_of(element, "xfov"),
        aspect=_float_of(element, "aspect_ratio"),
        znear=_float_of(element, "znear"),
        zfar=_float_of(element, "zfar"),
    )


def parse_cameras(root: ET.Element) -> dict[str, Camera]:
    """Read the camera library, keyed by id."""
    return _collect(_library(root, "library_cameras", "camera"), parse_camera)


def parse_light(element: ET.Element) -> Light | None:
    """Read a light; only point lights are supported, others give None."""
    if not find_all(element, "point"):
        return None
    parts = split_ws(text_of(first(element, "color")))
    if len(parts) < 3:
        raise ValueError(f"light colour needs 3 components, got {len(parts)}")
    color = tuple(to_float(part) for part in parts[:3])
    return PointLight(
        color=color,
        # The constant term is looked up under this spelling of the tag.
        constant_attenuation=_float_of(element, "constant_attentuation"),
        linear_attenuation=_float_of(element, "linear_attenuation"),
        quadratic_attenuation=_float_of(element, "quadratic_attenuation"),
    )


def parse_lights(root: ET.Element) -> dict[str, Light]:
    """Read the light library, keyed by id."""
    return _collect(_library(root, "library_lights", "light"), parse_light)


def parse_image(element: ET.Element) -> Image:
    """Read an image and the location it is loaded from."""
    return Image(init_from=text_of(first(element, "init_from")))


def parse_images(root: ET.Element) -> dict[str, Image]:
    """Read the image library, keyed by id."""
    return _collect(_library(root, "library_images", "image"), parse_image)


def _color(element: ET.Element | None, role: str) -> Color:
    parts = split_ws(text_of(first(element, "color")))
    if len(parts) < 4:
        raise ValueError(f"{role} colour needs 4 components, got {len(parts)}")
    return Color.from_floats(*(to_float(part) for part in parts[:4]))


def _newparam_text(newparams: list[ET.Element], sid: str) -> str:
    return next((text_of(p) for p in newparams if _attr(p, "sid") == sid), "")


def parse_effect(element: ET.Element) -> Effect:
    """Read an effect's Phong colours and, when the diffuse is a texture, its image."""
    emission = _color(first(element, "emission"), "emission")
    ambient = _color(first(element, "ambient"), "ambient")

    specular = Color()
    specular_element = first(element, "specular")
    if specular_element is not None:
        specular = _color(specular_element, "specular")

    shininess = 0.0
    shininess_element = first(element, "shininess")
    if shininess_element is not None:
        shininess = to_float(text_of(shininess_element))

    diffuse_element = first(element, "diffuse")
    texture = first(diffuse_element, "texture")
    if texture is None:
        diffuse = _color(diffuse_element, "diffuse")
        return Effect(Phong(emission, ambient, diffuse, specular, shininess))

    newparams = find_all(element, "newparam")
    surface_sid = _newparam_text(newparams, _attr(texture, "texture"))
    image_id = _newparam_text(newparams, surface_sid)
    phong = Phong(emission, ambient, Color(), specular, shininess)
    return Effect(phong, Sampler2D(image_id))


def parse_effects(root: ET.Element) -> dict[str, Effect]:
    """Read the effect library, keyed by id."""
    return _collect(_library(root, "library_effects", "effect"), parse_effect)


def parse_material(element: ET.Element) -> Material:
    """Read a material and the effect it instantiates."""
    instance = first(element, "instance_effect")
    return Material(name=_attr(element, "name"), instance_effect=InstanceEffect(_attr(instance, "url")))


def parse_materials(root: ET.Element) -> dict[str, Material]:
    """Read the material library, keyed by id."""
    return _collect(_library(root, "library_materials", "material"), parse_material)