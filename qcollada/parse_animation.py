"""Readers for the animation and animation clip libraries."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from .animation import Animation, Channel, Sampler, SamplerSemantic
from .assets import AnimationClip
from .instances import InstanceAnimation
from .sources import Accessor, FloatSource, NameSource, Param, ParamType, Source
from .xmlutil import find_all, first, split_ws, text_of, to_float, to_int

__all__ = [
    "parse_source",
    "parse_sampler",
    "parse_channel",
    "parse_animation",
    "parse_animations",
    "parse_animation_clip",
    "parse_animation_clips",
]

_PARAM_TYPES = {kind.value: kind for kind in ParamType}
_SAMPLER_SEMANTICS = {semantic.value: semantic for semantic in SamplerSemantic}


def _attr(element: ET.Element | None, name: str) -> str:
    return "" if element is None else element.get(name, "")


def _parse_accessor(element: ET.Element | None) -> Accessor:
    accessor = Accessor()
    for param in find_all(element, "param"):
        kind = _PARAM_TYPES.get(_attr(param, "type"))
        accessor.add_param(Param(name=_attr(param, "name"), type=kind))
    accessor.count = to_int(_attr(element, "count"))
    accessor.stride = to_int(_attr(element, "stride"))
    return accessor


def parse_source(element: ET.Element) -> Source:
    """Read a source holding either a float array or a name array, with its accessor."""
    accessor = _parse_accessor(first(element, "accessor"))

    float_array = first(element, "float_array")
    if float_array is not None:
        count = to_int(_attr(float_array, "count"))
        components = split_ws(text_of(float_array))
        wanted = max(count, 0)
        if wanted > len(components):
            raise ValueError(f"float array declares {count} values but holds {len(components)}")
        data = [to_float(component) for component in components[:wanted]]
        return FloatSource(count=count, accessor=accessor, data=data)

    name_array = first(element, "Name_array")
    return NameSource(
        count=to_int(_attr(name_array, "count")),
        accessor=accessor,
        data=split_ws(text_of(name_array)),
    )


def parse_sampler(element: ET.Element | None) -> Sampler:
    """Read a sampler's inputs; unknown semantics count as INPUT."""
    inputs: dict[SamplerSemantic, str] = {}
    for input_element in find_all(element, "input"):
        semantic = _SAMPLER_SEMANTICS.get(_attr(input_element, "semantic"), SamplerSemantic.INPUT)
        inputs[semantic] = _attr(input_element, "source")
    return Sampler(inputs)


def parse_channel(element: ET.Element | None) -> Channel:
    """Read a channel's source and target."""
    return Channel(source=_attr(element, "source"), target=_attr(element, "target"))


def parse_animation(element: ET.Element) -> Animation:
    """Read an animation: its sources keyed by id, its first sampler and first channel."""
    sources = {_attr(s, "id"): parse_source(s) for s in find_all(element, "source")}
    sampler = parse_sampler(first(element, "sampler"))
    channel = parse_channel(first(element, "channel"))
    return Animation(sources=sources, sampler=sampler, channel=channel)


def parse_animations(root: ET.Element) -> dict[str, Animation]:
    """Read the animation library, keyed by id."""
    library = first(root, "library_animations")
    return {_attr(a, "id"): parse_animation(a) for a in find_all(library, "animation")}


def parse_animation_clip(element: ET.Element) -> AnimationClip:
    """Read an animation clip and the animations it plays."""
    instances = [InstanceAnimation(_attr(i, "url")) for i in find_all(element, "instance_animation")]
    return AnimationClip(name=_attr(element, "name"), instance_animations=instances)


def parse_animation_clips(root: ET.Element) -> dict[str, AnimationClip]:
    """Read the animation clip library, keyed by id; empty when there is none."""
    library = first(root, "library_animation_clips")
    if library is None:
        return {}
    return {_attr(c, "id"): parse_animation_clip(c) for c in find_all(library, "animation_clip")}