"""Readers for the controller library: skins, joints and vertex weights."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from .controller import (
    Controller,
    Joints,
    JointsSemantic,
    Skin,
    VertexWeights,
    VertexWeightsSemantic,
)
from .parse_animation import parse_source
from .xmlutil import find_all, first, split_ws, text_of, to_float, to_int

__all__ = [
    "parse_joints",
    "parse_vertex_weights",
    "parse_skin",
    "parse_controller",
    "parse_controllers",
]

_JOINT_SEMANTICS = {semantic.value: semantic for semantic in JointsSemantic}
_WEIGHT_SEMANTICS = {semantic.value: semantic for semantic in VertexWeightsSemantic}


def _attr(element: ET.Element | None, name: str) -> str:
    return "" if element is None else element.get(name, "")


def _ints(element: ET.Element | None) -> list[int]:
    return [to_int(component) for component in split_ws(text_of(element))]


def parse_joints(element: ET.Element | None) -> Joints:
    """Read the joints inputs; unknown semantics count as JOINT."""
    joints = Joints()
    for input_element in find_all(element, "input"):
        semantic = _JOINT_SEMANTICS.get(_attr(input_element, "semantic"), JointsSemantic.JOINT)
        joints.add_input(semantic, _attr(input_element, "source"))
    return joints


def parse_vertex_weights(element: ET.Element | None) -> VertexWeights:
    """Read vertex weights: inputs with offsets, the counts per vertex and the index pairs."""
    inputs: dict[VertexWeightsSemantic, tuple[str, int]] = {}
    for input_element in find_all(element, "input"):
        semantic = _WEIGHT_SEMANTICS.get(_attr(input_element, "semantic"), VertexWeightsSemantic.JOINT)
        inputs[semantic] = (_attr(input_element, "source"), to_int(_attr(input_element, "offset")))
    return VertexWeights(
        count=to_int(_attr(element, "count")),
        vcount=_ints(first(element, "vcount")),
        v=_ints(first(element, "v")),
        inputs=inputs,
    )


def _bind_shape_matrix(element: ET.Element | None):
    components = split_ws(text_of(element))
    if len(components) < 16:
        raise ValueError(f"bind shape matrix needs 16 values, got {len(components)}")
    values = [to_float(component) for component in components[:16]]
    return tuple(tuple(values[row * 4:row * 4 + 4]) for row in range(4))


def parse_skin(element: ET.Element | None) -> Skin:
    """Read a skin: its mesh, bind shape matrix (row-major), sources, joints and weights."""
    return Skin(
        source=_attr(element, "source"),
        bind_shape_matrix=_bind_shape_matrix(first(element, "bind_shape_matrix")),
        sources={_attr(s, "id"): parse_source(s) for s in find_all(element, "source")},
        joints=parse_joints(first(element, "joints")),
        vertex_weights=parse_vertex_weights(first(element, "vertex_weights")),
    )


def parse_controller(element: ET.Element) -> Controller:
    """Read a controller from its skin."""
    return Controller(parse_skin(first(element, "skin")))


def parse_controllers(root: ET.Element) -> dict[str, Controller]:
    """Read the controller library, keyed by id."""
    library = first(root, "library_controllers")
    return {_attr(c, "id"): parse_controller(c) for c in find_all(library, "controller")}