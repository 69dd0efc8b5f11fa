"""Readers for visual scenes, their node trees and the document's scene."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from .instances import (
    InstanceCamera,
    InstanceController,
    InstanceGeometry,
    InstanceLight,
    InstanceMaterial,
    InstanceVisualScene,
    NodeItem,
)
from .visualscene import Node, NodeType, Scene, VisualScene
from .xmlutil import children_named, find_all, first, split_ws, text_of, to_float

__all__ = ["parse_node", "parse_visual_scene", "parse_visual_scenes", "parse_scene"]

_IDENTITY = tuple(tuple(1.0 if row == col else 0.0 for col in range(4)) for row in range(4))


def _attr(element: ET.Element | None, name: str) -> str:
    return "" if element is None else element.get(name, "")


def _matrix(element: ET.Element):
    components = split_ws(text_of(element))
    if len(components) < 16:
        raise ValueError(f"node matrix needs 16 values, got {len(components)}")
    values = [to_float(component) for component in components[:16]]
    return tuple(tuple(values[row * 4:row * 4 + 4]) for row in range(4))


def _instance_materials(element: ET.Element) -> list[InstanceMaterial]:
    return [
        InstanceMaterial(symbol=_attr(m, "symbol"), target=_attr(m, "target"))
        for m in find_all(element, "instance_material")
    ]


def _node_item(element: ET.Element) -> NodeItem | None:
    # Later kinds take precedence when a node holds several.
    item: NodeItem | None = None
    if cameras := children_named(element, "instance_camera"):
        item = InstanceCamera(_attr(cameras[0], "url"))
    if lights := children_named(element, "instance_light"):
        item = InstanceLight(_attr(lights[0], "url"))
    if geometries := children_named(element, "instance_geometry"):
        instance = geometries[0]
        item = InstanceGeometry(_attr(instance, "url"), _instance_materials(instance))
    if controllers := children_named(element, "instance_controller"):
        instance = controllers[0]
        item = InstanceController(
            _attr(instance, "url"),
            text_of(first(instance, "skeleton")),
            _instance_materials(instance),
        )
    return item


def parse_node(element: ET.Element) -> Node:
    """Read a node, its transform, its item and, recursively, its child nodes."""
    matrices = children_named(element, "matrix")
    transform = _matrix(matrices[0]) if matrices else _IDENTITY
    node_type = NodeType.JOINT if _attr(element, "type") == "JOINT" else NodeType.NODE
    node = Node(
        id=_attr(element, "id"),
        sid=_attr(element, "sid"),
        type=node_type,
        item=_node_item(element),
        transform=transform,
    )
    for child in children_named(element, "node"):
        node.add_child(parse_node(child))
    return node


def parse_visual_scene(element: ET.Element) -> VisualScene:
    """Read a visual scene; its top-level nodes become children of the root."""
    scene = VisualScene()
    for child in children_named(element, "node"):
        scene.root.add_child(parse_node(child))
    return scene


def parse_visual_scenes(root: ET.Element) -> dict[str, VisualScene]:
    """Read the visual scene library, keyed by id."""
    library = first(root, "library_visual_scenes")
    return {_attr(v, "id"): parse_visual_scene(v) for v in find_all(library, "visual_scene")}


def parse_scene(root: ET.Element) -> Scene:
    """Read which visual scene the document shows."""
    instance = first(first(root, "scene"), "instance_visual_scene")
    return Scene(InstanceVisualScene(_attr(instance, "url")))