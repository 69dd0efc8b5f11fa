"""Readers for the geometry library: meshes, their sources, vertices and triangles."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from .geometry import Geometry, Mesh, Triangles, TrianglesSemantic, Vertices, VerticesSemantic
from .sources import Accessor, FloatSource, Param, ParamType, Source
from .xmlutil import find_all, first, split_ws, text_of, to_float, to_int

__all__ = [
    "parse_mesh_source",
    "parse_vertices",
    "parse_triangles",
    "parse_mesh",
    "parse_geometry",
    "parse_geometries",
]

_TRIANGLE_SEMANTICS = {semantic.value: semantic for semantic in TrianglesSemantic}


def _attr(element: ET.Element | None, name: str) -> str:
    return "" if element is None else element.get(name, "")


def _parse_accessor(element: ET.Element | None) -> Accessor:
    accessor = Accessor()
    for param in find_all(element, "param"):
        kind = ParamType.FLOAT if _attr(param, "type") == "float" else None
        accessor.add_param(Param(name=_attr(param, "name"), type=kind))
    accessor.count = to_int(_attr(element, "count"))
    accessor.stride = to_int(_attr(element, "stride"))
    return accessor


def parse_mesh_source(element: ET.Element) -> Source:
    """Read a mesh source: the first ``count`` floats of its array and its accessor."""
    float_array = first(element, "float_array")
    count = to_int(_attr(float_array, "count"))
    components = split_ws(text_of(float_array))
    wanted = max(count, 0)
    if wanted > len(components):
        raise ValueError(f"float array declares {count} values but holds {len(components)}")
    data = [to_float(component) for component in components[:wanted]]
    accessor = _parse_accessor(first(element, "accessor"))
    return FloatSource(count=count, accessor=accessor, data=data)


def parse_vertices(element: ET.Element | None) -> Vertices:
    """Read the vertices inputs; every input is taken as a position."""
    vertices = Vertices()
    for input_element in find_all(element, "input"):
        vertices.add_input(VerticesSemantic.POSITION, _attr(input_element, "source"))
    return vertices


def parse_triangles(element: ET.Element) -> Triangles:
    """Read a triangle list; unknown input semantics count as VERTEX."""
    inputs: dict[TrianglesSemantic, tuple[str, int]] = {}
    for input_element in find_all(element, "input"):
        semantic = _TRIANGLE_SEMANTICS.get(_attr(input_element, "semantic"), TrianglesSemantic.VERTEX)
        inputs[semantic] = (_attr(input_element, "source"), to_int(_attr(input_element, "offset")))
    p = [to_int(component) for component in split_ws(text_of(first(element, "p")))]
    return Triangles(
        count=to_int(_attr(element, "count")),
        material=_attr(element, "material"),
        inputs=inputs,
        p=p,
    )


def parse_mesh(element: ET.Element | None) -> Mesh:
    """Read a mesh with its sources keyed by id."""
    sources = {_attr(s, "id"): parse_mesh_source(s) for s in find_all(element, "source")}
    vertices = parse_vertices(first(element, "vertices"))
    triangles = [parse_triangles(t) for t in find_all(element, "triangles")]
    return Mesh(sources=sources, vertices=vertices, triangles=triangles)


def parse_geometry(element: ET.Element) -> Geometry:
    """Read a geometry from its mesh."""
    return Geometry(parse_mesh(first(element, "mesh")))


def parse_geometries(root: ET.Element) -> dict[str, Geometry]:
    """Read the geometry library, keyed by id."""
    library = first(root, "library_geometries")
    return {_attr(g, "id"): parse_geometry(g) for g in find_all(library, "geometry")}