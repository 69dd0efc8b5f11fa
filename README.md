# qcollada

Read COLLADA (`.dae`) documents into plain Python objects.

`qcollada` loads the libraries of a COLLADA file (cameras, lights, images,
effects, materials, geometries, animations, animation clips, controllers
and visual scenes) together with the document's scene, and lets you look
assets up by their `#id` URLs. It uses only the standard library
(`xml.etree.ElementTree`); element names are matched with or without the
COLLADA namespace.

## Installing

```
pip install .
```

## Loading a document

```python
from qcollada.document import Collada

collada = Collada.parse("model.dae")

for geometry_id, geometry in collada.geometries.items():
    mesh = geometry.mesh
    print(geometry_id, mesh.source_ids())
    for triangles in mesh.triangles:
        print(" ", triangles.material, triangles.count, len(triangles.p))
```

A document already in memory can be read with `Collada.from_string(text)`
(text or bytes), and a parsed `xml.etree.ElementTree` root with
`Collada.from_element(root)`.

`Collada.parse` raises `OSError` when the file cannot be opened, and
malformed XML raises `ValueError`. A library that is absent from the
document simply gives an empty dictionary.

Each library is a `dict` keyed by asset id: `cameras`, `lights`, `images`,
`effects`, `materials`, `geometries`, `animations`, `animation_clips`,
`controllers` and `visual_scenes`. `collada.scene` tells which visual scene
the document shows.

## Resolving URLs

COLLADA elements refer to one another with URLs of the form `#id`.
`Collada.resolve` drops the leading character, looks the id up across the
libraries (in the order listed above) and returns the asset, or `None`
when nothing has that id:

```python
material = collada.resolve("#Material-material")
effect = collada.resolve(material.instance_effect.url)
print(effect.phong.diffuse)
```

Meshes, skins and animations resolve their own sources with `get_source`,
which raises `KeyError` for an unknown id:

```python
from qcollada.geometry import VerticesSemantic

positions = mesh.get_source(mesh.vertices.inputs[VerticesSemantic.POSITION])
print(positions.accessor.stride, positions.data[:3])
```

Sources are `FloatSource` or `NameSource` objects (from `qcollada.sources`)
with a `count`, an `Accessor` and their `data` list.

## Walking the scene graph

```python
scene_url = collada.scene.instance_visual_scene.url
visual_scene = collada.resolve(scene_url)

for node in visual_scene.root.walk():
    print(node.id, node.type, node.item)

camera_node = visual_scene.resolve("#Camera")
```

A visual scene's `root` is an unnamed node whose children are the
top-level nodes. Each `Node` has an `id`, `sid`, `type` (`NodeType.NODE`
or `NodeType.JOINT`), a row-major 4x4 `transform` (identity when the node
has no `<matrix>`), and an optional `item`: an `InstanceCamera`,
`InstanceLight`, `InstanceGeometry` or `InstanceController` from
`qcollada.instances`.

`Node.walk()` yields nodes in pre-order. `Node.depth_first(visitor)` calls
`visitor` on each node in the same order, stops as soon as it returns
true, and reports whether it did.

## Effects and colours

An `Effect` holds a `Phong` (emission, ambient, diffuse and specular
colours and a shininess) and, when its diffuse channel is a texture, a
`Sampler2D` whose `source` is the image id found through the effect's
`newparam` chain. Colours are `Color` values with 8-bit components,
built from the document's 0..1 floats by `Color.from_floats`, which
truncates. A colour that was not given in the document (the specular
when absent, the diffuse of a textured effect) is a default `Color`
whose `is_valid()` is false.

## Modules

- `qcollada.document` – `Collada`, the loaded document
- `qcollada.assets` – `PerspectiveCamera`, `PointLight`, `Image`, `Material`, `AnimationClip`
- `qcollada.effect` – `Effect`, `Phong`, `Sampler2D`, `Color`
- `qcollada.geometry` – `Geometry`, `Mesh`, `Vertices`, `Triangles`
- `qcollada.animation` – `Animation`, `Sampler`, `Channel`
- `qcollada.controller` – `Controller`, `Skin`, `Joints`, `VertexWeights`
- `qcollada.visualscene` – `VisualScene`, `Node`, `Scene`
- `qcollada.instances` – the `instance_*` references found in nodes and assets
- `qcollada.sources` – `Accessor`, `Param`, `FloatSource`, `NameSource`
- `qcollada.parse_assets`, `qcollada.parse_geometry`, `qcollada.parse_animation`,
  `qcollada.parse_controller`, `qcollada.parse_scene` – readers for each
  library, usable on single `ElementTree` elements
- `qcollada.xmlutil` – small ElementTree helpers used by the readers

## What it does not do

- It only reads documents; there is no way to write or export COLLADA.
- It does no rendering and has no command-line tool.
- Only perspective cameras and point lights are read; other camera and
  light kinds are skipped. A point light's constant attenuation is read
  from an element named `constant_attentuation`.
- Geometry is read from `<triangles>` only; other primitive lists are
  ignored. Controllers are read as skins only.
- Each animation keeps only its first sampler and first channel.

## Running the tests

```
pip install .[test]
pytest
```