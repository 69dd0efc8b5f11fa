import pytest

from qcollada.assets import Asset
from qcollada.instances import InstanceCamera, InstanceVisualScene
from qcollada.visualscene import Node, NodeType, Scene, VisualScene


def _scene():
    scene = VisualScene()
    a = Node("a", "sa")
    b = Node("b", "sb", NodeType.JOINT)
    c = Node("c", "sc", item=InstanceCamera("#cam"))
    d = Node("d", "sd")
    a.add_child(b)
    b.add_child(c)
    a.add_child(d)
    scene.root.add_child(a)
    return scene, a, b, c, d


def test_default_transform_is_identity():
    node = Node("n", "n")
    assert node.transform == ((1.0, 0.0, 0.0, 0.0), (0.0, 1.0, 0.0, 0.0),
                              (0.0, 0.0, 1.0, 0.0), (0.0, 0.0, 0.0, 1.0))


def test_bad_transform_raises():
    with pytest.raises(ValueError):
        Node("n", "n", transform=[[1, 2], [3, 4]])


def test_depth_first_visits_preorder():
    scene, *_ = _scene()
    seen = []
    result = scene.root.depth_first(lambda node: seen.append(node.id) or False)
    assert result is False
    assert seen == ["", "a", "b", "c", "d"]


def test_depth_first_stops_early():
    scene, *_ = _scene()
    seen = []

    def visitor(node):
        seen.append(node.id)
        return node.id == "b"

    assert scene.root.depth_first(visitor) is True
    assert seen == ["", "a", "b"]


def test_walk_matches_depth_first():
    scene, *_ = _scene()
    seen = []
    scene.root.depth_first(lambda node: seen.append(node) or False)
    assert list(scene.root.walk()) == seen


def test_resolve_finds_nested_node():
    scene, _, b, c, _ = _scene()
    assert scene.resolve("#c") is c
    assert scene.resolve("#c").item.url == "#cam"
    assert scene.resolve("#b").type is NodeType.JOINT
    assert scene.resolve("#b") is b


def test_resolve_missing_and_root():
    scene, *_ = _scene()
    assert scene.resolve("#zzz") is None
    assert scene.resolve("#") is scene.root


def test_visual_scene_is_asset_with_empty_root():
    scene = VisualScene()
    assert isinstance(scene, Asset)
    assert scene.root.children == []
    assert scene.root.item is None


def test_scene_instance_can_be_replaced():
    scene = Scene(InstanceVisualScene("#one"))
    scene.instance_visual_scene = InstanceVisualScene("#two")
    assert scene.instance_visual_scene.url == "#two"