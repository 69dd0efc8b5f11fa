import pytest

from qcollada.assets import Image, Material, PerspectiveCamera, PointLight
from qcollada.document import Collada
from qcollada.instances import InstanceGeometry
from qcollada.sources import FloatSource
from qcollada.visualscene import VisualScene

DOC = """<COLLADA xmlns="urn:example:collada" version="1.4.1">
  <library_cameras>
    <camera id="Cam">
      <optics><technique_common><perspective>
        <xfov>39.5</xfov><aspect_ratio>1.5</aspect_ratio>
        <znear>0.25</znear><zfar>100</zfar>
      </perspective></technique_common></optics>
    </camera>
  </library_cameras>
  <library_lights>
    <light id="Lamp">
      <technique_common><point>
        <color>1 0.5 0.25</color>
        <constant_attentuation>1</constant_attentuation>
        <linear_attenuation>0</linear_attenuation>
        <quadratic_attenuation>0.5</quadratic_attenuation>
      </point></technique_common>
    </light>
  </library_lights>
  <library_images>
    <image id="Tex"><init_from>texture.png</init_from></image>
  </library_images>
  <library_effects>
    <effect id="Fx">
      <profile_COMMON><technique sid="common"><phong>
        <emission><color>0 0 0 1</color></emission>
        <ambient><color>0 0 0 1</color></ambient>
        <diffuse><color>1 1 1 1</color></diffuse>
      </phong></technique></profile_COMMON>
    </effect>
  </library_effects>
  <library_materials>
    <material id="Mat" name="Steel"><instance_effect url="#Fx"/></material>
  </library_materials>
  <library_geometries>
    <geometry id="CubeMesh">
      <mesh>
        <source id="CubeMesh-positions">
          <float_array id="arr" count="3">1 2 3</float_array>
          <technique_common>
            <accessor source="#arr" count="1" stride="3">
              <param name="X" type="float"/>
              <param name="Y" type="float"/>
              <param name="Z" type="float"/>
            </accessor>
          </technique_common>
        </source>
        <vertices id="CubeMesh-vertices">
          <input semantic="POSITION" source="#CubeMesh-positions"/>
        </vertices>
        <triangles material="Mat" count="1">
          <input semantic="VERTEX" source="#CubeMesh-vertices" offset="0"/>
          <p>0 0 0</p>
        </triangles>
      </mesh>
    </geometry>
  </library_geometries>
  <library_visual_scenes>
    <visual_scene id="Scene">
      <node id="Cube" sid="Cube" type="NODE">
        <instance_geometry url="#CubeMesh">
          <bind_material><technique_common>
            <instance_material symbol="Mat" target="#Mat"/>
          </technique_common></bind_material>
        </instance_geometry>
      </node>
    </visual_scene>
  </library_visual_scenes>
  <scene><instance_visual_scene url="#Scene"/></scene>
</COLLADA>
"""


@pytest.fixture
def doc():
    return Collada.from_string(DOC)


def test_libraries_are_keyed_by_id(doc):
    assert list(doc.cameras) == ["Cam"]
    assert list(doc.lights) == ["Lamp"]
    assert list(doc.images) == ["Tex"]
    assert list(doc.effects) == ["Fx"]
    assert list(doc.materials) == ["Mat"]
    assert list(doc.geometries) == ["CubeMesh"]
    assert list(doc.visual_scenes) == ["Scene"]
    assert doc.animations == {}
    assert doc.animation_clips == {}
    assert doc.controllers == {}


def test_camera_and_light_values(doc):
    camera = doc.cameras["Cam"]
    assert isinstance(camera, PerspectiveCamera)
    assert camera.xfov == 39.5
    assert camera.aspect == 1.5
    assert camera.zfar == 100.0
    light = doc.lights["Lamp"]
    assert isinstance(light, PointLight)
    assert light.color == (1.0, 0.5, 0.25)
    assert light.quadratic_attenuation == 0.5


def test_scene_points_at_visual_scene(doc):
    assert doc.scene is not None
    url = doc.scene.instance_visual_scene.url
    assert url == "#Scene"
    assert doc.resolve(url) is doc.visual_scenes["Scene"]


def test_resolve_each_kind(doc):
    assert doc.resolve("#Cam") is doc.cameras["Cam"]
    assert doc.resolve("#Lamp") is doc.lights["Lamp"]
    assert doc.resolve("#Tex") is doc.images["Tex"]
    assert doc.resolve("#Fx") is doc.effects["Fx"]
    assert doc.resolve("#CubeMesh") is doc.geometries["CubeMesh"]
    assert doc.resolve("#Scene") is doc.visual_scenes["Scene"]
    image = doc.resolve("#Tex")
    assert isinstance(image, Image)
    assert image.init_from == "texture.png"


def test_resolve_material_chain(doc):
    material = doc.resolve("#Mat")
    assert isinstance(material, Material)
    assert material.name == "Steel"
    assert doc.resolve(material.instance_effect.url) is doc.effects["Fx"]


def test_resolve_unknown_returns_none(doc):
    assert doc.resolve("#Nothing") is None
    assert doc.resolve("") is None


def test_scene_node_geometry_resolves(doc):
    node = doc.visual_scenes["Scene"].resolve("#Cube")
    assert node is not None
    assert isinstance(node.item, InstanceGeometry)
    geometry = doc.resolve(node.item.url)
    assert geometry is doc.geometries["CubeMesh"]
    source = geometry.mesh.get_source("#CubeMesh-positions")
    assert isinstance(source, FloatSource)
    assert source.data == [1.0, 2.0, 3.0]


def test_resolve_prefers_earlier_library():
    doc = Collada.from_string(DOC)
    doc.visual_scenes["Cam"] = VisualScene()
    assert doc.resolve("#Cam") is doc.cameras["Cam"]


def test_parse_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Collada.parse(tmp_path / "missing.dae")


def test_malformed_xml_raises():
    with pytest.raises(ValueError):
        Collada.from_string("<COLLADA><library_cameras></COLLADA>")


def test_empty_document():
    doc = Collada.from_string("<COLLADA/>")
    assert doc.cameras == {}
    assert doc.geometries == {}
    assert doc.visual_scenes == {}
    assert doc.scene.instance_visual_scene.url == ""
    assert doc.resolve("#anything") is None


def test_default_document_is_empty():
    doc = Collada()
    assert doc.scene is None
    assert doc.resolve("#Cam") is None