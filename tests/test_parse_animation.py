import pytest

from qcollada.animation import SamplerSemantic
from qcollada.sources import FloatSource, NameSource, ParamType
from qcollada.parse_animation import (
    parse_animation,
    parse_animation_clip,
    parse_animation_clips,
    parse_animations,
    parse_channel,
    parse_sampler,
    parse_source,
)
from qcollada.xmlutil import parse_xml

ANIMATION = """
<animation id="bone-anim">
  <source id="bone-input">
    <float_array id="bone-input-array" count="3">0 0.5 1</float_array>
    <technique_common>
      <accessor source="#bone-input-array" count="3" stride="1">
        <param name="TIME" type="float"/>
      </accessor>
    </technique_common>
  </source>
  <source id="bone-interp">
    <Name_array id="bone-interp-array" count="3">LINEAR LINEAR LINEAR</Name_array>
    <technique_common>
      <accessor source="#bone-interp-array" count="3" stride="1">
        <param name="INTERPOLATION" type="name"/>
      </accessor>
    </technique_common>
  </source>
  <sampler id="bone-sampler">
    <input semantic="INPUT" source="#bone-input"/>
    <input semantic="OUTPUT" source="#bone-output"/>
    <input semantic="INTERPOLATION" source="#bone-interp"/>
  </sampler>
  <channel source="#bone-sampler" target="Bone/transform"/>
</animation>
"""


def test_float_source_reads_data_and_accessor():
    source = parse_source(parse_xml(ANIMATION).find("source"))
    assert isinstance(source, FloatSource)
    assert source.data == [0.0, 0.5, 1.0]
    assert source.count == 3
    assert source.accessor.count == 3
    assert source.accessor.stride == 1
    assert [(p.name, p.type) for p in source.accessor.params] == [("TIME", ParamType.FLOAT)]


def test_name_source_reads_names():
    element = parse_xml(ANIMATION).findall("source")[1]
    source = parse_source(element)
    assert isinstance(source, NameSource)
    assert source.data == ["LINEAR", "LINEAR", "LINEAR"]
    assert source.count == 3
    assert source.accessor.params[0].type is ParamType.NAME


def test_float4x4_and_unknown_param_types():
    element = parse_xml(
        '<source id="s"><float_array count="1">2</float_array>'
        '<accessor count="1" stride="16"><param name="TRANSFORM" type="float4x4"/>'
        '<param name="X" type="int"/></accessor></source>'
    )
    source = parse_source(element)
    assert [p.type for p in source.accessor.params] == [ParamType.FLOAT4X4, None]
    assert source.accessor.stride == 16


def test_float_array_shorter_than_count_raises():
    element = parse_xml('<source><float_array count="4">1 2</float_array></source>')
    with pytest.raises(ValueError):
        parse_source(element)


def test_float_array_takes_only_declared_count():
    element = parse_xml('<source><float_array count="2">1 2 3</float_array></source>')
    assert parse_source(element).data == [1.0, 2.0]


def test_sampler_inputs_and_default_semantic():
    sampler = parse_sampler(
        parse_xml('<sampler><input semantic="OUTPUT" source="#out"/>'
                  '<input semantic="BOGUS" source="#other"/></sampler>')
    )
    assert sampler.inputs == {SamplerSemantic.OUTPUT: "#out", SamplerSemantic.INPUT: "#other"}


def test_channel_attributes():
    channel = parse_channel(parse_xml('<channel source="#s" target="Node/matrix"/>'))
    assert (channel.source, channel.target) == ("#s", "Node/matrix")


def test_animation_collects_sources_sampler_and_channel():
    animation = parse_animation(parse_xml(ANIMATION))
    assert animation.source_ids() == ["bone-input", "bone-interp"]
    assert animation.get_source("#bone-input").data == [0.0, 0.5, 1.0]
    assert animation.sampler.inputs[SamplerSemantic.INTERPOLATION] == "#bone-interp"
    assert animation.channel.target == "Bone/transform"


def test_animations_keyed_by_id():
    root = parse_xml(f"<COLLADA><library_animations>{ANIMATION}</library_animations></COLLADA>")
    animations = parse_animations(root)
    assert list(animations) == ["bone-anim"]
    assert animations["bone-anim"].channel.source == "#bone-sampler"


def test_missing_animation_library_gives_empty():
    assert parse_animations(parse_xml("<COLLADA/>")) == {}


def test_animation_clip():
    clip = parse_animation_clip(
        parse_xml('<animation_clip id="c" name="Walk"><instance_animation url="#a1"/>'
                  '<instance_animation url="#a2"/></animation_clip>')
    )
    assert clip.name == "Walk"
    assert [i.url for i in clip.instance_animations] == ["#a1", "#a2"]


def test_animation_clips_library():
    root = parse_xml(
        '<COLLADA><library_animation_clips><animation_clip id="walk" name="Walk">'
        '<instance_animation url="#a1"/></animation_clip></library_animation_clips></COLLADA>'
    )
    clips = parse_animation_clips(root)
    assert list(clips) == ["walk"]
    assert clips["walk"].instance_animations[0].url == "#a1"
    assert parse_animation_clips(parse_xml("<COLLADA/>")) == {}