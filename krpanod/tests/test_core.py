"""
Unit tests for the `core` module.

This test suite covers:

- `shape_descriptions`: multires shapes, shapes sized by their level, and
  shapes with no size at all.
- `level_descriptions`: size inheritance through `<level>` and ordering of
  nested results.
- `resolve_metadata`: whole documents, error isolation between siblings.

Usage:
    pytest krpanod/tests/test_core.py
"""
import pytest

from .. import core
from ..errors import InvalidWidth, KrpanoError, MissingMultires, MissingTileSize
from ..metadata import FaceKind, Image, LevelNode, Metadata, ShapeNode, parse_metadata
from ..multires import Vec2d
from ..template import TemplateString


def shape(kind=FaceKind.FLAT, url="tiles/%v_%h.jpg", multires=None):
    return ShapeNode(kind, TemplateString.parse(url), multires)


def test_shape_with_multires():
    """A multires shape needs no enclosing level."""
    node = shape(multires="512,768x554")
    (desc,) = core.level_descriptions(node)
    assert desc.name == "Flat"
    assert desc.size == Vec2d(768, 554)
    assert desc.tilesize == Vec2d(512, 512)
    assert desc.url is node.url


def test_shape_multires_wins_over_level_size():
    level = LevelNode(100, 100, (shape(multires="64,200x300"),))
    (desc,) = core.level_descriptions(level)
    assert desc.size == Vec2d(200, 300)
    assert desc.tilesize == Vec2d(64, 64)


def test_shape_without_size():
    """No multires and no enclosing level is an error value, not an exception."""
    assert core.level_descriptions(shape()) == [MissingMultires()]


def test_cylinder_level():
    """A level's size flows down to an untiled shape."""
    level = LevelNode(31646, 38234, (
        shape(FaceKind.CYLINDER, "monomane.tiles/l7/%v/l7_%v_%h.jpg"),
    ))
    (desc,) = core.level_descriptions(level)
    assert desc == core.LevelDescription(
        name="Cylinder",
        size=Vec2d(31646, 38234),
        tilesize=None,
        url=TemplateString.parse("monomane.tiles/l7/%v/l7_%v_%h.jpg"),
    )
    assert len(desc.sides()) == 1


def test_multires_errors_are_propagated():
    results = core.level_descriptions(shape(multires="512,768x554,oops,100"))
    assert isinstance(results[0], core.LevelDescription)
    assert results[1] == InvalidWidth()
    assert results[2].size == Vec2d(100, 100)


def test_missing_tilesize_is_propagated():
    assert core.level_descriptions(shape(multires="tiles,100")) == [MissingTileSize()]


def test_nested_levels_use_innermost_size():
    inner = LevelNode(10, 20, (shape(FaceKind.UP),))
    outer = LevelNode(1000, 2000, (shape(FaceKind.DOWN), inner))
    results = core.level_descriptions(outer)
    assert [(d.name, d.size) for d in results] == [
        ("Down", Vec2d(1000, 2000)),
        ("Up", Vec2d(10, 20)),
    ]


def test_level_results_keep_child_order():
    kinds = [FaceKind.FRONT, FaceKind.RIGHT, FaceKind.BACK, FaceKind.LEFT, FaceKind.UP, FaceKind.DOWN]
    level = LevelNode(512, 512, tuple(shape(kind) for kind in kinds))
    assert [d.name for d in core.level_descriptions(level)] == [k.value for k in kinds]


def test_empty_level():
    assert core.level_descriptions(LevelNode(1, 1)) == []


def test_not_a_node():
    with pytest.raises(TypeError):
        core.level_descriptions("level")


def test_resolve_metadata_isolates_errors():
    """A shape that cannot be sized does not hide its siblings or other images."""
    metadata = Metadata(images=(
        Image(levels=(
            shape(FaceKind.FLAT),
            LevelNode(300, 200, (shape(FaceKind.CUBE, "%s/%v_%h.jpg"),)),
        )),
        Image(baseindex=0, levels=(shape(FaceKind.CYLINDER, multires="256,1024x512,2048x1024"),)),
    ))
    results = core.resolve_metadata(metadata)

    assert isinstance(results[0], MissingMultires)
    assert isinstance(results[0], KrpanoError)
    assert [(d.name, d.size, d.tilesize) for d in results[1:]] == [
        ("Cube", Vec2d(300, 200), None),
        ("Cylinder", Vec2d(1024, 512), Vec2d(256, 256)),
        ("Cylinder", Vec2d(2048, 1024), Vec2d(256, 256)),
    ]
    assert len(results[1].sides()) == 6


def test_resolve_xml_document():
    xml = """
    <krpano>
    <image>
        <flat url="https://example.com/" multires="512,768x554,1664x1202,3200x2310,6400x4618,12800x9234"/>
    </image>
    </krpano>"""
    results = core.resolve_metadata(parse_metadata(xml))
    assert [(d.size, d.tilesize) for d in results] == [
        (Vec2d(768, 554), Vec2d(512, 512)),
        (Vec2d(1664, 1202), Vec2d(512, 512)),
        (Vec2d(3200, 2310), Vec2d(512, 512)),
        (Vec2d(6400, 4618), Vec2d(512, 512)),
        (Vec2d(12800, 9234), Vec2d(512, 512)),
    ]


def test_resolve_empty_metadata():
    assert core.resolve_metadata(Metadata()) == []
