"""
The krpano declaration tree and the XML reader that builds it.

Shape of a krpano document, as far as tiles are concerned::

    <krpano>
        <image tilesize="512" baseindex="1">
            <level tiledimagewidth="31646" tiledimageheight="38234">
                <cylinder url="tiles/l7/%v/l7_%v_%h.jpg" />
            </level>
            <flat url="tiles/%v_%h.jpg" multires="512,768x554,1664x1202" />
        </image>
    </krpano>

Everything else in the document (`<view>`, `<include>`, `<preview>`,
unknown attributes) is ignored.
"""
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .constants import DEFAULT_BASE_INDEX, FACE_TAGS, LEVEL_TAG
from .errors import MetadataError
from .multires import parse_uint
from .template import TemplateString


class FaceKind(Enum):
    CUBE = "Cube"
    CYLINDER = "Cylinder"
    FLAT = "Flat"
    LEFT = "Left"
    RIGHT = "Right"
    FRONT = "Front"
    BACK = "Back"
    UP = "Up"
    DOWN = "Down"

    @property
    def tag(self) -> str:
        return self.value.lower()

    @classmethod
    def from_tag(cls, tag: str) -> "FaceKind":
        return cls[tag.upper()]


@dataclass(frozen=True)
class ShapeNode:
    kind: FaceKind
    url: TemplateString
    multires: Optional[str] = None


@dataclass(frozen=True)
class LevelNode:
    """A resolution tier with an explicit size; its shapes inherit that size."""
    width: int
    height: int
    nodes: tuple = ()


Node = Union[LevelNode, ShapeNode]


@dataclass(frozen=True)
class Image:
    tilesize: Optional[int] = None
    baseindex: int = DEFAULT_BASE_INDEX
    levels: tuple = ()


@dataclass(frozen=True)
class Metadata:
    images: tuple = field(default_factory=tuple)


def _local_name(tag: str) -> str:
    # drop any `{namespace}` prefix
    return tag.rsplit("}", 1)[-1].lower()


def _uint_attr(elem: ET.Element, name: str, default=None, required: bool = False) -> Optional[int]:
    raw = elem.get(name)
    if raw is None:
        if required:
            raise MetadataError(f"<{_local_name(elem.tag)}> is missing the `{name}` attribute")
        return default
    value = parse_uint(raw.strip())
    if value is None:
        raise MetadataError(f"<{_local_name(elem.tag)} {name}=\"{raw}\"> is not an unsigned integer")
    return value


def _parse_node(elem: ET.Element) -> Node:
    tag = _local_name(elem.tag)

    if tag == LEVEL_TAG:
        return LevelNode(
            width=_uint_attr(elem, "tiledimagewidth", required=True),
            height=_uint_attr(elem, "tiledimageheight", required=True),
            nodes=tuple(_parse_node(child) for child in elem),
        )

    if tag in FACE_TAGS:
        url = elem.get("url")
        if url is None:
            raise MetadataError(f"<{tag}> is missing the `url` attribute")
        return ShapeNode(
            kind=FaceKind.from_tag(tag),
            url=TemplateString.parse(url),
            multires=elem.get("multires"),
        )

    raise MetadataError(f"unknown element <{tag}>, expected one of: {LEVEL_TAG}, {', '.join(FACE_TAGS)}")


def _parse_image(elem: ET.Element) -> Image:
    return Image(
        tilesize=_uint_attr(elem, "tilesize"),
        baseindex=_uint_attr(elem, "baseindex", default=DEFAULT_BASE_INDEX),
        levels=tuple(_parse_node(child) for child in elem),
    )


def parse_metadata(xml_text: Union[str, bytes]) -> Metadata:
    """
    Read a krpano XML document into a `Metadata` tree.

    Args:
        xml_text (str | bytes): The document.

    Returns:
        Metadata: Every `<image>` of the root, in document order.

    Raises:
        MetadataError: The document is not well formed, its root is not
            `<krpano>`, or an image holds something that is not a level or
            a shape.
        KrpanoError: A `url` attribute is not a valid template.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as error:
        raise MetadataError(f"invalid XML: {error}") from error

    if _local_name(root.tag) != "krpano":
        raise MetadataError(f"expected a <krpano> root element, got <{_local_name(root.tag)}>")

    return Metadata(images=tuple(
        _parse_image(child) for child in root if _local_name(child.tag) == "image"
    ))
