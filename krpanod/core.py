"""
Core module turning a krpano declaration tree into flat level descriptions.

This module provides:

- Resolving one shape into its resolution tiers (`shape_descriptions`).
- Walking a level or shape node, passing the level size down (`level_descriptions`).
- Resolving a whole image or document (`resolve_image`, `resolve_metadata`).

Results come back as lists in which every item is either a
`LevelDescription` or the `KrpanoError` that prevented it, so a consumer
can keep the tiers that resolved and report the others.
"""
from dataclasses import dataclass
from typing import Optional, Union

from .errors import KrpanoError, MissingMultires
from .metadata import Image, LevelNode, Metadata, Node, ShapeNode, FaceKind
from .multires import Vec2d, parse_multires
from .template import TemplateString


@dataclass(frozen=True)
class LevelDescription:
    """One face at one resolution tier."""
    name: str
    size: Vec2d
    tilesize: Optional[Vec2d]  # None: a single untiled image
    url: TemplateString

    def sides(self) -> list[tuple[str, TemplateString]]:
        return self.url.all_sides()


LevelResult = Union[LevelDescription, KrpanoError]


def shape_descriptions(
    kind: FaceKind,
    shape: ShapeNode,
    size: Optional[Vec2d] = None
) -> list[LevelResult]:
    """
    Resolve one shape.

    Args:
        kind (FaceKind): The face the shape was declared as.
        shape (ShapeNode): The shape node.
        size (Vec2d | None): Size of the enclosing `<level>`, if any.

    Returns:
        list[LevelDescription | KrpanoError]:
            - one tiled description per multires tier when `multires` is set,
              with the tier's error in place of tiers that failed to parse;
            - otherwise one untiled description of the enclosing level size;
            - `MissingMultires` when there is neither.
    """
    if shape.multires is not None:
        return [
            entry if isinstance(entry, KrpanoError)
            else LevelDescription(kind.value, entry[0], entry[1], shape.url)
            for entry in parse_multires(shape.multires)
        ]
    if size is not None:
        return [LevelDescription(kind.value, size, None, shape.url)]
    return [MissingMultires()]


def level_descriptions(node: Node, size: Optional[Vec2d] = None) -> list[LevelResult]:
    """
    Resolve a node of the declaration tree.

    A `LevelNode` only contributes its size: its children are resolved with
    it and their results concatenated in order.
    """
    if isinstance(node, LevelNode):
        level_size = Vec2d(node.width, node.height)
        return [
            result
            for child in node.nodes
            for result in level_descriptions(child, level_size)
        ]
    if isinstance(node, ShapeNode):
        return shape_descriptions(node.kind, node, size)
    raise TypeError(f"not a krpano node: {node!r}")


def resolve_image(image: Image) -> list[LevelResult]:
    return [result for node in image.levels for result in level_descriptions(node)]


def resolve_metadata(metadata: Metadata) -> list[LevelResult]:
    """Resolve every image of a document, in declaration order."""
    return [result for image in metadata.images for result in resolve_image(image)]
