"""
Parser for the krpano `multires` attribute.

The attribute packs a whole resolution ladder into one string::

    "512,768x554,1664x1202,3200x2310x256"

The first number is the tile size used by every tier that does not give
its own; each following entry is `width[xheight[xtilesize]]`.
"""
import re
from typing import NamedTuple, Union

from .constants import MAX_UINT, MULTIRES_SEP, DIM_SEP
from .errors import KrpanoError, MissingTileSize, InvalidWidth

_UINT = re.compile(r"\+?[0-9]+")


class Vec2d(NamedTuple):
    x: int
    y: int

    @classmethod
    def square(cls, n: int) -> "Vec2d":
        return cls(n, n)

    def ceil_div(self, other: "Vec2d") -> "Vec2d":
        return Vec2d(-(-self.x // other.x), -(-self.y // other.y))


MultiresEntry = Union[tuple[Vec2d, Vec2d], KrpanoError]


def parse_uint(text: str) -> Union[int, None]:
    """
    Parse an unsigned 32 bit integer the way krpano attributes are written.

    Returns None instead of raising: absent or broken numbers fall back to
    a default in most places.
    """
    if not _UINT.fullmatch(text):
        return None
    value = int(text)
    return value if value <= MAX_UINT else None


def parse_multires(text: str) -> list[MultiresEntry]:
    """
    Parse a multires string into `(image size, tile size)` pairs.

    Entries are parsed independently and keep their order:

    - a missing height makes the tier square,
    - a missing tile size falls back to the leading tile size,
    - a bad width turns that entry, and only that one, into `InvalidWidth`.

    Args:
        text (str): The multires attribute.

    Returns:
        list[tuple[Vec2d, Vec2d] | KrpanoError]: One item per tier, or a
        single `MissingTileSize` when the leading tile size is unusable.
    """
    base, *entries = text.split(MULTIRES_SEP)
    base_tilesize = parse_uint(base)
    if base_tilesize is None:
        return [MissingTileSize()]
    return [_parse_entry(entry, base_tilesize) for entry in entries]


def _parse_entry(entry: str, base_tilesize: int) -> MultiresEntry:
    dims = entry.split(DIM_SEP)

    width = parse_uint(dims[0])
    if width is None:
        return InvalidWidth()

    height = parse_uint(dims[1]) if len(dims) > 1 else None
    if height is None:
        height = width

    tilesize = parse_uint(dims[2]) if len(dims) > 2 else None
    if tilesize is None:
        tilesize = base_tilesize

    return Vec2d(width, height), Vec2d.square(tilesize)
