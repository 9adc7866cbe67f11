"""
Tile enumeration for resolved krpano levels.

A `LevelDescription` covers one face at one tier; its template may still
hold a `%s` side variable. `zoom_levels` expands every description into one
`ZoomLevel` per side and attaches the image base index, which is all a
downloader needs to list tile urls.

Dependencies:
- rich for colored reporting of levels that could not be resolved
"""
from dataclasses import dataclass
from typing import Iterator, Tuple
from urllib.parse import urljoin

from rich import print

from .core import LevelDescription, resolve_image
from .errors import KrpanoError
from .metadata import Metadata
from .multires import Vec2d
from .template import TemplateString


@dataclass(frozen=True)
class ZoomLevel:
    description: LevelDescription
    side: str
    template: TemplateString
    base_index: int
    base_url: str = ""

    @property
    def name(self) -> str:
        if self.side:
            return f"{self.description.name} {self.side}"
        return self.description.name

    @property
    def size(self) -> Vec2d:
        return self.description.size

    @property
    def tile_size(self) -> Vec2d:
        # untiled shapes are a single tile covering the whole image
        return self.description.tilesize or self.description.size

    @property
    def grid(self) -> Vec2d:
        """Number of tile columns and rows."""
        if 0 in self.tile_size:
            return Vec2d(0, 0)
        return self.size.ceil_div(self.tile_size)

    def tile_url(self, col: int, row: int) -> str:
        path = self.template.format(col + self.base_index, row + self.base_index)
        return urljoin(self.base_url, path) if self.base_url else path

    def tiles(self) -> Iterator[Tuple[int, int, str]]:
        """Yield `(col, row, url)` for every tile, row by row."""
        cols, rows = self.grid
        for row in range(rows):
            for col in range(cols):
                yield col, row, self.tile_url(col, row)


def zoom_levels(metadata: Metadata, base_url: str = "") -> tuple[list[ZoomLevel], list[KrpanoError]]:
    """
    Expand a document into per-side zoom levels.

    Args:
        metadata (Metadata): The parsed document.
        base_url (str, optional): Url of the document, relative tile urls
            are resolved against it.

    Returns:
        tuple[list[ZoomLevel], list[KrpanoError]]: The levels in declaration
        order and the errors of the tiers that could not be resolved.
    """
    levels, errors = [], []
    for image in metadata.images:
        for result in resolve_image(image):
            if isinstance(result, KrpanoError):
                print(f"[yellow][SKIP] {result.kind}: {result}[/]")
                errors.append(result)
                continue
            levels.extend(
                ZoomLevel(result, side, template, image.baseindex, base_url)
                for side, template in result.sides()
            )
    return levels, errors
