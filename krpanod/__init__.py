"""
krpanod - krpano tiled panorama level resolver

This module reads the XML configuration of krpano panorama viewers and
derives the flat list of levels a tile downloader needs.

Key features:
- Tokenize krpano tile url templates (`%v`, `%0h`, `%s`, ...).
- Parse `multires` resolution ladders.
- Resolve images, levels and shapes into one description per face and tier.
- Expand cube sides and enumerate tile urls per level.

Example usage::

    from krpanod import parse_metadata, zoom_levels
    from rich import print

    with open("pano.xml", "rb") as f:
        metadata = parse_metadata(f.read())

    levels, errors = zoom_levels(metadata, "https://example.com/pano.xml")
    for level in levels:
        print(f"{level.name} {level.size} {level.grid}")
"""
from .errors import *
from .template import *
from .multires import *
from .metadata import *
from .core import *
from .tiles import *
from .my_utils import *
