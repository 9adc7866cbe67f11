"""
Utility module for the krpano level resolver.

This module provides helper functions and classes for:

- Timing code execution (`timer` context manager).
- Loading a krpano XML file (`open_metadata`).
- Parsing command-line arguments (`parse_args`).
- Formatting pixel sizes for display (`format_pixels`).

Dependencies:
- argparse for CLI argument parsing
"""
import argparse
import time

from .metadata import Metadata, parse_metadata


class timer:
    """
    Context manager to measure elapsed execution time.

    Usage:
        with timer():
            # your code here
    -----
    >>> with timer() as t:
    ...     # some code to measure
    ...     time.sleep(2)
    >>> print(t.time_elapsed)
    '0h 0m 2.00s'
    """

    def __enter__(self):
        self.start = time.time()
        self.time_elapsed = None
        return self

    def __exit__(self, *args):
        self.end = time.time()
        self.interval = self.end - self.start
        hrs, rem = divmod(self.interval, 3600)
        mins, secs = divmod(rem, 60)
        self.time_elapsed = f"{int(hrs)}h {int(mins)}m {secs:.2f}s"
        return False


def open_metadata(metadata_location: str) -> Metadata:
    """
    Load and parse a krpano XML file.

    Args:
        metadata_location (str): Path to the XML file.

    Returns:
        Metadata: The parsed declaration tree.
    """
    with open(metadata_location, "rb") as metadata:
        return parse_metadata(metadata.read())


def parse_args(argv=None):
    """
    Parse command-line arguments for the level resolver.

    Arguments:
        --metadata (str, required): Path to the krpano XML file.
        --base-url (str, optional): Url the XML was fetched from. (Default: "")
        --tiles (flag, optional): Also list every tile url of every level.
        --limit (int, optional): Only print the first N levels. (Default: None)

    Returns:
        argparse.Namespace: Parsed arguments object.
    """
    parser = argparse.ArgumentParser(
        description="krpano tiled panorama level resolver"
    )

    parser.add_argument("--metadata", type=str, required=True, help="Path to the krpano XML file")
    parser.add_argument("--base-url", type=str, default="", help="Url the XML was fetched from, used to resolve relative tile urls")
    parser.add_argument("--tiles", action="store_true", help="List every tile url")
    parser.add_argument("--limit", type=int, default=None, help="Limit printed levels")

    return parser.parse_args(argv)


def format_pixels(width: int, height: int) -> str:
    """
    Format an image size with its megapixel count.

    Returns:
        str: e.g. '31646x38234 (1210.0 MP)'.
    """
    return f"{width}x{height} ({width * height / 1_000_000:.1f} MP)"
