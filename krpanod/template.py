"""
Tile url templates of krpano.

A krpano `url` attribute is literal text with escapes such as `%v`, `%0h`
or `%s`::

    "tiles/l7/%v/l7_%v_%h.jpg"
    "https://example.com/%000r/%0000c.jpg"
    "pano_%s/%v_%h.jpg"

Every `0` between the `%` and the symbol adds one digit of zero padding.
`h x u c` select the column, `v y r` the row and `s` the cube side.

This module provides:

- Tokenizing a template into literal and variable parts (`TemplateString.parse`).
- Expanding the side variable into one template per cube side (`TemplateString.all_sides`).
- Filling in a column and a row to get a tile url (`TemplateString.format`).
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from .constants import (
    ESCAPE,
    PAD,
    X_SYMBOLS,
    Y_SYMBOLS,
    SIDE_SYMBOL,
    RENDER_SYMBOLS,
    SIDES
)
from .errors import IncompleteTemplateEscape, UnknownTemplateVariable


class TemplateVariable(Enum):
    X = "X"
    Y = "Y"
    SIDE = "SIDE"


@dataclass(frozen=True)
class Literal:
    text: str

    def __str__(self):
        return self.text


@dataclass(frozen=True)
class Variable:
    padding: int
    variable: TemplateVariable

    def __str__(self):
        return ESCAPE + PAD * self.padding + RENDER_SYMBOLS[self.variable.value]


Part = Union[Literal, Variable]


def _variable_for(symbol: str, template: str) -> TemplateVariable:
    if symbol in X_SYMBOLS:
        return TemplateVariable.X
    if symbol in Y_SYMBOLS:
        return TemplateVariable.Y
    if symbol == SIDE_SYMBOL:
        return TemplateVariable.SIDE
    raise UnknownTemplateVariable(symbol, template)


@dataclass(frozen=True)
class TemplateString:
    """
    An ordered, immutable sequence of `Literal` and `Variable` parts.

    Parts are never copied: expansions of the same template share their
    literal parts by identity.
    """
    parts: Tuple[Part, ...]

    @classmethod
    def parse(cls, text: str) -> "TemplateString":
        """
        Tokenize a krpano url template.

        A literal part precedes every variable and closes the template, even
        when it is empty, so `"%v"` gives `["", %v, ""]`.

        Args:
            text (str): The raw `url` attribute.

        Returns:
            TemplateString: The tokenized template.

        Raises:
            UnknownTemplateVariable: `%` is followed by an unsupported symbol.
            IncompleteTemplateEscape: the text ends inside an escape.
        """
        parts = []
        pos, end = 0, len(text)
        while True:
            start = pos
            while pos < end and text[pos] != ESCAPE:
                pos += 1
            parts.append(Literal(text[start:pos]))
            if pos == end:
                break
            pos += 1  # skip the escape

            padding = 0
            while pos < end and text[pos] == PAD:
                padding += 1
                pos += 1
            if pos == end:
                raise IncompleteTemplateEscape(text)

            parts.append(Variable(padding, _variable_for(text[pos], text)))
            pos += 1
        return cls(tuple(parts))

    @property
    def has_side(self) -> bool:
        return any(
            isinstance(part, Variable) and part.variable is TemplateVariable.SIDE
            for part in self.parts
        )

    def with_side(self, side: str) -> "TemplateString":
        """Replace every side variable by the first letter of `side`."""
        side_part = Literal(side[:1])
        return TemplateString(tuple(
            side_part
            if isinstance(part, Variable) and part.variable is TemplateVariable.SIDE
            else part
            for part in self.parts
        ))

    def all_sides(self) -> list[tuple[str, "TemplateString"]]:
        """
        Expand the template for every side it covers.

        Returns:
            list[tuple[str, TemplateString]]: Six `(side, template)` pairs in
            `SIDES` order when the template contains `%s`, otherwise a single
            pair with an empty side name and the template unchanged.
        """
        if not self.has_side:
            return [("", self)]
        return [(side, self.with_side(side)) for side in SIDES]

    def format(self, x: int, y: int) -> str:
        """
        Fill in the column and row of a tile.

        Args:
            x (int): Column, already offset by the image base index.
            y (int): Row, already offset by the image base index.

        Returns:
            str: The tile url, each number zero-padded to its escape's width.
        """
        out = []
        for part in self.parts:
            if isinstance(part, Literal):
                out.append(part.text)
            elif part.variable is TemplateVariable.X:
                out.append(str(x).zfill(part.padding))
            elif part.variable is TemplateVariable.Y:
                out.append(str(y).zfill(part.padding))
            else:
                raise ValueError(f"side variable left in template '{self}', expand it with all_sides() first")
        return "".join(out)

    def __str__(self):
        return "".join(str(part) for part in self.parts)
