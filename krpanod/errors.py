"""
Errors raised or returned while reading krpano metadata.

Template and reader errors are raised: one bad `url` attribute makes the
whole template (and the document holding it) unusable.

Multires and resolver errors are *returned*: `parse_multires` and
`level_descriptions` put an instance of the error in place of the entry
that failed, so one broken resolution tier never hides its siblings.
"""


class KrpanoError(Exception):
    """Base class. `kind` is a stable tag callers can switch on."""
    kind = "KrpanoError"

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class MissingMultires(KrpanoError):
    kind = "MissingMultires"

    def __init__(self, message: str = "missing multires attribute"):
        super().__init__(message)


class MissingTileSize(KrpanoError):
    kind = "MissingTileSize"

    def __init__(self, message: str = "missing tilesize"):
        super().__init__(message)


class InvalidWidth(KrpanoError):
    kind = "InvalidWidth"

    def __init__(self, message: str = "invalid width"):
        super().__init__(message)


class UnknownTemplateVariable(KrpanoError):
    kind = "UnknownTemplateVariable"

    def __init__(self, char: str, template: str):
        self.char = char
        self.template = template
        super().__init__(f"unknown template variable '{char}' in '{template}'")


class IncompleteTemplateEscape(KrpanoError):
    kind = "IncompleteTemplateEscape"

    def __init__(self, template: str):
        self.template = template
        super().__init__(f"incomplete template escape in '{template}'")


class MetadataError(KrpanoError):
    """The XML document does not have the shape of krpano metadata."""
    kind = "MetadataError"
