# Cube map sides, in the order krpano expands `%s`.
# Only the first letter of each name ends up in the tile url.
SIDES = ("forward", "back", "left", "right", "up", "down")

# Template escapes: `%` + optional zero padding + one symbol.
ESCAPE = "%"
PAD = "0"
X_SYMBOLS = "hxuc"   # column
Y_SYMBOLS = "vyr"    # row
SIDE_SYMBOL = "s"

# Symbols used when a parsed template is rendered back to text
RENDER_SYMBOLS = {
    "X": "h",
    "Y": "v",
    "SIDE": "s",
}

# <image baseindex="..."> defaults to 1: the first tile is 1, not 0
DEFAULT_BASE_INDEX = 1

# Attributes are unsigned 32 bit integers
MAX_UINT = 2 ** 32 - 1

# Separators of the multires attribute, e.g. "512,768x554,1664x1202x256"
MULTIRES_SEP = ","
DIM_SEP = "x"

# Element names accepted under <image> and <level>
LEVEL_TAG = "level"
FACE_TAGS = (
    "cube",
    "cylinder",
    "flat",
    "left",
    "right",
    "front",
    "back",
    "up",
    "down",
)
