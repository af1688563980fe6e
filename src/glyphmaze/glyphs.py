# Wall-junction glyphs, keyed by the N,E,S,W wall pattern (1 = wall).

from typing import Dict, Tuple
from .grid import Cell

ATLAS: Dict[str, str] = {
    "0000": " ",
    "0001": "⎸",
    "0010": "⎽",
    "0011": "└",
    "0100": "⎹",
    "0101": "║",
    "0110": "┘",
    "0111": "⼐",
    "1000": "⎺",
    "1001": "┌",
    "1010": "═",
    "1011": "⫍",
    "1100": "┐",
    "1101": "⼌",
    "1110": "⫎",
    "1111": "█",
}

ALL_WALLS = ATLAS["1111"]
OPEN = ATLAS["0000"]

KEY_FOR_GLYPH: Dict[str, str] = {g: k for k, g in ATLAS.items()}

def pattern_key(cell: Cell) -> str:
    return "".join("1" if wall else "0" for wall in cell.walls())

def pattern_bits(cell: Cell) -> int:
    """N is bit 3, W is bit 0."""
    return int(pattern_key(cell), 2)

def glyph_for(cell: Cell) -> str:
    return ATLAS[pattern_key(cell)]

def walls_from_key(key: str) -> Tuple[bool, bool, bool, bool]:
    if key not in ATLAS:
        raise ValueError(f"not a wall pattern: {key!r}")
    return tuple(ch == "1" for ch in key)

def walls_for_glyph(glyph: str) -> Tuple[bool, bool, bool, bool]:
    if glyph not in KEY_FOR_GLYPH:
        raise ValueError(f"unknown maze glyph: {glyph!r}")
    return walls_from_key(KEY_FOR_GLYPH[glyph])
