"""
Type Classification
Maps the free-text volcano type label to a marker color.
"""
from __future__ import annotations

from typing import NamedTuple, Optional

from volcanoviz.config import MARKER_ALPHA


class Rgba(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_hex(cls, value: str, alpha: int = 255) -> Rgba:
        """Parse '#RRGGBB' into a color with the given alpha."""
        value = value.lstrip("#")
        if len(value) != 6:
            raise ValueError(f"Expected '#RRGGBB', got '#{value}'.")
        return cls(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16), alpha)

    def with_alpha(self, alpha: int) -> Rgba:
        return self._replace(a=alpha)


STRATO_COLOR = Rgba.from_hex("#A6CDED")
SHIELD_COLOR = Rgba.from_hex("#CD5A5C")
COMPLEX_COLOR = Rgba.from_hex("#F3C2B6")
SUBMARINE_COLOR = Rgba.from_hex("#893F9A")
LAVA_COLOR = Rgba.from_hex("#FCFDF9")
DEFAULT_COLOR = Rgba.from_hex("#ADD5C4")

# Order matters: the first keyword contained in the label wins.
TYPE_COLOR_RULES: list[tuple[str, Rgba]] = [
    ("strato", STRATO_COLOR),
    ("shield", SHIELD_COLOR),
    ("complex", COMPLEX_COLOR),
    ("submarine", SUBMARINE_COLOR),
    ("lava", LAVA_COLOR),
]

LEGEND_ENTRIES: list[tuple[str, Rgba]] = [
    ("Stratovolcano", STRATO_COLOR),
    ("Shield", SHIELD_COLOR),
    ("Complex", COMPLEX_COLOR),
    ("Submarine", SUBMARINE_COLOR),
    ("Lava Dome", LAVA_COLOR),
    ("Other", DEFAULT_COLOR),
]


def classify(type_label: Optional[str]) -> Rgba:
    """
    Return the translucent marker color for a volcano type label.

    Matching is a case-insensitive substring test against TYPE_COLOR_RULES.
    Empty, missing or unmatched labels get DEFAULT_COLOR.
    """
    if type_label:
        label = type_label.lower()
        for keyword, color in TYPE_COLOR_RULES:
            if keyword in label:
                return color.with_alpha(MARKER_ALPHA)
    return DEFAULT_COLOR.with_alpha(MARKER_ALPHA)
