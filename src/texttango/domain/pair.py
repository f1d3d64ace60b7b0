"""Character-pair solids as they move through the pipeline.

A pair is the two characters, one from each input string, that share a
layout position. Solids are opaque kernel handles.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from texttango.domain.mesh import BoundingBox


class Side(Enum):
    """Which input string a character belongs to.

    The value is the rotation about the vertical axis, in degrees, that turns
    the extruded glyph toward its viewing diagonal.
    """

    LEFT = 45.0
    RIGHT = -45.0

    @property
    def angle(self) -> float:
        """Rotation about Y in degrees."""
        return self.value


@dataclass
class PairSolid:
    """Intersected (or single-sided) solid for one position, before layout.

    Attributes:
        index: Position in the text
        char1: Character from text1
        char2: Character from text2
        solid: Kernel solid handle
        bounds: Bounding box of solid
        bridges_added: Connectors merged in by automatic bridging
    """

    index: int
    char1: str
    char2: str
    solid: Any
    bounds: BoundingBox
    bridges_added: int = 0

    @property
    def label(self) -> str:
        """Human-readable pair label, e.g. 'Y/N'."""
        return f"{self.char1}/{self.char2}"


@dataclass
class PlacedPair:
    """A pair solid after it has been moved into its layout slot.

    Attributes:
        index: Position in the text
        solid: Translated kernel solid
        bounds: Bounding box after placement
        center_x: Placed center along X, including the pair's X offset
        center_z: Placed center along Z, including the pair's Z offset
    """

    index: int
    solid: Any
    bounds: BoundingBox
    center_x: float
    center_z: float
