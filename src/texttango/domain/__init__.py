"""Domain models for TextTango.

This module contains the plain data types the pipeline passes between
stages. They hold no kernel or font library state beyond opaque solid
handles.

Key classes:
- GlyphOutline: A closed 2D loop tagged outer or hole
- CrossSection: Loops filled with the even-odd rule
- BoundingBox: Axis-aligned 3D bounds
- MeshData: Triangle mesh of a finished solid
- PairSolid: Solid for one character position before layout
- PlacedPair: Solid for one character position after layout
"""

from texttango.domain.mesh import BoundingBox, MeshData
from texttango.domain.outline import CrossSection, GlyphOutline, LoopKind, Point2D
from texttango.domain.pair import PairSolid, PlacedPair, Side

__all__: list[str] = [
    # Enums
    "LoopKind",
    "Side",
    # Core types
    "Point2D",
    "GlyphOutline",
    "CrossSection",
    "BoundingBox",
    "MeshData",
    "PairSolid",
    "PlacedPair",
]
