"""Outline extraction and cross-section building.

Turns a character into an even-odd fillable CrossSection in model units:
font outlines are scaled by font_size / units_per_em, cleaned of closing
duplicates and micro-segments, and re-wound so outer loops run
counter-clockwise and holes clockwise.
"""

from typing import Protocol

from texttango.config import GeometryConfig
from texttango.core.geometry import drop_closing_duplicate, orient_loop, remove_short_segments
from texttango.domain import CrossSection, GlyphOutline
from texttango.exceptions import MissingGlyphError


class FontService(Protocol):
    """Source of character outlines in font units."""

    def get_outlines(
        self, font_id: str, char: str, resolution: int
    ) -> list[GlyphOutline] | None: ...

    def units_per_em(self, font_id: str) -> int: ...


def clean_outline(outline: GlyphOutline, geometry: GeometryConfig) -> GlyphOutline | None:
    """Clean and orient a single loop.

    Args:
        outline: Tagged loop
        geometry: Tolerances

    Returns:
        Cleaned loop wound by its kind, or None if fewer than 3 points remain
    """
    points = drop_closing_duplicate(outline.points, geometry.closing_tolerance)
    points = remove_short_segments(points, geometry.min_segment_sq)
    if len(points) < 3:
        return None

    return GlyphOutline(points=orient_loop(points, not outline.is_hole), kind=outline.kind)


def build_cross_section(
    outlines: list[GlyphOutline], geometry: GeometryConfig
) -> CrossSection | None:
    """Build an even-odd cross-section from tagged loops.

    Args:
        outlines: Loops in model units
        geometry: Tolerances

    Returns:
        CrossSection of the surviving loops, or None if none survive
    """
    cleaned = [loop for loop in (clean_outline(o, geometry) for o in outlines) if loop is not None]
    if not cleaned:
        return None
    return CrossSection(outlines=cleaned)


class OutlineExtractor:
    """Extracts scaled cross-sections of characters from a font service."""

    def __init__(self, fonts: FontService, geometry: GeometryConfig) -> None:
        self.fonts = fonts
        self.geometry = geometry

    def cross_section(self, char: str, font_id: str, font_size: float) -> CrossSection | None:
        """Cross-section of char at font_size.

        Args:
            char: Single character
            font_id: Font to read from
            font_size: Target em size in model units

        Returns:
            CrossSection, or None for whitespace

        Raises:
            MissingGlyphError: If the font has no usable outlines for char
        """
        if char.isspace():
            return None

        outlines = self.fonts.get_outlines(font_id, char, self.geometry.curve_resolution)
        if not outlines:
            raise MissingGlyphError(char, font_id)

        factor = font_size / self.fonts.units_per_em(font_id)
        section = build_cross_section([o.scaled(factor) for o in outlines], self.geometry)
        if section is None:
            raise MissingGlyphError(char, font_id)
        return section
