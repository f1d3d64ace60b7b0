"""Character solids and per-position intersection.

Each character is extruded deep enough to cover the whole pair, centered
on X and Z, stood on Y=0 and turned +45 degrees (text1) or -45 degrees
(text2) about the vertical axis. Intersecting the two solids leaves a
volume whose silhouette reads as char1 from one diagonal and char2 from
the other.
"""

from typing import Any

from texttango.config import CharTransform, PairConfig, TextSettings
from texttango.core.kernel import SolidKernel
from texttango.core.outline import OutlineExtractor
from texttango.domain import BoundingBox, CrossSection, PairSolid, Side
from texttango.exceptions import DegenerateIntersectionError, MissingGlyphError
from texttango.utils.logging import GenerationLogger


class CharacterSolidBuilder:
    """Builds the rotated, extruded solid for one character."""

    def __init__(self, kernel: SolidKernel, extrusion_factor: float) -> None:
        self.kernel = kernel
        self.extrusion_factor = extrusion_factor

    def build(
        self,
        section: CrossSection,
        font_size: float,
        side: Side,
        transform: CharTransform | None = None,
    ) -> Any:
        """Extrude, pre-scale, center and rotate a cross-section.

        Args:
            section: Character region in model units
            font_size: Font size; the extrusion is extrusion_factor times this
            side: Which diagonal the character faces
            transform: Optional per-character pre-scale

        Returns:
            Kernel solid with its bottom at Y=0
        """
        kernel = self.kernel
        solid = kernel.extrude(section, font_size * self.extrusion_factor)

        if transform is not None and (transform.scale_x != 1.0 or transform.scale_y != 1.0):
            solid = kernel.scale(solid, (transform.scale_x, transform.scale_y, 1.0))

        bounds = kernel.bounding_box(solid)
        center_x, _, center_z = bounds.center
        solid = kernel.translate(solid, (-center_x, -bounds.min[1], -center_z))
        return kernel.rotate(solid, (0.0, side.angle, 0.0))


class PairIntersector:
    """Produces the solid for one layout position.

    Missing glyphs and degenerate intersections are logged and treated as
    spaces; kernel failures propagate to the caller.
    """

    def __init__(
        self,
        extractor: OutlineExtractor,
        builder: CharacterSolidBuilder,
        events: GenerationLogger,
        degenerate_epsilon: float = 0.001,
    ) -> None:
        self.extractor = extractor
        self.builder = builder
        self.events = events
        self.degenerate_epsilon = degenerate_epsilon

    def _side_solid(
        self,
        index: int,
        char: str,
        font_id: str,
        font_size: float,
        side: Side,
        transform: CharTransform,
    ) -> Any | None:
        try:
            section = self.extractor.cross_section(char, font_id, font_size)
        except MissingGlyphError as e:
            self.events.log_missing_glyph(index, e.char, e.font_id)
            return None

        if section is None:
            return None
        return self.builder.build(section, font_size, side, transform)

    def intersect(self, index: int, solid1: Any, solid2: Any) -> tuple[Any, BoundingBox]:
        """Intersect two character solids.

        Raises:
            DegenerateIntersectionError: If the result is thinner than
                degenerate_epsilon in width or height
        """
        kernel = self.builder.kernel
        solid = kernel.intersect(solid1, solid2)
        bounds = kernel.bounding_box(solid)
        if kernel.is_empty(solid) or bounds.is_degenerate(self.degenerate_epsilon):
            raise DegenerateIntersectionError(index, bounds.width, bounds.height)
        return solid, bounds

    def build(self, index: int, pair: PairConfig, settings: TextSettings) -> PairSolid | None:
        """Build the pair solid at one position.

        Args:
            index: Position in the text
            pair: Per-position configuration
            settings: Run settings (global font and size)

        Returns:
            PairSolid, or None if the position is empty
        """
        kernel = self.builder.kernel
        font_size = settings.font_size
        font1 = pair.char1_font or settings.font
        font2 = pair.char2_font or settings.font

        solid1 = self._side_solid(index, pair.char1, font1, font_size, Side.LEFT, pair.char1_transform)
        solid2 = self._side_solid(index, pair.char2, font2, font_size, Side.RIGHT, pair.char2_transform)

        if solid1 is None and solid2 is None:
            return None

        if solid1 is not None and solid2 is not None:
            try:
                solid, bounds = self.intersect(index, solid1, solid2)
            except DegenerateIntersectionError as e:
                self.events.log_degenerate(index, f"{pair.char1}/{pair.char2}", e.width, e.height)
                return None
        else:
            solid = solid1 if solid1 is not None else solid2
            bounds = kernel.bounding_box(solid)

        return PairSolid(index=index, char1=pair.char1, char2=pair.char2, solid=solid, bounds=bounds)
