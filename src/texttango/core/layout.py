"""Sequential left-to-right placement of pair solids."""

from texttango.config import PairTransform
from texttango.core.kernel import SolidKernel
from texttango.domain import PairSolid, PlacedPair


class LayoutEngine:
    """Places pair solids along X with a running cursor.

    Each pair is scaled by its transform, then moved so its X extent starts
    at cursor + move_x. The cursor then advances by the scaled width plus
    the gap; move offsets never affect the cursor.

    Attributes:
        cursor: X position where the next pair starts
        gap: Space between pairs
        empty_advance: Extra advance for empty positions, on top of gap
    """

    def __init__(
        self,
        kernel: SolidKernel,
        font_size: float,
        spacing: float,
        space_factor: float = 0.5,
    ) -> None:
        self.kernel = kernel
        self.gap = font_size * spacing
        self.empty_advance = font_size * space_factor
        self.cursor = 0.0

    def place(self, pair: PairSolid, transform: PairTransform, lift: float = 0.0) -> PlacedPair:
        """Scale, move and record a pair at the cursor.

        Args:
            pair: Solid built by the intersector
            transform: Per-pair scale and move offsets
            lift: Extra Y offset (negative lowers the pair)

        Returns:
            PlacedPair with its placed bounds and center
        """
        kernel = self.kernel
        solid = pair.solid
        if transform.scale_x != 1.0 or transform.scale_y != 1.0:
            solid = kernel.scale(solid, (transform.scale_x, transform.scale_y, 1.0))

        bounds = kernel.bounding_box(solid)
        offset = (
            self.cursor + transform.move_x - bounds.min[0],
            lift,
            transform.move_z,
        )
        solid = kernel.translate(solid, offset)
        placed_bounds = bounds.translated(offset)

        self.cursor += bounds.width + self.gap

        center_x, _, center_z = placed_bounds.center
        return PlacedPair(
            index=pair.index,
            solid=solid,
            bounds=placed_bounds,
            center_x=center_x,
            center_z=center_z,
        )

    def advance_empty(self) -> None:
        """Skip an empty position."""
        self.cursor += self.gap + self.empty_advance
