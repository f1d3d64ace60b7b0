"""Connectors between disjoint parts of a pair.

Intersecting two glyphs can split a position into several stacked pieces
(the dot of an 'i', a crossbar cut loose). Automatic bridging joins
vertically adjacent pieces whose gap is small with short vertical
cylinders. Manual bridging adds a user-placed box.
"""

from typing import Any

from texttango.config import BridgeSpec, GeometryConfig
from texttango.core.kernel import SolidKernel
from texttango.domain import BoundingBox, PlacedPair


class BridgeSynthesizer:
    """Builds automatic and manual bridges.

    Attributes:
        closing_tolerance: Gaps at or above this are left open
        overlap_margin: Extra connector height; overlaps deeper than this
            are already joined and get no connector
        radius: Connector cylinder radius
    """

    def __init__(self, kernel: SolidKernel, geometry: GeometryConfig) -> None:
        self.kernel = kernel
        self.closing_tolerance = geometry.bridge_closing_tolerance
        self.overlap_margin = geometry.bridge_overlap_margin
        self.radius = geometry.bridge_radius
        self.segments = geometry.support_segments

    def should_bridge(self, lower: BoundingBox, upper: BoundingBox) -> bool:
        """True if the vertical gap between two components needs a connector."""
        gap = upper.min[1] - lower.max[1]
        return -self.overlap_margin <= gap < self.closing_tolerance

    def connector(self, lower: BoundingBox, upper: BoundingBox) -> Any:
        """Vertical cylinder spanning the gap between two components."""
        gap = upper.min[1] - lower.max[1]
        height = max(gap, 0.0) + self.overlap_margin

        lower_center = lower.center
        upper_center = upper.center
        position = (
            (lower_center[0] + upper_center[0]) / 2.0,
            (lower.max[1] + upper.min[1]) / 2.0,
            (lower_center[2] + upper_center[2]) / 2.0,
        )

        kernel = self.kernel
        cylinder = kernel.cylinder(height, self.radius, self.segments)
        cylinder = kernel.rotate(cylinder, (90.0, 0.0, 0.0))
        return kernel.translate(cylinder, position)

    def auto_bridge(self, solid: Any) -> tuple[Any, int]:
        """Join vertically adjacent components of a solid.

        Args:
            solid: Pair solid, possibly made of several components

        Returns:
            Tuple of (solid, connectors added). The input solid is returned
            unchanged when no connector is needed.
        """
        kernel = self.kernel
        components = kernel.decompose(solid)
        if len(components) <= 1:
            return solid, 0

        measured = sorted(
            ((kernel.bounding_box(component), component) for component in components),
            key=lambda item: item[0].min[1],
        )

        connectors = []
        for (lower, _), (upper, _) in zip(measured, measured[1:]):
            if self.should_bridge(lower, upper):
                connectors.append(self.connector(lower, upper))

        if not connectors:
            return solid, 0

        parts = [component for _, component in measured] + connectors
        return kernel.union(parts), len(connectors)

    def manual_bridge(self, placed: PlacedPair, spec: BridgeSpec) -> Any:
        """Box at the pair's bounding-box center plus the bridge's offsets.

        The box is not checked against the pair; it may float free.

        Args:
            placed: Placed pair the bridge belongs to
            spec: Box size, offset and Z rotation

        Returns:
            Kernel solid
        """
        kernel = self.kernel
        box = kernel.box((spec.width, spec.height, spec.depth))
        if spec.rotation_z:
            box = kernel.rotate(box, (0.0, 0.0, spec.rotation_z))

        cx, cy, cz = placed.bounds.center
        return kernel.translate(box, (cx + spec.move_x, cy + spec.move_y, cz + spec.move_z))
