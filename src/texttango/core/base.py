"""Base plate under the letters."""

from typing import Any

from texttango.config import BaseKind, BaseSpec, GeometryConfig
from texttango.core.geometry import ellipse, rounded_rectangle
from texttango.core.kernel import SolidKernel
from texttango.core.outline import build_cross_section
from texttango.domain import BoundingBox, GlyphOutline, Point2D
from texttango.exceptions import AssemblyError, KernelOperationError


class BaseSynthesizer:
    """Builds a rounded-rectangle or oval plate sized to the letters."""

    def __init__(self, kernel: SolidKernel, geometry: GeometryConfig) -> None:
        self.kernel = kernel
        self.geometry = geometry

    def footprint(self, spec: BaseSpec, width: float, depth: float) -> list[Point2D]:
        """Plate outline centered on the origin.

        Args:
            spec: Base settings
            width: Letters' extent along X
            depth: Letters' extent along Z

        Returns:
            Counter-clockwise loop of size (width + padding, depth + padding)
        """
        size_x = width + spec.padding
        size_z = depth + spec.padding
        if spec.kind == BaseKind.OVAL:
            return ellipse(size_x / 2.0, size_z / 2.0, self.geometry.oval_segments)
        return rounded_rectangle(size_x, size_z, spec.corner_radius, self.geometry.curve_resolution)

    def build(self, spec: BaseSpec, letters: BoundingBox) -> Any:
        """Build the plate with its top face at Y = embed_depth.

        Args:
            spec: Base settings
            letters: Bounds of everything placed above the base

        Returns:
            Kernel solid

        Raises:
            AssemblyError: If the plate cannot be built
        """
        loop = self.footprint(spec, letters.width, letters.depth)
        section = build_cross_section([GlyphOutline(points=loop)], self.geometry)
        if section is None:
            raise AssemblyError("base", "footprint is degenerate")

        kernel = self.kernel
        center_x, _, center_z = letters.center
        try:
            plate = kernel.extrude(section, spec.height)
            # Extrusion runs along +Z; turn it to +Y. Footprint y maps to -z.
            plate = kernel.rotate(plate, (-90.0, 0.0, 0.0))
            return kernel.translate(plate, (center_x, spec.embed_depth - spec.height, center_z))
        except KernelOperationError as e:
            raise AssemblyError("base", str(e)) from e
