"""Support pillars under pairs."""

from typing import Any

from texttango.config import BaseSpec, SupportKind, SupportSpec
from texttango.core.kernel import SolidKernel
from texttango.domain import PlacedPair


class SupportSynthesizer:
    """Builds vertical pillars beneath placed pairs."""

    def __init__(self, kernel: SolidKernel, segments: int = 16) -> None:
        self.kernel = kernel
        self.segments = segments

    @staticmethod
    def anchor_y(base: BaseSpec) -> float:
        """Y where pillars start: the base bottom, or 0 without a base."""
        if base.enabled:
            return base.embed_depth - base.height
        return 0.0

    def build(self, placed: PlacedPair, spec: SupportSpec, anchor_y: float) -> Any:
        """Build one pillar spanning [anchor_y, anchor_y + spec.height].

        Args:
            placed: Pair the pillar sits under
            spec: Pillar shape and size
            anchor_y: Bottom of the pillar

        Returns:
            Kernel solid
        """
        kernel = self.kernel
        if spec.kind == SupportKind.SQUARE:
            side = spec.width * 2.0
            pillar = kernel.box((side, side, spec.height))
        else:
            pillar = kernel.cylinder(spec.height, spec.width, self.segments)

        # Primitive axis is Z; stand it up along Y.
        pillar = kernel.rotate(pillar, (90.0, 0.0, 0.0))
        return kernel.translate(
            pillar, (placed.center_x, anchor_y + spec.height / 2.0, placed.center_z)
        )
