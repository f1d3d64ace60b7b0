"""Final union, floating-island filtering and mesh conversion."""

from typing import Any

from texttango.core.kernel import SolidKernel
from texttango.domain import MeshData
from texttango.exceptions import AssemblyError, KernelOperationError
from texttango.utils.logging import GenerationLogger


class Assembler:
    """Collects part solids and merges them into the printable mesh.

    Parts are held until assemble() unions them; the list is cleared after
    the union so part solids can be released.
    """

    def __init__(
        self,
        kernel: SolidKernel,
        events: GenerationLogger,
        touch_tolerance: float = 0.2,
    ) -> None:
        self.kernel = kernel
        self.events = events
        self.touch_tolerance = touch_tolerance
        self.parts: list[Any] = []

    def add(self, solid: Any) -> None:
        """Add a part to the assembly."""
        self.parts.append(solid)

    def union(self, solids: list[Any]) -> Any:
        """Union solids, converting kernel failures to AssemblyError."""
        try:
            return self.kernel.union(solids)
        except KernelOperationError as e:
            raise AssemblyError("union", str(e)) from e

    def remove_floating_islands(self, solid: Any) -> Any:
        """Drop components that do not reach the bottom of the model.

        Components whose min Y is more than touch_tolerance above the global
        min Y would print in mid-air. If filtering would drop everything, or
        the components cannot be measured, the unfiltered solid is returned.

        Args:
            solid: Unioned model

        Returns:
            Filtered solid
        """
        kernel = self.kernel
        try:
            components = kernel.decompose(solid)
            if len(components) <= 1:
                return solid
            bottoms = [kernel.bounding_box(component).min[1] for component in components]
        except KernelOperationError as e:
            self.events.log_part_error("island_filter", -1, e)
            return solid

        threshold = min(bottoms) + self.touch_tolerance
        kept = [c for c, bottom in zip(components, bottoms) if bottom <= threshold]
        removed = len(components) - len(kept)

        if not kept:
            return solid

        self.events.log_islands_removed(len(kept), removed)
        if removed == 0:
            return solid
        return self.union(kept)

    def assemble(self, filter_islands: bool) -> MeshData:
        """Union every part and produce the final mesh.

        Args:
            filter_islands: Remove floating components (used with a base)

        Returns:
            Non-indexed mesh centered on the origin

        Raises:
            AssemblyError: If there is nothing to assemble or the union fails
        """
        if not self.parts:
            raise AssemblyError("union", "no parts to assemble")

        solid = self.union(self.parts)
        self.parts = []

        if filter_islands:
            solid = self.remove_floating_islands(solid)

        try:
            mesh = self.kernel.to_mesh(solid)
        except KernelOperationError as e:
            raise AssemblyError("mesh", str(e)) from e

        return mesh.to_non_indexed().centered()
