"""Boolean solid kernel adapter.

The pipeline talks to solids only through the SolidKernel protocol. Solids
are opaque handles; every operation returns a new handle and leaves its
inputs untouched.

ManifoldKernel is the production implementation backed by manifold3d.
Library exceptions are re-raised as KernelOperationError so callers can
decide per stage whether a failure is fatal.
"""

import threading
from collections.abc import Sequence
from typing import Any, Protocol

import numpy as np

from texttango.domain import BoundingBox, CrossSection, MeshData
from texttango.exceptions import KernelOperationError

Vec3 = tuple[float, float, float]


class SolidKernel(Protocol):
    """Operations the pipeline needs from a boolean solid kernel.

    Coordinates are Y-up. extrude() builds along +Z from z=0 to z=depth.
    """

    def extrude(self, section: CrossSection, depth: float) -> Any: ...

    def union(self, solids: Sequence[Any]) -> Any: ...

    def intersect(self, a: Any, b: Any) -> Any: ...

    def subtract(self, a: Any, b: Any) -> Any: ...

    def translate(self, solid: Any, offset: Vec3) -> Any: ...

    def rotate(self, solid: Any, degrees: Vec3) -> Any: ...

    def scale(self, solid: Any, factors: Vec3) -> Any: ...

    def bounding_box(self, solid: Any) -> BoundingBox: ...

    def decompose(self, solid: Any) -> list[Any]: ...

    def is_empty(self, solid: Any) -> bool: ...

    def cylinder(self, height: float, radius: float, segments: int) -> Any: ...

    def box(self, size: Vec3) -> Any: ...

    def to_mesh(self, solid: Any) -> MeshData: ...


class ManifoldKernel:
    """SolidKernel backed by manifold3d.

    manifold3d is imported on construction so modules that only need the
    protocol (and tests using another kernel) do not require it.

    Raises:
        KernelOperationError: If manifold3d is not installed
    """

    def __init__(self) -> None:
        try:
            import manifold3d
        except ImportError as e:
            raise KernelOperationError("init", f"manifold3d is not available: {e}") from e

        self._m = manifold3d

    def _call(self, operation: str, func: Any, *args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except KernelOperationError:
            raise
        except Exception as e:
            raise KernelOperationError(operation, str(e)) from e

    def extrude(self, section: CrossSection, depth: float) -> Any:
        loops = [np.asarray(loop, dtype=np.float64) for loop in section.loops()]

        def build() -> Any:
            cross_section = self._m.CrossSection(loops, self._m.FillRule.EvenOdd)
            return cross_section.extrude(depth)

        return self._call("extrude", build)

    def union(self, solids: Sequence[Any]) -> Any:
        parts = list(solids)
        if not parts:
            raise KernelOperationError("union", "nothing to union")
        if len(parts) == 1:
            return parts[0]
        return self._call("union", self._m.Manifold.batch_boolean, parts, self._m.OpType.Add)

    def intersect(self, a: Any, b: Any) -> Any:
        return self._call("intersect", lambda: a ^ b)

    def subtract(self, a: Any, b: Any) -> Any:
        return self._call("subtract", lambda: a - b)

    def translate(self, solid: Any, offset: Vec3) -> Any:
        return self._call("translate", solid.translate, tuple(float(v) for v in offset))

    def rotate(self, solid: Any, degrees: Vec3) -> Any:
        return self._call("rotate", solid.rotate, tuple(float(v) for v in degrees))

    def scale(self, solid: Any, factors: Vec3) -> Any:
        return self._call("scale", solid.scale, tuple(float(v) for v in factors))

    def bounding_box(self, solid: Any) -> BoundingBox:
        bounds = self._call("bounding_box", solid.bounding_box)
        return BoundingBox.from_bounds(bounds)

    def decompose(self, solid: Any) -> list[Any]:
        return list(self._call("decompose", solid.decompose))

    def is_empty(self, solid: Any) -> bool:
        return bool(self._call("is_empty", solid.is_empty))

    def cylinder(self, height: float, radius: float, segments: int) -> Any:
        return self._call(
            "cylinder",
            self._m.Manifold.cylinder,
            height=height,
            radius_low=radius,
            radius_high=radius,
            circular_segments=segments,
            center=True,
        )

    def box(self, size: Vec3) -> Any:
        return self._call("box", self._m.Manifold.cube, tuple(float(v) for v in size), center=True)

    def to_mesh(self, solid: Any) -> MeshData:
        mesh = self._call("to_mesh", solid.to_mesh)
        properties = np.asarray(mesh.vert_properties)
        if properties.ndim != 2:
            properties = properties.reshape(-1, 3)
        vertices = properties[:, :3]
        return MeshData(vertices=vertices, triangles=np.asarray(mesh.tri_verts))


_kernel: ManifoldKernel | None = None
_kernel_lock = threading.Lock()


def get_kernel() -> ManifoldKernel:
    """Return the process-wide ManifoldKernel, creating it on first use."""
    global _kernel
    with _kernel_lock:
        if _kernel is None:
            _kernel = ManifoldKernel()
        return _kernel
