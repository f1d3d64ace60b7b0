"""3D bounding boxes and triangle meshes.

Key classes:
- BoundingBox: Axis-aligned box reported by the solid kernel
- MeshData: Vertex positions and triangle indices of a finished solid
"""

from dataclasses import dataclass

import numpy as np

Vec3 = tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box in model units.

    Y is up. X runs along the text, Z is depth.

    Attributes:
        min: Minimum corner (x, y, z)
        max: Maximum corner (x, y, z)
    """

    min: Vec3
    max: Vec3

    @classmethod
    def from_bounds(cls, bounds: "tuple[float, ...] | list[float]") -> "BoundingBox":
        """Build from a flat (min_x, min_y, min_z, max_x, max_y, max_z) sequence."""
        return cls(
            min=(float(bounds[0]), float(bounds[1]), float(bounds[2])),
            max=(float(bounds[3]), float(bounds[4]), float(bounds[5])),
        )

    @property
    def width(self) -> float:
        """Extent along X."""
        return self.max[0] - self.min[0]

    @property
    def height(self) -> float:
        """Extent along Y."""
        return self.max[1] - self.min[1]

    @property
    def depth(self) -> float:
        """Extent along Z."""
        return self.max[2] - self.min[2]

    @property
    def center(self) -> Vec3:
        """Center point of the box."""
        return (
            (self.min[0] + self.max[0]) / 2.0,
            (self.min[1] + self.max[1]) / 2.0,
            (self.min[2] + self.max[2]) / 2.0,
        )

    def is_degenerate(self, epsilon: float) -> bool:
        """True if the box is thinner than epsilon in width or height.

        Args:
            epsilon: Minimum usable extent

        Returns:
            True for boxes that should be treated as empty space
        """
        return self.width < epsilon or self.height < epsilon

    def translated(self, offset: Vec3) -> "BoundingBox":
        """Return the box moved by offset."""
        dx, dy, dz = offset
        return BoundingBox(
            min=(self.min[0] + dx, self.min[1] + dy, self.min[2] + dz),
            max=(self.max[0] + dx, self.max[1] + dy, self.max[2] + dz),
        )

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """Smallest box containing both boxes."""
        return BoundingBox(
            min=tuple(min(a, b) for a, b in zip(self.min, other.min)),  # type: ignore[arg-type]
            max=tuple(max(a, b) for a, b in zip(self.max, other.max)),  # type: ignore[arg-type]
        )

    def contains(self, other: "BoundingBox", tolerance: float = 1e-6) -> bool:
        """True if other lies inside this box, within tolerance."""
        return all(
            self.min[i] - tolerance <= other.min[i] and other.max[i] <= self.max[i] + tolerance
            for i in range(3)
        )


@dataclass
class MeshData:
    """Triangle mesh exported from the solid kernel.

    Attributes:
        vertices: Float32 array of shape (N, 3)
        triangles: Uint32 array of shape (M, 3) indexing into vertices
    """

    vertices: np.ndarray
    triangles: np.ndarray

    def __post_init__(self) -> None:
        self.vertices = np.asarray(self.vertices, dtype=np.float32).reshape(-1, 3)
        self.triangles = np.asarray(self.triangles, dtype=np.uint32).reshape(-1, 3)

    @property
    def triangle_count(self) -> int:
        """Number of triangles."""
        return int(self.triangles.shape[0])

    def is_empty(self) -> bool:
        """True if the mesh has no triangles."""
        return self.triangle_count == 0

    def bounding_box(self) -> BoundingBox:
        """Axis-aligned bounds of all vertices.

        Returns:
            BoundingBox of the vertices, or a zero box for an empty mesh
        """
        if self.vertices.shape[0] == 0:
            return BoundingBox(min=(0.0, 0.0, 0.0), max=(0.0, 0.0, 0.0))

        lo = self.vertices.min(axis=0)
        hi = self.vertices.max(axis=0)
        return BoundingBox.from_bounds([*lo.tolist(), *hi.tolist()])

    def to_non_indexed(self) -> "MeshData":
        """Expand to one vertex triple per triangle.

        Shared vertices are split so every face gets its own flat normal.

        Returns:
            New MeshData with sequential triangle indices
        """
        expanded = self.vertices[self.triangles.reshape(-1)]
        indices = np.arange(expanded.shape[0], dtype=np.uint32).reshape(-1, 3)
        return MeshData(vertices=expanded, triangles=indices)

    def centered(self) -> "MeshData":
        """Return a copy translated so its bounding box is centered on the origin."""
        if self.vertices.shape[0] == 0:
            return MeshData(vertices=self.vertices.copy(), triangles=self.triangles.copy())

        center = np.asarray(self.bounding_box().center, dtype=np.float64)
        shifted = self.vertices.astype(np.float64) - center
        return MeshData(vertices=shifted, triangles=self.triangles.copy())
