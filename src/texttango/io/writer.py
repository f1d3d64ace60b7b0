"""STL export for generated meshes.

Meshes are built Y-up; printers and slicers expect Z-up, so the writer
rotates the mesh by +90 degrees about X before handing it to trimesh.
"""

from pathlib import Path

import numpy as np
import trimesh

from texttango.domain import MeshData
from texttango.exceptions import ExportError

# (x, y, z) -> (x, -z, y)
Y_UP_TO_Z_UP = np.array(
    [
        [1.0, 0.0, 0.0],
        [0.0, 0.0, -1.0],
        [0.0, 1.0, 0.0],
    ]
)


def to_z_up(vertices: np.ndarray) -> np.ndarray:
    """Rotate Y-up vertex positions to Z-up."""
    return np.asarray(vertices, dtype=np.float64) @ Y_UP_TO_Z_UP.T


def write_stl(mesh: MeshData, output_path: Path) -> Path:
    """Write a mesh as a binary STL file.

    Args:
        mesh: Mesh to export (Y-up)
        output_path: Destination path; parent directories are created

    Returns:
        The path written

    Raises:
        ExportError: If the mesh is empty or the file cannot be written
    """
    if mesh.is_empty():
        raise ExportError(str(output_path), "mesh has no triangles")

    solid = trimesh.Trimesh(
        vertices=to_z_up(mesh.vertices),
        faces=mesh.triangles.astype(np.int64),
        process=False,
    )

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        solid.export(str(output_path), file_type="stl")
    except OSError as e:
        raise ExportError(str(output_path), str(e)) from e

    return output_path
