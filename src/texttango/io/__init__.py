"""Font and mesh I/O layer for TextTango.

This module handles reading fonts using fonttools and writing finished
meshes using trimesh. It keeps both libraries out of the geometry core.

Key responsibilities:
- Load TTF/OTF fonts and cache them by id
- Flatten glyph drawings into tagged 2D outlines
- Export meshes as Z-up binary STL

Key classes:
- FontReader: Load one font and extract character outlines
- FontLibrary: Keyed cache of loaded fonts
"""

from texttango.io.converter import OutlinePen, tag_loops
from texttango.io.reader import FontLibrary, FontReader
from texttango.io.writer import write_stl

__all__ = [
    "FontLibrary",
    "FontReader",
    "OutlinePen",
    "tag_loops",
    "write_stl",
]
