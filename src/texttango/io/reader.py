"""Font reader and keyed font cache.

This module provides FontReader for loading a single TTF/OTF font and
extracting character outlines, and FontLibrary, which keeps one loaded
reader per font id so repeated generations do not re-parse font files.
"""

import threading
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from texttango.domain import GlyphOutline
from texttango.exceptions import FontLoadError
from texttango.io.converter import fonttools_glyph_to_outlines


class FontReader:
    """Loads TTF/OTF fonts and extracts character outlines.

    Example:
        reader = FontReader(Path("font.ttf"))
        reader.load()
        outlines = reader.get_outlines("A", resolution=16)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None
        self._cmap: dict[int, str] = {}
        # fontTools expands tables and glyphs lazily in place
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        """Path of the font file."""
        return self._font_path

    def load(self) -> None:
        """Load the font file.

        Raises:
            FontLoadError: If the file does not exist or cannot be parsed
        """
        if not self._font_path.exists():
            raise FontLoadError(str(self._font_path), "file not found")

        try:
            self._font = TTFont(str(self._font_path))
            self._cmap = self._font.getBestCmap() or {}
        except (TTLibError, OSError, KeyError, ValueError) as e:
            self._font = None
            raise FontLoadError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for OTF fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Outlines are returned in these units; divide by this value and
        multiply by the font size to get model units.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        with self._lock:
            return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font."""
        return self._require_font()["maxp"].numGlyphs

    @property
    def family_name(self) -> str:
        """Return the font's family name, or the file stem if it has none."""
        name = self._require_font()["name"].getDebugName(1)
        return name or self._font_path.stem

    def has_char(self, char: str) -> bool:
        """True if the character map covers char."""
        self._require_font()
        return ord(char) in self._cmap

    def get_outlines(self, char: str, resolution: int = 16) -> list[GlyphOutline] | None:
        """Get the tagged outlines of a character in font units.

        Concurrent calls on one reader are serialized.

        Args:
            char: Single character
            resolution: Samples per curve segment

        Returns:
            Outlines, or None if the font lacks the character or its glyph
            has no contours (e.g. space)

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        with self._lock:
            font = self._require_font()

            glyph_name = self._cmap.get(ord(char))
            if glyph_name is None:
                return None

            glyph_set = font.getGlyphSet()
            if glyph_name not in glyph_set:
                return None

            outlines = fonttools_glyph_to_outlines(glyph_set[glyph_name], glyph_set, resolution)
        return outlines or None

    def close(self) -> None:
        """Close the font file and free resources."""
        with self._lock:
            if self._font is not None:
                self._font.close()
                self._font = None
                self._cmap = {}

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()


class FontLibrary:
    """Cache of loaded fonts keyed by font id (a file path).

    Each font is loaded once, on first use, and stays open until it is
    invalidated or the library is cleared. Safe to share between the
    regeneration scheduler's worker threads.
    """

    def __init__(self) -> None:
        self._readers: dict[str, FontReader] = {}
        self._lock = threading.Lock()

    def __contains__(self, font_id: str) -> bool:
        return font_id in self._readers

    def get(self, font_id: str) -> FontReader:
        """Return the loaded reader for font_id, loading it if needed.

        Raises:
            FontLoadError: If the font cannot be loaded
        """
        with self._lock:
            reader = self._readers.get(font_id)
            if reader is None:
                reader = FontReader(Path(font_id))
                reader.load()
                self._readers[font_id] = reader
            return reader

    def get_outlines(
        self, font_id: str, char: str, resolution: int
    ) -> list[GlyphOutline] | None:
        """Outlines of char in font_id, in font units."""
        return self.get(font_id).get_outlines(char, resolution)

    def units_per_em(self, font_id: str) -> int:
        """Units per em of font_id."""
        return self.get(font_id).units_per_em

    def invalidate(self, font_id: str) -> None:
        """Close and forget one font."""
        with self._lock:
            reader = self._readers.pop(font_id, None)
        if reader is not None:
            reader.close()

    def clear(self) -> None:
        """Close and forget every cached font."""
        with self._lock:
            readers = list(self._readers.values())
            self._readers.clear()
        for reader in readers:
            reader.close()
