"""Exception hierarchy for TextTango."""


class TextTangoError(Exception):
    """Base exception for all TextTango errors."""

    pass


class ConfigurationError(TextTangoError):
    """Settings are inconsistent and would produce unprintable geometry."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid setting '{field}': {reason}")


class FontError(TextTangoError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphError(TextTangoError):
    """Errors related to a single glyph or character position."""

    pass


class MissingGlyphError(GlyphError):
    """The font has no outlines for a character."""

    def __init__(self, char: str, font_id: str) -> None:
        self.char = char
        self.font_id = font_id
        super().__init__(f"Character {char!r} has no outlines in font '{font_id}'")


class DegenerateIntersectionError(GlyphError):
    """Intersection of two character solids has no usable volume."""

    def __init__(self, index: int, width: float, height: float) -> None:
        self.index = index
        self.width = width
        self.height = height
        super().__init__(
            f"Intersection at position {index} is degenerate "
            f"(width={width:.4g}, height={height:.4g})"
        )


class GeometryError(TextTangoError):
    """Errors raised while building or combining solids."""

    pass


class KernelOperationError(GeometryError):
    """A boolean kernel operation failed."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Kernel operation '{operation}' failed: {reason}")


class AssemblyError(GeometryError):
    """Assembly-level failure (base synthesis or final union)."""

    def __init__(self, stage: str, reason: str) -> None:
        self.stage = stage
        self.reason = reason
        super().__init__(f"Assembly failed during {stage}: {reason}")


class NoPrintableGeometryError(GeometryError):
    """No character position produced any geometry."""

    def __init__(self, text1: str, text2: str) -> None:
        self.text1 = text1
        self.text2 = text2
        super().__init__(
            "No printable 3D geometry could be generated for "
            f"{text1!r} / {text2!r}. The font may not support these characters, "
            "or every intersection was empty. Try a bolder font or different text."
        )


class ExportError(TextTangoError):
    """Error writing a mesh to disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to export mesh to '{path}': {reason}")
