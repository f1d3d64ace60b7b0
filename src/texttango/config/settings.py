"""Configuration settings for TextTango."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from texttango.exceptions import ConfigurationError, NoPrintableGeometryError


class BaseKind(str, Enum):
    """Footprint shape of the base plate."""

    RECTANGLE = "rectangle"
    OVAL = "oval"


class SupportKind(str, Enum):
    """Cross-section of a support pillar."""

    CYLINDER = "cylinder"
    SQUARE = "square"


class CharTransform(BaseModel):
    """Pre-scale applied to a single character before intersection."""

    model_config = ConfigDict(extra="forbid")

    scale_x: float = Field(default=1.0, gt=0.0, le=10.0, description="Horizontal glyph scale")
    scale_y: float = Field(default=1.0, gt=0.0, le=10.0, description="Vertical glyph scale")


class PairTransform(BaseModel):
    """Transform applied to an intersected pair before layout."""

    model_config = ConfigDict(extra="forbid")

    scale_x: float = Field(default=1.0, gt=0.0, le=10.0, description="Horizontal pair scale")
    scale_y: float = Field(default=1.0, gt=0.0, le=10.0, description="Vertical pair scale")
    move_x: float = Field(default=0.0, description="Offset along the text direction")
    move_z: float = Field(default=0.0, description="Offset in depth")


class SupportSpec(BaseModel):
    """Support pillar under a pair."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=False, description="Build a pillar under this pair")
    kind: SupportKind = Field(default=SupportKind.CYLINDER, description="Pillar shape")
    height: float = Field(default=5.0, gt=0.0, description="Pillar height")
    width: float = Field(
        default=3.0,
        gt=0.0,
        description="Cylinder radius, or half-width of a square pillar",
    )


class BridgeSpec(BaseModel):
    """Connector joining disjoint parts of a pair."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=False, description="Add a bridge to this pair")
    auto: bool = Field(
        default=True,
        description="Detect gaps between components instead of using the manual box",
    )
    width: float = Field(default=2.0, gt=0.0, description="Manual box size along X")
    height: float = Field(default=2.0, gt=0.0, description="Manual box size along Y")
    depth: float = Field(default=2.0, gt=0.0, description="Manual box size along Z")
    move_x: float = Field(default=0.0, description="Manual box offset along X from pair center")
    move_y: float = Field(default=0.0, description="Manual box offset along Y from pair center")
    move_z: float = Field(default=0.0, description="Manual box offset along Z from pair center")
    rotation_z: float = Field(default=0.0, ge=-360.0, le=360.0, description="Rotation about Z (degrees)")


class PairConfig(BaseModel):
    """Per-position configuration.

    One entry exists for every layout position. Entries that were edited
    explicitly carry is_overridden=True and survive text changes at the
    same index.
    """

    model_config = ConfigDict(extra="forbid")

    char1: str = Field(default=" ", min_length=1, max_length=1)
    char2: str = Field(default=" ", min_length=1, max_length=1)
    char1_font: str | None = Field(default=None, description="Font override for char1")
    char2_font: str | None = Field(default=None, description="Font override for char2")
    char1_transform: CharTransform = Field(default_factory=CharTransform)
    char2_transform: CharTransform = Field(default_factory=CharTransform)
    transform: PairTransform = Field(default_factory=PairTransform)
    embed_depth: float | None = Field(
        default=None,
        description="How deep this pair sinks into the base (None = global)",
    )
    support: SupportSpec = Field(default_factory=SupportSpec)
    bridge: BridgeSpec = Field(default_factory=BridgeSpec)
    is_overridden: bool = False


class BaseSpec(BaseModel):
    """Base plate under the letters."""

    model_config = ConfigDict(extra="forbid")

    kind: BaseKind = Field(default=BaseKind.RECTANGLE, description="Footprint shape")
    height: float = Field(default=2.0, ge=0.0, description="Plate thickness (0 disables the base)")
    padding: float = Field(default=4.0, ge=0.0, description="Extra footprint size per axis")
    corner_radius: float = Field(default=2.0, ge=0.0, description="Rounded-rectangle corner radius")
    embed_depth: float = Field(
        default=0.5,
        description="Height of the base top above the letter bottoms",
    )

    @property
    def enabled(self) -> bool:
        """True if a base plate will be built."""
        return self.height > 0


class GeometryConfig(BaseModel):
    """Tolerances and tessellation settings for geometry construction.

    All lengths are in model units (the same units as font_size).
    """

    curve_resolution: int = Field(
        default=16,
        ge=1,
        le=128,
        description="Samples per curve segment when flattening outlines",
    )
    closing_tolerance: float = Field(
        default=1e-4,
        gt=0.0,
        description="Distance under which a trailing point duplicates the first",
    )
    min_segment_sq: float = Field(
        default=1e-6,
        gt=0.0,
        description="Squared length under which consecutive points are merged",
    )
    extrusion_factor: float = Field(
        default=5.0,
        ge=1.0,
        le=20.0,
        description="Extrusion depth as a multiple of font size",
    )
    degenerate_epsilon: float = Field(
        default=0.001,
        gt=0.0,
        description="Minimum width/height of a usable intersection",
    )
    space_advance_factor: float = Field(
        default=0.5,
        ge=0.0,
        description="Cursor advance for empty positions, as a multiple of font size",
    )
    support_segments: int = Field(default=16, ge=3, le=128, description="Sides of cylinder pillars")
    oval_segments: int = Field(default=64, ge=8, le=512, description="Sides of oval base footprints")
    bridge_closing_tolerance: float = Field(
        default=0.2,
        gt=0.0,
        description="Largest vertical gap that automatic bridging closes",
    )
    bridge_overlap_margin: float = Field(
        default=0.4,
        ge=0.0,
        description="Extra connector height, and the largest overlap still bridged",
    )
    bridge_radius: float = Field(default=0.9, gt=0.0, description="Automatic connector radius")
    island_touch_tolerance: float = Field(
        default=0.2,
        ge=0.0,
        description="Components whose bottom is within this of the global bottom are kept",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class TextSettings(BaseModel):
    """Main generation settings.

    pair_configs holds one entry per position, max(len(text1), len(text2))
    long. Use texttango.config.pairs.sync_pair_configs after changing either
    text.
    """

    text1: str = Field(default="YES", description="Text read from the left diagonal")
    text2: str = Field(default="NO", description="Text read from the right diagonal")
    font: str | None = Field(default=None, description="Path to the TTF/OTF font")
    font_size: float = Field(default=20.0, gt=0.0, le=1000.0, description="Glyph size in model units")
    spacing: float = Field(default=0.15, ge=0.0, le=5.0, description="Gap between pairs, times font size")

    base: BaseSpec = Field(default_factory=BaseSpec)

    support_enabled: bool = Field(default=False, description="Default support toggle for new pairs")
    support_kind: SupportKind = Field(default=SupportKind.CYLINDER)
    support_height: float = Field(default=5.0, gt=0.0)
    support_radius: float = Field(default=3.0, gt=0.0)

    pair_configs: list[PairConfig] = Field(default_factory=list)

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def position_count(self) -> int:
        """Number of layout positions."""
        return max(len(self.text1), len(self.text2))

    def padded_texts(self) -> tuple[str, str]:
        """Both texts right-padded with spaces to the same length."""
        length = self.position_count
        return self.text1.ljust(length), self.text2.ljust(length)

    def default_support(self) -> SupportSpec:
        """Support spec built from the global support defaults."""
        return SupportSpec(
            enabled=self.support_enabled,
            kind=self.support_kind,
            height=self.support_height,
            width=self.support_radius,
        )

    def validate_for_generation(self) -> None:
        """Check settings that pydantic field constraints cannot express.

        Raises:
            ConfigurationError: If settings would produce detached geometry
            NoPrintableGeometryError: If both texts are blank
        """
        if not self.font:
            raise ConfigurationError("font", "no font selected")

        if not self.text1.strip() and not self.text2.strip():
            raise NoPrintableGeometryError(self.text1, self.text2)

        if self.base.enabled and self.base.embed_depth < 0:
            raise ConfigurationError(
                "base.embed_depth",
                f"{self.base.embed_depth} leaves a gap between the base and the letters; "
                "use a value >= 0",
            )

        if self.base.enabled:
            for index, pair in enumerate(self.pair_configs):
                if pair.embed_depth is not None and pair.embed_depth < 0:
                    raise ConfigurationError(
                        f"pair_configs[{index}].embed_depth",
                        f"{pair.embed_depth} detaches this pair from the base",
                    )


def get_default_settings() -> TextSettings:
    """Get default application settings."""
    return TextSettings()
