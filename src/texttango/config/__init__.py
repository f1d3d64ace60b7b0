"""Configuration management for TextTango.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TextSettings: Global generation settings plus per-position pair configs
- PairConfig: Per-position overrides (fonts, transforms, support, bridge)
- BaseSpec: Base plate settings
- GeometryConfig: Tolerances and tessellation
- LoggingConfig: Logging settings
"""

from texttango.config.pairs import (
    default_pair_config,
    reset_pair_config,
    sync_pair_configs,
    update_char_transform,
    update_pair_bridge,
    update_pair_embed_depth,
    update_pair_fonts,
    update_pair_support,
    update_pair_transform,
)
from texttango.config.settings import (
    BaseKind,
    BaseSpec,
    BridgeSpec,
    CharTransform,
    GeometryConfig,
    LoggingConfig,
    PairConfig,
    PairTransform,
    SupportKind,
    SupportSpec,
    TextSettings,
    get_default_settings,
)

__all__ = [
    "BaseKind",
    "BaseSpec",
    "BridgeSpec",
    "CharTransform",
    "GeometryConfig",
    "LoggingConfig",
    "PairConfig",
    "PairTransform",
    "SupportKind",
    "SupportSpec",
    "TextSettings",
    "default_pair_config",
    "get_default_settings",
    "reset_pair_config",
    "sync_pair_configs",
    "update_char_transform",
    "update_pair_bridge",
    "update_pair_embed_depth",
    "update_pair_fonts",
    "update_pair_support",
    "update_pair_transform",
]
