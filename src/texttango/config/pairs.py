"""Structured updates for per-position pair configuration.

Every function returns a new TextSettings and leaves its input untouched.
Edits through the update_* functions mark the entry as overridden; only
reset_pair_config clears the flag.
"""

from typing import Any

from pydantic import BaseModel

from texttango.config.settings import (
    BridgeSpec,
    CharTransform,
    PairConfig,
    PairTransform,
    SupportSpec,
    TextSettings,
)


def default_pair_config(settings: TextSettings, char1: str, char2: str) -> PairConfig:
    """Build a pair entry that follows the global defaults.

    Args:
        settings: Settings providing the global support defaults
        char1: Character from text1
        char2: Character from text2

    Returns:
        Fresh, non-overridden PairConfig
    """
    return PairConfig(char1=char1, char2=char2, support=settings.default_support())


def sync_pair_configs(settings: TextSettings) -> TextSettings:
    """Resize pair_configs to match the current texts.

    Positions are re-paired by index. Overridden entries keep their edits and
    only pick up the new characters; all other entries are rebuilt from the
    global defaults. Entries past the new length are dropped.

    Args:
        settings: Settings whose texts may have changed

    Returns:
        Settings with one pair entry per position
    """
    padded1, padded2 = settings.padded_texts()
    existing = settings.pair_configs
    configs: list[PairConfig] = []

    for index, (char1, char2) in enumerate(zip(padded1, padded2)):
        if index < len(existing) and existing[index].is_overridden:
            configs.append(existing[index].model_copy(update={"char1": char1, "char2": char2}))
        else:
            configs.append(default_pair_config(settings, char1, char2))

    return settings.model_copy(update={"pair_configs": configs})


def _merge(model: BaseModel, changes: dict[str, Any]) -> Any:
    """Validate changes on top of an existing sub-model."""
    return type(model).model_validate({**model.model_dump(), **changes})


def _pair_at(settings: TextSettings, index: int) -> PairConfig:
    if not 0 <= index < len(settings.pair_configs):
        raise IndexError(f"No pair at position {index} (have {len(settings.pair_configs)})")
    return settings.pair_configs[index]


def _replace_pair(settings: TextSettings, index: int, pair: PairConfig) -> TextSettings:
    configs = list(settings.pair_configs)
    configs[index] = pair
    return settings.model_copy(update={"pair_configs": configs})


def update_pair_transform(settings: TextSettings, index: int, **changes: Any) -> TextSettings:
    """Change scale/move of one pair.

    Args:
        settings: Current settings
        index: Pair position
        **changes: Any of scale_x, scale_y, move_x, move_z

    Returns:
        Updated settings
    """
    pair = _pair_at(settings, index)
    transform: PairTransform = _merge(pair.transform, changes)
    return _replace_pair(
        settings,
        index,
        pair.model_copy(update={"transform": transform, "is_overridden": True}),
    )


def update_char_transform(
    settings: TextSettings, index: int, side: int, **changes: Any
) -> TextSettings:
    """Change the pre-scale of one character of a pair.

    Args:
        settings: Current settings
        index: Pair position
        side: 1 for char1, 2 for char2
        **changes: Any of scale_x, scale_y

    Returns:
        Updated settings
    """
    if side not in (1, 2):
        raise ValueError(f"side must be 1 or 2, got {side}")

    pair = _pair_at(settings, index)
    field_name = f"char{side}_transform"
    transform: CharTransform = _merge(getattr(pair, field_name), changes)
    return _replace_pair(
        settings,
        index,
        pair.model_copy(update={field_name: transform, "is_overridden": True}),
    )


def update_pair_support(settings: TextSettings, index: int, **changes: Any) -> TextSettings:
    """Change the support pillar of one pair.

    Args:
        settings: Current settings
        index: Pair position
        **changes: Any of enabled, kind, height, width

    Returns:
        Updated settings
    """
    pair = _pair_at(settings, index)
    support: SupportSpec = _merge(pair.support, changes)
    return _replace_pair(
        settings,
        index,
        pair.model_copy(update={"support": support, "is_overridden": True}),
    )


def update_pair_bridge(settings: TextSettings, index: int, **changes: Any) -> TextSettings:
    """Change the bridge of one pair.

    Args:
        settings: Current settings
        index: Pair position
        **changes: Any BridgeSpec field

    Returns:
        Updated settings
    """
    pair = _pair_at(settings, index)
    bridge: BridgeSpec = _merge(pair.bridge, changes)
    return _replace_pair(
        settings,
        index,
        pair.model_copy(update={"bridge": bridge, "is_overridden": True}),
    )


def update_pair_fonts(
    settings: TextSettings,
    index: int,
    char1_font: str | None = None,
    char2_font: str | None = None,
) -> TextSettings:
    """Override the font of either character of a pair.

    Passing None keeps the current value.

    Returns:
        Updated settings
    """
    pair = _pair_at(settings, index)
    updates: dict[str, Any] = {"is_overridden": True}
    if char1_font is not None:
        updates["char1_font"] = char1_font
    if char2_font is not None:
        updates["char2_font"] = char2_font
    return _replace_pair(settings, index, pair.model_copy(update=updates))


def update_pair_embed_depth(
    settings: TextSettings, index: int, embed_depth: float | None
) -> TextSettings:
    """Set (or clear, with None) the embed depth override of a pair."""
    pair = _pair_at(settings, index)
    return _replace_pair(
        settings,
        index,
        pair.model_copy(update={"embed_depth": embed_depth, "is_overridden": True}),
    )


def reset_pair_config(settings: TextSettings, index: int) -> TextSettings:
    """Reset the transform and support of one pair to the global defaults.

    Font overrides, character transforms, bridge and embed depth are kept.
    Clearing is_overridden means the next sync_pair_configs after a text
    change rebuilds the entry from the defaults.

    Args:
        settings: Current settings
        index: Pair position

    Returns:
        Updated settings with is_overridden cleared
    """
    pair = _pair_at(settings, index)
    return _replace_pair(
        settings,
        index,
        pair.model_copy(
            update={
                "transform": PairTransform(),
                "support": settings.default_support(),
                "is_overridden": False,
            }
        ),
    )
