"""UI model presets.

The chat UI offers a flat list of labels ("GPT 5 Mini Thinking",
"Instant", ...). Each label stands for a requested family and a speed
preference; this module translates between the two.
"""

from dataclasses import dataclass

from .models import ModelFamily, SpeedPreference


@dataclass(frozen=True)
class ModelSettings:
    """Family and speed chosen through a UI preset."""
    family: ModelFamily
    speed: SpeedPreference


_SPEED_SUFFIXES = {
    "Auto": SpeedPreference.AUTO,
    "Instant": SpeedPreference.INSTANT,
    "Thinking": SpeedPreference.THINKING,
}

_FAMILY_PREFIXES = {
    "GPT 5 Nano": ModelFamily.GPT_5_NANO,
    "GPT 5 Mini": ModelFamily.GPT_5_MINI,
    "GPT 5.1": ModelFamily.GPT_5_1,
}


def _build_presets() -> dict[str, ModelSettings]:
    presets = {
        label: ModelSettings(ModelFamily.AUTO, speed)
        for label, speed in _SPEED_SUFFIXES.items()
    }
    for prefix, family in _FAMILY_PREFIXES.items():
        for suffix, speed in _SPEED_SUFFIXES.items():
            presets[f"{prefix} {suffix}"] = ModelSettings(family, speed)
    # Pro has a single preset; its effort is fixed anyway
    presets["GPT 5 Pro"] = ModelSettings(ModelFamily.GPT_5_PRO, SpeedPreference.AUTO)
    return presets


PRESETS: dict[str, ModelSettings] = _build_presets()

DEFAULT_SETTINGS = ModelSettings(ModelFamily.AUTO, SpeedPreference.AUTO)


def settings_from_display_name(display_name: str) -> ModelSettings:
    """Look up a preset label; unknown labels mean auto/auto."""
    return PRESETS.get(display_name, DEFAULT_SETTINGS)


def is_known_preset(display_name: str) -> bool:
    return display_name in PRESETS
