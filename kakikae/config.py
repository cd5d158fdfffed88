"""
Pydantic configuration model for Kakikae.

A Configuration is resolved once per call and never mutated afterwards.
Custom syllable mappings are validated here, so a malformed mapping is
reported to the caller up front instead of surfacing mid-conversion.

Usage:
    from kakikae.config import resolve_config

    config = resolve_config(ime_mode="katakana", use_obsolete_kana=True)
    config = resolve_config(config, pass_romaji=True)
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from kakikae.settings import DEFAULT_ROMANIZATION


class ConfigurationError(ValueError):
    """Raised when options or custom mappings cannot be resolved."""


class ImeMode(str, Enum):
    """Incremental (typing) mode and the script it forces, if any."""
    OFF = 'off'
    ON = 'on'
    HIRAGANA = 'hiragana'
    KATAKANA = 'katakana'


# Aliases accepted for ime_mode besides the enum values
_IME_MODE_ALIASES = {
    'tohiragana': ImeMode.HIRAGANA,
    'tokatakana': ImeMode.KATAKANA,
    'true': ImeMode.ON,
    'false': ImeMode.OFF,
}

CustomMapping = Tuple[Tuple[str, str], ...]


class Configuration(BaseModel):
    """
    Options for a single conversion call.

    Immutable; derive a changed copy with resolve_config(config, **changes).
    """
    model_config = ConfigDict(frozen=True, extra='forbid')

    use_obsolete_kana: bool = Field(False, description="Use ゐ and ゑ for wi and we")
    pass_romaji: bool = Field(False, description="Leave romaji untouched in to_hiragana/to_katakana")
    upcase_katakana: bool = Field(False, description="Uppercase romaji produced from katakana")
    ignore_case: bool = Field(False, description="Do not use uppercase input to select katakana")
    ime_mode: ImeMode = Field(ImeMode.OFF, description="Incremental typing mode")
    romanization: str = Field(DEFAULT_ROMANIZATION, description="Kana -> romaji method")

    # Overrides applied last, so they win over built-in syllables
    custom_kana_mapping: CustomMapping = Field((), description="romaji -> kana overrides")
    custom_romaji_mapping: CustomMapping = Field((), description="kana -> romaji overrides")

    @field_validator('ime_mode', mode='before')
    @classmethod
    def _coerce_ime_mode(cls, value: Any) -> Any:
        if value is None or value is False:
            return ImeMode.OFF
        if value is True:
            return ImeMode.ON
        if isinstance(value, str) and not isinstance(value, ImeMode):
            lowered = value.lower()
            return _IME_MODE_ALIASES.get(lowered, lowered)
        return value

    @field_validator('custom_kana_mapping', 'custom_romaji_mapping', mode='before')
    @classmethod
    def _normalize_mapping(cls, value: Any) -> CustomMapping:
        if value is None:
            return ()
        if isinstance(value, Mapping):
            items = list(value.items())
        elif isinstance(value, (list, tuple)):
            items = []
            for item in value:
                if not isinstance(item, (list, tuple)) or len(item) != 2:
                    raise ValueError(f"expected (syllable, output) pairs, got {item!r}")
                items.append(tuple(item))
        else:
            raise ValueError(
                f"custom mapping must map syllables to outputs, got {type(value).__name__}"
            )

        for key, output in items:
            if not isinstance(key, str) or not key:
                raise ValueError(f"syllable must be a non-empty string, got {key!r}")
            if not isinstance(output, str):
                raise ValueError(f"output for {key!r} must be a string, got {output!r}")
        return tuple(items)

    @property
    def incremental(self) -> bool:
        """True when the caller is feeding text as it is typed."""
        return self.ime_mode is not ImeMode.OFF


def _describe(error: ValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = '.'.join(str(part) for part in detail.get('loc', ())) or 'configuration'
        parts.append(f"{location}: {detail.get('msg', 'invalid value')}")
    return '; '.join(parts)


def resolve_config(config: Optional[Any] = None, **options) -> Configuration:
    """
    Merge defaults, an existing configuration and keyword overrides.

    Args:
        config: None, a Configuration, or a mapping of option names to values.
        **options: Options that take precedence over config.

    Returns:
        A validated, immutable Configuration.

    Raises:
        ConfigurationError: If an option is unknown or a value (including a
            custom mapping) is malformed.
    """
    if isinstance(config, Configuration) and not options:
        return config

    if config is None:
        values = {}
    elif isinstance(config, Configuration):
        values = config.model_dump()
    elif isinstance(config, Mapping):
        values = dict(config)
    else:
        raise ConfigurationError(
            f"Expected a Configuration or a mapping of options, got {type(config).__name__}"
        )

    values.update(options)
    try:
        return Configuration(**values)
    except ValidationError as e:
        raise ConfigurationError(_describe(e)) from e
    except TypeError as e:
        # Non-string option names
        raise ConfigurationError(str(e)) from e
