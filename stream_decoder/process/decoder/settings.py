# Path: stream_decoder/process/decoder/settings.py
"""
Decoder Settings Schema

Type-safe, validated settings for the Decoder using Pydantic.

Design:
- Pydantic v2 for validation
- Immutable settings (frozen)
- Defaults match the engine contract (auto_restart on)
- camelCase aliases accepted for settings built from foreign configs
"""

from typing import Any, Mapping, Optional, Union

from pydantic import AliasChoices, BaseModel, Field


class DecoderSettings(BaseModel):
    """
    Settings controlling decoder lifecycle behaviour.

    Example:
        # Defaults
        settings = DecoderSettings()

        # Hold after the first program completes
        settings = DecoderSettings(auto_restart=False)

        # From a plain mapping
        settings = DecoderSettings.model_validate({'autoRestart': False})
    """

    auto_restart: bool = Field(
        default=True,
        validation_alias=AliasChoices('auto_restart', 'autoRestart'),
        description="Start a fresh program from the template when one completes"
    )

    buffer_warning_bytes: Optional[int] = Field(
        default=None,
        ge=1,
        validation_alias=AliasChoices('buffer_warning_bytes', 'bufferWarningBytes'),
        description="Log a warning when buffered bytes grow beyond this size"
    )

    model_config = {
        'frozen': True,
        'extra': 'forbid',
    }

    @classmethod
    def from_config(cls, config: Any) -> 'DecoderSettings':
        """
        Build settings from a ConfigLoader (or anything with get()).

        Args:
            config: Configuration source

        Returns:
            DecoderSettings instance
        """
        return cls(
            auto_restart=config.get('auto_restart', True),
            buffer_warning_bytes=config.get('buffer_warning_bytes'),
        )

    @classmethod
    def coerce(
        cls,
        settings: Union['DecoderSettings', Mapping[str, Any], None]
    ) -> 'DecoderSettings':
        """
        Accept settings as a model, a mapping, or None (defaults).

        Raises:
            TypeError: For any other type
            pydantic.ValidationError: For invalid values
        """
        if settings is None:
            return cls()
        if isinstance(settings, cls):
            return settings
        if isinstance(settings, Mapping):
            return cls.model_validate(dict(settings))
        raise TypeError(
            f"settings must be DecoderSettings or a mapping, got {type(settings).__name__}"
        )


__all__ = ['DecoderSettings']
