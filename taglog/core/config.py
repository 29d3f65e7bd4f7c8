"""Logger configuration and variant presets."""

from __future__ import annotations

from pydantic import BaseModel, Field

from taglog.core.history import DEFAULT_HISTORY_LENGTH


class LoggerConfig(BaseModel):
    """Construction-time settings for a TagLogger."""

    name: str = "GGLog"
    default_log_tag: str = "GGLog"
    default_err_log_tag: str = "GGLogErr"
    history_length: int = Field(default=DEFAULT_HISTORY_LENGTH, ge=0)
    keep_history: bool = True

    email_address: str | None = None
    email_subject: str | None = None
    email_message_prefix: str | None = None

    @classmethod
    def gglog(cls, **overrides) -> LoggerConfig:
        """The UI variant: keeps recent lines for the overlay and export."""
        return cls(**overrides)

    @classmethod
    def dragonlog(cls, **overrides) -> LoggerConfig:
        """The plain variant: writes lines, keeps no history."""
        settings = {
            "name": "DragonLog",
            "default_log_tag": "DRLog",
            "default_err_log_tag": "DRLogErr",
            "keep_history": False,
        }
        settings.update(overrides)
        return cls(**settings)
