"""Reusable logger configuration snapshots."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from taglog.core.state import FilterState, Solo, Unrestricted


class LogScheme(BaseModel):
    """A filter state plus optional overrides, loaded into a logger in one go.

    Tie schemes to build profiles (debug, release, a feature you're chasing)
    and load the matching one at startup. Loading replaces the logger's filter
    state completely. Override fields left as ``None`` keep the logger's
    current value, except ``visual_logging_enabled`` which is always applied.

    Build instances with the named constructors rather than directly.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    state: FilterState = Field(default_factory=Unrestricted, discriminator="mode")

    # Writable byte streams replacing stdout/stderr as default sinks
    log_sink: Any = None
    error_sink: Any = None

    history_length: int | None = Field(default=None, ge=0)
    # Keep this off for release builds
    visual_logging_enabled: bool = False

    email_address: str | None = None
    email_subject: str | None = None
    email_message_prefix: str | None = None

    @classmethod
    def disabled_tags_scheme(cls, disabled_tags: Iterable[str], **overrides: Any) -> LogScheme:
        """Scheme where everything logs except ``disabled_tags``."""
        return cls(state=Unrestricted(disabled=frozenset(disabled_tags)), **overrides)

    @classmethod
    def solo_tags_scheme(cls, solo_tags: Iterable[str], **overrides: Any) -> LogScheme:
        """Scheme where only ``solo_tags`` log."""
        return cls(state=Solo(allowed=frozenset(solo_tags)), **overrides)

    @classmethod
    def mute_scheme(cls, **overrides: Any) -> LogScheme:
        """Scheme where nothing logs."""
        return cls(state=Solo(), **overrides)
