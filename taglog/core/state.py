"""Tag filter state as a tagged union of filtering modes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Unrestricted(BaseModel):
    """Every tag logs unless it is explicitly disabled."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["unrestricted"] = "unrestricted"
    disabled: frozenset[str] = Field(default_factory=frozenset)

    def allows(self, tag: str) -> bool:
        return tag not in self.disabled


class Solo(BaseModel):
    """Only the allowed tags log. An empty allow-set mutes everything."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["solo"] = "solo"
    allowed: frozenset[str] = Field(default_factory=frozenset)

    def allows(self, tag: str) -> bool:
        return tag in self.allowed


FilterState = Unrestricted | Solo


class TagFilter:
    """Holds the current filter state and answers per-tag decisions."""

    def __init__(self, state: FilterState | None = None) -> None:
        self.state: FilterState = state if state is not None else Unrestricted()

    def is_enabled(self, tag: str) -> bool:
        return self.state.allows(tag)

    def set_tag(self, tag: str, enabled: bool) -> None:
        """Enable or disable a single tag.

        Any active solo set is discarded, so the logger falls back to
        unrestricted mode with only the tags disabled through this method.
        """
        disabled = self.state.disabled if isinstance(self.state, Unrestricted) else frozenset()
        if enabled:
            disabled = disabled - {tag}
        else:
            disabled = disabled | {tag}
        self.state = Unrestricted(disabled=disabled)

    def solo_tags(self, tags: Iterable[str]) -> None:
        """Allow only the given tags. Clears any disabled tags."""
        self.state = Solo(allowed=frozenset(tags))

    def mute(self) -> None:
        self.solo_tags(())

    def load_state(self, state: FilterState) -> None:
        """Replace the whole state. Nothing from the previous state survives."""
        self.state = state
