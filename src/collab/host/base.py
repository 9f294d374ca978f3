"""Host runtime protocol and shared types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol, runtime_checkable

NotifyLevel = Literal["info", "warning", "error"]


@dataclass
class TurnEvent:
    """What the host hands over at the start of each agent turn."""

    system_prompt: str
    prompt: str


@runtime_checkable
class HostUI(Protocol):
    """User-facing surface provided by the host."""

    def set_status(self, key: str, text: str | None) -> None:
        """Show ``text`` in the status area under ``key``; None clears it."""
        ...

    def style(self, color: str, text: str) -> str:
        """Return ``text`` styled with a theme color (e.g. "success")."""
        ...

    def notify(self, message: str, level: NotifyLevel = "info") -> None:
        """Show a transient notification."""
        ...

    async def select(self, prompt: str, options: list[str]) -> str | None:
        """Let the user pick one option. None means cancelled."""
        ...
