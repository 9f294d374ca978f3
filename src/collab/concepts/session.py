"""Per-session accumulation of active concepts.

The host rebuilds the system prompt every turn, so everything loaded earlier in
the session must be injected again. Names are kept in first-seen order (first
loaded = earlier in context) and never evicted until the session resets.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from collab.concepts.store import DocumentStore

logger = logging.getLogger(__name__)

Origin = Literal["auto", "manual"]


class SessionContext:
    """Ordered, duplicate-free set of concept names active in a session."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store
        self._active: dict[str, Origin] = {}

    def __len__(self) -> int:
        return len(self._active)

    def __contains__(self, name: object) -> bool:
        return name in self._active

    @property
    def names(self) -> list[str]:
        return list(self._active)

    def origin(self, name: str) -> Origin | None:
        """How ``name`` first entered the session, or None if inactive."""
        return self._active.get(name)

    def merge_auto_loaded(self, names: Iterable[str]) -> list[str]:
        """Add names found by scanning. Returns the ones that were new."""
        return self._merge(names, "auto")

    def merge_manual(self, names: Iterable[str]) -> list[str]:
        """Add names selected by the user. Returns the ones that were new."""
        return self._merge(names, "manual")

    def _merge(self, names: Iterable[str], origin: Origin) -> list[str]:
        added = []
        for name in names:
            if name not in self._active:
                self._active[name] = origin
                added.append(name)
        if added:
            logger.debug("session: +%s (%s)", added, origin)
        return added

    def snapshot(self) -> list[tuple[str, str]]:
        """Current content of every active concept, read fresh from the store.

        Concepts whose file has gone away are skipped but stay active.
        """
        entries = []
        for name in self._active:
            content = self.store.load(name)
            if content:
                entries.append((name, content))
        return entries

    def reset(self) -> None:
        self._active.clear()
