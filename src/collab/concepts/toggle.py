"""Manual concept selection, independent of marker scanning."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collab.concepts.store import DocumentStore
    from collab.host.base import HostUI

logger = logging.getLogger(__name__)

ACTIVE_MARK = "● "
INACTIVE_MARK = "○ "


@dataclass
class ToggleResult:
    """Outcome of one toggle: which concept and whether it is now active."""

    name: str
    active: bool


class ConceptToggle:
    """The Manually Toggled Set plus the selection flow around it.

    Deactivating only changes what is selected from now on; content already
    accumulated in the session stays in context.
    """

    def __init__(self, store: DocumentStore) -> None:
        self.store = store
        self._selected: dict[str, None] = {}

    @property
    def selected(self) -> list[str]:
        return list(self._selected)

    def is_active(self, name: str) -> bool:
        return name in self._selected

    def options(self, available: list[str] | None = None) -> list[str]:
        """Available names prefixed with an active/inactive indicator."""
        names = self.store.list_available() if available is None else available
        return [f"{ACTIVE_MARK if n in self._selected else INACTIVE_MARK}{n}" for n in names]

    def toggle(self, name: str) -> ToggleResult:
        if name in self._selected:
            del self._selected[name]
            active = False
        else:
            self._selected[name] = None
            active = True
        logger.info("Concept %s %s", name, "activated" if active else "deactivated")
        return ToggleResult(name=name, active=active)

    async def choose(self, ui: HostUI) -> ToggleResult | None:
        """Ask the user which concept to flip. None if nothing changed."""
        available = self.store.list_available()
        if not available:
            ui.notify("No concepts available", "info")
            return None

        selected = await ui.select("Toggle concept:", self.options(available))
        if not selected:
            return None

        name = selected
        for mark in (ACTIVE_MARK, INACTIVE_MARK):
            if name.startswith(mark):
                name = name[len(mark):]
                break

        result = self.toggle(name)
        ui.notify(f"{'Activated' if result.active else 'Deactivated'}: {name}", "info")
        return result
