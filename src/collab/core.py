"""Collab orchestrator — wires concept resolution into the host's hooks.

Responsibilities:
1. Session start — reset the session's accumulated concepts
2. Turn start — resolve markers in preamble + system prompt + user prompt
3. Manual selection — /concept toggles, merged on the next turn
4. Injection — rebuild the system prompt with every concept active this session
5. Reporting — missing-concept warnings and the status line
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from collab.concepts.injector import build, render_preamble
from collab.concepts.resolver import Resolution, Resolver
from collab.concepts.scanner import ReferenceScanner
from collab.concepts.session import SessionContext
from collab.concepts.store import ConceptStore
from collab.concepts.toggle import ConceptToggle, ToggleResult
from collab.config import CollabConfig

if TYPE_CHECKING:
    from collab.concepts.store import DocumentStore
    from collab.host.base import HostUI, TurnEvent

logger = logging.getLogger(__name__)

STATUS_KEY = "concepts"


class Collab:
    """Core orchestrator — one instance per host process, one session at a time."""

    def __init__(self, config: CollabConfig, store: DocumentStore | None = None) -> None:
        self.config = config
        concepts = config.concepts
        self.store = store if store is not None else ConceptStore(concepts.directory, concepts.extension)
        self.scanner = ReferenceScanner(concepts.marker_tag)
        self.resolver = Resolver(self.store, self.scanner)
        self.session = SessionContext(self.store)
        self.toggle = ConceptToggle(self.store)
        self.preamble: str | None = None
        if concepts.inject_preamble:
            directory = concepts.directory.name or str(concepts.directory)
            self.preamble = render_preamble(concepts.marker_tag, directory)

    # ── Session lifecycle ────────────────────────────────────

    async def on_session_start(self, ui: HostUI) -> None:
        self.session.reset()
        logger.info("Session started, concept context cleared")
        self.update_status(ui)

    async def on_session_end(self) -> None:
        self.session.reset()

    # ── Turn hook (the core loop) ────────────────────────────

    async def before_agent_start(self, event: TurnEvent, ui: HostUI) -> str:
        """Return the system prompt augmented with this session's concepts."""
        resolution = self._resolve_turn(event)

        for name in sorted(resolution.missing):
            logger.warning("Missing concept: %s", name)
            ui.notify(f"Missing concept: {name}{self.config.concepts.extension}", "warning")

        snapshot = self.session.snapshot()
        logger.info(
            "Turn: %d concepts active (%d resolved, %d missing)",
            len(snapshot),
            len(resolution.loaded),
            len(resolution.missing),
        )
        return build(event.system_prompt, snapshot, self.preamble)

    def _resolve_turn(self, event: TurnEvent) -> Resolution:
        text = "\n".join(part for part in (self.preamble, event.system_prompt, event.prompt) if part)
        resolution = self.resolver.resolve(text)
        referenced = list(resolution.loaded)

        # Manual selections behave like markers in the prompt: their own
        # references are expanded too, in the same pass. A selection whose
        # file has gone away is skipped without a missing report.
        manual = self.toggle.selected
        present = [
            name
            for name in manual
            if name in resolution.loaded or self.store.load(name) is not None
        ]
        if present:
            markers = " ".join(self.scanner.marker(name) for name in present)
            self.resolver.resolve(markers, resolution.loaded, resolution.missing)

        self.session.merge_auto_loaded(referenced)
        self.session.merge_manual(manual)
        self.session.merge_auto_loaded(resolution.loaded)
        return resolution

    # ── Manual selection ─────────────────────────────────────

    async def toggle_concept(self, ui: HostUI) -> ToggleResult | None:
        """The /concept command: flip one concept's manual selection."""
        result = await self.toggle.choose(ui)
        if result is not None:
            self.update_status(ui)
        return result

    def update_status(self, ui: HostUI) -> None:
        selected = self.toggle.selected
        if not selected:
            ui.set_status(STATUS_KEY, None)
        else:
            names = ", ".join(sorted(selected))
            ui.set_status(STATUS_KEY, ui.style("success", f"concepts: {names}"))
