"""Transitive concept resolution.

Starting from the markers in a text, load each referenced concept and scan its
content for further markers until no new names turn up. Every name discovered
ends up in exactly one of ``loaded`` or ``missing``.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from collab.concepts.scanner import ReferenceScanner

if TYPE_CHECKING:
    from collab.concepts.store import DocumentStore

logger = logging.getLogger(__name__)


@dataclass
class Resolution:
    """Result of one resolution pass."""

    loaded: dict[str, str] = field(default_factory=dict)
    missing: set[str] = field(default_factory=set)

    def seen(self, name: str) -> bool:
        return name in self.loaded or name in self.missing


class Resolver:
    """Expand concept references over a document store."""

    def __init__(self, store: DocumentStore, scanner: ReferenceScanner | None = None) -> None:
        self.store = store
        self.scanner = scanner or ReferenceScanner()

    def resolve(
        self,
        text: str,
        loaded: dict[str, str] | None = None,
        missing: set[str] | None = None,
    ) -> Resolution:
        """Resolve all references reachable from ``text``.

        ``loaded`` and ``missing`` may be passed in to continue an earlier
        pass; they are updated in place and returned in the Resolution.
        Traversal is breadth-first, in scan order within each document.
        """
        result = Resolution(
            loaded=loaded if loaded is not None else {},
            missing=missing if missing is not None else set(),
        )
        pending: deque[str] = deque()
        queued: set[str] = set()

        def enqueue(source: str) -> None:
            for name in self.scanner.scan(source):
                if name in queued or result.seen(name):
                    continue
                queued.add(name)
                pending.append(name)

        enqueue(text)
        while pending:
            name = pending.popleft()
            if result.seen(name):
                continue

            content = self.store.load(name)
            if content is None:
                logger.debug("resolve: '%s' -> missing", name)
                result.missing.add(name)
                continue

            # Placed before its own markers are scanned, so self and mutual
            # references are already seen when they come back around.
            result.loaded[name] = content
            logger.debug("resolve: '%s' -> %d chars", name, len(content))
            enqueue(content)

        return result
