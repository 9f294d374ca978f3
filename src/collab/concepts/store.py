"""Concept document store.

Markdown files are the source of truth: ``<root>/<name>.md``, one concept per
file, no subdirectories, no manifest. Every read goes to disk so edits made
mid-session show up on the next turn.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

import frontmatter

from collab.concepts.scanner import is_valid_name

logger = logging.getLogger(__name__)


@runtime_checkable
class DocumentStore(Protocol):
    """Read-only name → content lookup."""

    def load(self, name: str) -> str | None:
        """Return the document content, or None if it cannot be read."""
        ...

    def list_available(self) -> list[str]:
        """Return the names that can currently be loaded."""
        ...


class ConceptStore:
    """Directory-backed concept store."""

    def __init__(self, root: Path, extension: str = ".md") -> None:
        self.root = root
        self.extension = extension

    def path_for(self, name: str) -> Path:
        return self.root / f"{name}{self.extension}"

    def load(self, name: str) -> str | None:
        # Absent, unreadable and undecodable files all look the same to callers.
        if not is_valid_name(name):
            return None
        path = self.path_for(name)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read concept %s (%s): %s", name, path, e)
            return None

    def list_available(self) -> list[str]:
        try:
            names = [
                p.name[: -len(self.extension)]
                for p in self.root.iterdir()
                if p.name.endswith(self.extension) and p.is_file()
            ]
        except OSError as e:
            logger.debug("Cannot list concepts in %s: %s", self.root, e)
            return []
        return sorted(n for n in names if is_valid_name(n))

    def describe(self, name: str) -> str:
        """One-line summary: frontmatter ``summary`` if set, else first line."""
        content = self.load(name)
        if content is None:
            return ""
        meta = self._parse_frontmatter(content)
        summary = meta.get("summary")
        if summary:
            return str(summary).strip()
        return self._first_line(content)

    def _parse_frontmatter(self, content: str) -> dict:
        """Parse YAML frontmatter from concept text."""
        try:
            return dict(frontmatter.loads(content).metadata)
        except Exception:
            return {}

    def _first_line(self, content: str) -> str:
        """First non-empty body line, skipping any frontmatter block."""
        try:
            body = frontmatter.loads(content).content
        except Exception:
            body = content
        for line in body.splitlines():
            line = line.strip()
            if line:
                return line.lstrip("# ").strip()
        return ""


class InMemoryStore:
    """Dict-backed store, for bundled concepts and tests."""

    def __init__(self, documents: dict[str, str] | None = None) -> None:
        self.documents: dict[str, str] = dict(documents or {})

    def load(self, name: str) -> str | None:
        return self.documents.get(name)

    def list_available(self) -> list[str]:
        return sorted(self.documents)
