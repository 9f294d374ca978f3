"""Reference marker scanning: [[cf:name]] → name."""

from __future__ import annotations

import re

DEFAULT_TAG = "cf"

NAME_PATTERN = r"[A-Za-z0-9_-]+"

_NAME_RE = re.compile(rf"^{NAME_PATTERN}$")


def is_valid_name(name: str) -> bool:
    """True if ``name`` is a well-formed concept name."""
    return bool(_NAME_RE.match(name))


class ReferenceScanner:
    """Extract unique concept names from ``[[<tag>:name]]`` markers.

    Malformed markers simply do not match and are skipped.
    """

    def __init__(self, tag: str = DEFAULT_TAG) -> None:
        self.tag = tag
        self._regex = re.compile(rf"\[\[{re.escape(tag)}:({NAME_PATTERN})\]\]")

    def marker(self, name: str) -> str:
        """Render the marker that references ``name``."""
        return f"[[{self.tag}:{name}]]"

    def scan(self, text: str) -> list[str]:
        """Return unique names in first-occurrence order."""
        if not text:
            return []
        return list(dict.fromkeys(m.group(1) for m in self._regex.finditer(text)))
