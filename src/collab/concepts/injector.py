"""System prompt augmentation with loaded concepts."""

from __future__ import annotations

from collections.abc import Sequence

from collab.concepts.scanner import DEFAULT_TAG

_PREAMBLE_TEMPLATE = """\
<collaboration-framework>
[[{tag}:<name>]] is a provenance marker: it points at a shared concept ({directory}/<name>.md).
Concept names carry meaning. Each file holds the specifics needed to stay aligned.
</collaboration-framework>

Your reading of intent is probably wrong. Words are lossy compression: infer what was meant, \
hold it loosely, and verify when the stakes are non-trivial."""

SECTION_HEADER = "# Loaded Concepts"
SEPARATOR = "\n\n---\n\n"


def render_preamble(tag: str = DEFAULT_TAG, directory: str = "concepts") -> str:
    # "<name>" is not a valid concept name, so the example marker never resolves.
    return _PREAMBLE_TEMPLATE.format(tag=tag, directory=directory)


PREAMBLE = render_preamble()


def render_block(name: str, content: str) -> str:
    return f"## {name}\n\n{content}"


def build(
    base_text: str,
    snapshot: Sequence[tuple[str, str]],
    preamble: str | None = PREAMBLE,
) -> str:
    """Append the preamble and one block per concept to ``base_text``."""
    injection = preamble or ""
    if snapshot:
        blocks = SEPARATOR.join(render_block(name, content) for name, content in snapshot)
        section = f"{SECTION_HEADER}\n\n{blocks}"
        injection = f"{injection}\n\n{section}" if injection else section
    if not injection:
        return base_text
    return f"{base_text}\n\n{injection}"
