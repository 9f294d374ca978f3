"""Entry point: python -m collab [chat|list|resolve TEXT...]

- No args / "chat": Interactive REPL previewing the augmented system prompt
- "list":          Available concepts with one-line summaries
- "resolve":       One resolution pass over TEXT; prints loaded and missing
"""

from __future__ import annotations

import asyncio
import logging
import sys

from collab.config import CollabConfig, load_config


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _run_chat(config: CollabConfig) -> None:
    """Interactive REPL mode."""
    from collab.core import Collab
    from collab.host.cli import ReplHost

    host = ReplHost(Collab(config))
    try:
        asyncio.run(host.start())
    except KeyboardInterrupt:
        pass


def _run_list(config: CollabConfig) -> None:
    from collab.concepts.store import ConceptStore

    store = ConceptStore(config.concepts.directory, config.concepts.extension)
    names = store.list_available()
    if not names:
        print(f"No concepts found in {config.concepts.directory}")
        return
    width = max(len(n) for n in names)
    for name in names:
        print(f"{name.ljust(width)}  {store.describe(name)}")


def _run_resolve(config: CollabConfig, text: str) -> int:
    from collab.concepts.resolver import Resolver
    from collab.concepts.scanner import ReferenceScanner
    from collab.concepts.store import ConceptStore

    store = ConceptStore(config.concepts.directory, config.concepts.extension)
    resolution = Resolver(store, ReferenceScanner(config.concepts.marker_tag)).resolve(text)
    for name, content in resolution.loaded.items():
        print(f"loaded   {name} ({len(content)} chars)")
    for name in sorted(resolution.missing):
        print(f"missing  {name}")
    return 1 if resolution.missing else 0


def main() -> None:
    cmd = sys.argv[1] if len(sys.argv) > 1 else "chat"
    config = load_config()
    _setup_logging(config.log_level)

    if cmd in ("chat", "repl"):
        _run_chat(config)
    elif cmd == "list":
        _run_list(config)
    elif cmd == "resolve" and len(sys.argv) > 2:
        sys.exit(_run_resolve(config, " ".join(sys.argv[2:])))
    else:
        print("Usage: python -m collab [chat|list|resolve TEXT...]")
        print("  chat     — Interactive REPL previewing concept injection (default)")
        print("  list     — Available concepts")
        print("  resolve  — Resolve [[cf:name]] markers in TEXT")
        sys.exit(1)


if __name__ == "__main__":
    main()
