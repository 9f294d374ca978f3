"""Local terminal host for previewing concept injection."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TYPE_CHECKING

from collab.host.base import TurnEvent

if TYPE_CHECKING:
    from collab.core import Collab
    from collab.host.base import NotifyLevel

logger = logging.getLogger(__name__)

_COLORS = {
    "success": "\033[32m",
    "warning": "\033[33m",
    "error": "\033[31m",
    "info": "\033[36m",
    "muted": "\033[2m",
}
_RESET = "\033[0m"


class TerminalUI:
    """HostUI over stdin/stdout. Notifications and status go to stderr."""

    def __init__(self, color: bool | None = None) -> None:
        self.color = sys.stderr.isatty() if color is None else color
        self.statuses: dict[str, str] = {}

    def set_status(self, key: str, text: str | None) -> None:
        if text is None:
            self.statuses.pop(key, None)
        else:
            self.statuses[key] = text
            print(f"  [{text}]", file=sys.stderr)

    def style(self, color: str, text: str) -> str:
        if not self.color or color not in _COLORS:
            return text
        return f"{_COLORS[color]}{text}{_RESET}"

    def notify(self, message: str, level: NotifyLevel = "info") -> None:
        print(self.style(level, f"{level}: {message}"), file=sys.stderr)

    async def select(self, prompt: str, options: list[str]) -> str | None:
        loop = asyncio.get_event_loop()
        print(prompt)
        for i, option in enumerate(options, 1):
            print(f"  {i:>2}. {option}")
        raw = await loop.run_in_executor(None, self.read_line, "Choice (blank to cancel): ")
        if raw is None:
            return None
        raw = raw.strip()
        if not raw.isdigit() or not 1 <= int(raw) <= len(options):
            return None
        return options[int(raw) - 1]

    def read_line(self, prompt: str) -> str | None:
        try:
            sys.stdout.write(prompt)
            sys.stdout.flush()
            raw = sys.stdin.buffer.readline()
            if not raw:
                return None
            return raw.decode("utf-8", errors="replace").rstrip("\n")
        except EOFError:
            return None


class ReplHost:
    """Interactive REPL — each line is a turn; prints the augmented prompt.

    Commands: /concept (toggle), /concepts (list active), /new (new session).
    """

    def __init__(self, collab: Collab, ui: TerminalUI | None = None) -> None:
        self.collab = collab
        self.ui = ui or TerminalUI()
        self._running = False

    async def start(self) -> None:
        self._running = True
        loop = asyncio.get_event_loop()

        print("Collab concept preview (type 'exit' or Ctrl+C to quit)")
        print("-" * 48)
        await self.collab.on_session_start(self.ui)

        while self._running:
            try:
                line = await loop.run_in_executor(None, self.ui.read_line, "\nYou: ")
            except (EOFError, KeyboardInterrupt):
                print("\nBye!")
                break

            if line is None or line.strip().lower() in ("exit", "quit"):
                print("Bye!")
                break

            text = line.strip()
            if not text:
                continue
            await self.handle_line(text)

        await self.collab.on_session_end()

    async def handle_line(self, text: str) -> str | None:
        """Run one command or turn. Returns the augmented prompt for turns."""
        if text == "/concept":
            await self.collab.toggle_concept(self.ui)
            return None
        if text == "/concepts":
            self._print_active()
            return None
        if text == "/new":
            await self.collab.on_session_start(self.ui)
            print("New session.")
            return None

        event = TurnEvent(system_prompt=self.collab.config.system_prompt, prompt=text)
        augmented = await self.collab.before_agent_start(event, self.ui)
        print(f"\n{augmented}")
        return augmented

    def _print_active(self) -> None:
        session = self.collab.session
        if not len(session):
            print("(no concepts active)")
            return
        for name in session.names:
            print(f"  {name} ({session.origin(name)})")

    async def stop(self) -> None:
        self._running = False
