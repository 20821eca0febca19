"""
Console logging collaborator for search runs.

The executor and history never print directly. They receive an
InfoLogger and report each step through it, so tests can swap in a
recording double instead of capturing stdout.
"""

import logging
from typing import Optional, Protocol

from rich.console import Console
from rich.text import Text


# ============================================================================
# Text Helpers
# ============================================================================

def printable(text: str) -> str:
    """Escape characters that cannot be written as UTF-8 (lone surrogates)."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def pad(text: str, fill: str = " ", count: int = 1) -> str:
    """Surround text with `count` copies of `fill` on both sides."""
    return f"{fill * count}{text}{fill * count}"


def explain(context: str, why: object) -> str:
    """
    Join a short context line with the reason something failed.

    Args:
        context: What was being attempted
        why: The error or message explaining the failure

    Returns:
        "context: why", or just the context when there is no reason
    """
    reason = str(why).strip()
    if not reason:
        return context
    return f"{context}: {reason}"


# ============================================================================
# Logger Interface
# ============================================================================

class InfoLogger(Protocol):
    """Operations the search core needs from a logger."""

    def info(self, title: str, message: str) -> None: ...

    def success(self, title: str, message: str) -> None: ...

    def warn(self, title: str, message: str) -> None: ...

    def fail(self, title: str, message: str) -> None: ...


# Badge and message styles per level
_STYLES = {
    "info": ("bold white on blue", "italic white"),
    "success": ("bold white on green", "underline bright_green"),
    "warn": ("bold white on bright_yellow", "bold yellow"),
    "fail": ("bold white on red", "bold underline yellow"),
}

_LEVELS = {
    "info": logging.INFO,
    "success": logging.INFO,
    "warn": logging.WARNING,
    "fail": logging.ERROR,
}


class ConsoleLogger:
    """
    InfoLogger that renders coloured badges with rich.

    Every line is also forwarded to the stdlib "browsy" logger so that
    BROWSY_LOG_LEVEL controls what ends up in redirected logs.
    """

    def __init__(self, console: Optional[Console] = None, name: str = "browsy"):
        """
        Initialize console logger.

        Args:
            console: rich Console to write to (defaults to stdout)
            name: Name of the stdlib logger to mirror lines to
        """
        self.console = console or Console()
        self._log = logging.getLogger(name)

    def info(self, title: str, message: str) -> None:
        self._emit("info", title, message)

    def success(self, title: str, message: str) -> None:
        self._emit("success", title, message)

    def warn(self, title: str, message: str) -> None:
        self._emit("warn", title, message)

    def fail(self, title: str, message: str) -> None:
        self._emit("fail", title, message)

    def separator(self, width: int = 35) -> None:
        """Print a dashed rule of the given width."""
        self.console.print("-" * width, style="bright_black")

    def _emit(self, level: str, title: str, message: str) -> None:
        badge_style, message_style = _STYLES[level]
        message = printable(message)
        line = Text()
        line.append(pad(title), style=badge_style)
        line.append(" ")
        line.append(pad(message), style=message_style)
        self.console.print(line)
        self._log.log(_LEVELS[level], "%s: %s", title, message)
