from __future__ import annotations

import os
import sys
from typing import TextIO


class Ansi:
    RESET: str = "\x1b[0m"
    BOLD: str = "\x1b[1m"
    CYAN: str = "\x1b[36m"
    YELLOW: str = "\x1b[33m"
    RED: str = "\x1b[31m"


def supports_color(override: bool | None = None, stream: TextIO | None = None) -> bool:
    if "NO_COLOR" in os.environ:
        return False
    if override is not None:
        return override
    target = stream or sys.stderr
    return bool(getattr(target, "isatty", lambda: False)())


class Console:
    """Human-facing status output.

    Defaults to stderr so that cluster data on stdout stays pipeable.
    """

    _KEY_WIDTH: int = 20

    def __init__(
        self,
        use_color: bool | None = None,
        stream: TextIO | None = None,
        quiet: bool = False,
    ) -> None:
        self.stream: TextIO = stream if stream is not None else sys.stderr
        self.use_color: bool = supports_color(use_color, self.stream)
        self.quiet: bool = quiet

    def _paint(self, text: str, code: str | None = None) -> str:
        if not self.use_color or not code:
            return text
        return f"{code}{text}{Ansi.RESET}"

    def _emit(self, text: str) -> None:
        print(text, file=self.stream)

    def section(self, title: str) -> None:
        if not self.quiet:
            self._emit(self._paint(title, Ansi.BOLD))

    def kv(self, key: str, value: object) -> None:
        if self.quiet:
            return
        label = self._paint(f"{key}:".ljust(self._KEY_WIDTH), Ansi.CYAN)
        self._emit(f"{label} {value}")

    def info(self, message: str) -> None:
        if not self.quiet:
            self._emit(f"{self._paint('[INFO]', Ansi.CYAN)} {message}")

    # Warnings and errors ignore quiet mode.
    def warn(self, message: str) -> None:
        self._emit(f"{self._paint('[WARN]', Ansi.YELLOW)} {message}")

    def error(self, message: str) -> None:
        self._emit(f"{self._paint('[ERROR]', Ansi.RED)} {message}")


__all__ = [
    "Ansi",
    "Console",
    "supports_color",
]
