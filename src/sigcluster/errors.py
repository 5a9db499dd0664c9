from __future__ import annotations


class ClusterConfigError(ValueError):
    """Raised when clustering parameters cannot be used at all."""


class InputFormatError(ValueError):
    """Raised when the cluster input stream is malformed."""

    def __init__(self, line: int, message: str) -> None:
        super().__init__(f"line {line}: {message}")
        self.line = line
