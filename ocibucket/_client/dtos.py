"""Typed data-transfer objects exchanged with a ``ProcessRunner``."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProcessOutput:
    """Exit status and captured streams of a finished process."""

    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    def stderr_text(self) -> str:
        """Decode standard error as UTF-8, replacing undecodable bytes."""
        return self.stderr.decode("utf-8", errors="replace")
