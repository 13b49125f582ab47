"""``ProcessRunner`` implementation backed by :func:`subprocess.run`."""

from __future__ import annotations

import shlex
import subprocess
from typing import TYPE_CHECKING

from loguru import logger

from ocibucket._client.dtos import ProcessOutput

if TYPE_CHECKING:
    from collections.abc import Sequence


class SubprocessRunner:
    """Run a process to completion, capturing stdout and stderr as bytes.

    With ``timeout=None`` (the default) the call blocks for the whole
    lifetime of the child process.
    """

    def __init__(self, timeout: float | None = None) -> None:
        """Store the optional timeout in seconds."""
        self._timeout = timeout

    def run(self, executable: str, args: Sequence[str]) -> ProcessOutput:
        """Spawn *executable* with *args* and wait for it to exit."""
        cmd = [executable, *args]
        logger.debug(f"Running: {shlex.join(cmd)}")
        completed = subprocess.run(  # noqa: S603
            cmd,
            capture_output=True,
            check=False,
            timeout=self._timeout,
        )
        logger.trace(f"{executable} exited with status {completed.returncode}")
        return ProcessOutput(
            returncode=completed.returncode,
            stdout=completed.stdout or b"",
            stderr=completed.stderr or b"",
        )
