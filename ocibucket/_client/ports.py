"""Protocol defining the external-process boundary.

``ProcessRunner`` is the single seam between ``ObjectStoreClient`` and the
operating system.  In production it is satisfied by ``SubprocessRunner``;
in tests a fake that records calls and returns canned output is used instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ocibucket._client.dtos import ProcessOutput


class ProcessRunner(Protocol):
    """Minimal interface for spawning a process and waiting for it."""

    def run(self, executable: str, args: Sequence[str]) -> ProcessOutput:
        """Run *executable* with *args* and return its exit status and streams.

        Raises ``OSError`` when the executable cannot be started and
        ``subprocess.TimeoutExpired`` when a timeout elapses.
        """
        ...
