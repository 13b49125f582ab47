"""Pydantic models for object-storage operation outcomes."""

from __future__ import annotations

from typing import Annotated, Literal, NoReturn

from pydantic import BaseModel, ConfigDict, Discriminator

from ocibucket.exceptions import ObjectStoreError

ErrorKind = Literal[
    "spawn_failure",
    "non_zero_exit",
    "precondition_failure",
    "timeout",
]
"""Why an operation failed.

``spawn_failure``: the executable could not be started.
``non_zero_exit``: the process ran and returned a non-zero status.
``precondition_failure``: the local path was rejected before spawning.
``timeout``: a configured timeout elapsed and the process was killed.
"""


class Success(BaseModel):
    """Operation finished with exit status zero."""

    model_config = ConfigDict(frozen=True)

    outcome: Literal["success"] = "success"
    message: str = ""

    @property
    def ok(self) -> bool:
        return True

    def raise_for_failure(self) -> Success:
        """Return self unchanged (mirrors ``Failure.raise_for_failure``)."""
        return self


class Failure(BaseModel):
    """Operation failed; *reason* is human-readable, *detail* is the raw text.

    *detail* holds the tool's standard error (or the OS error when spawning
    failed) exactly as received, so callers can inspect it without parsing
    *reason*.
    """

    model_config = ConfigDict(frozen=True)

    outcome: Literal["failure"] = "failure"
    kind: ErrorKind
    reason: str
    detail: str = ""

    @property
    def ok(self) -> bool:
        return False

    def raise_for_failure(self) -> NoReturn:
        """Raise ``ObjectStoreError`` carrying this failure's fields."""
        raise ObjectStoreError(self.kind, self.reason, self.detail)

    def __str__(self) -> str:
        return self.reason


Result = Annotated[Success | Failure, Discriminator("outcome")]
"""Discriminated union: ``Success`` (``outcome="success"``) or
``Failure`` (``outcome="failure"``)."""
