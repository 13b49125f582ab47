"""OCI Object Storage client logic: build the CLI call, run it, map the outcome."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from ocibucket._client.commands import (
    bulk_download_args,
    bulk_upload_args,
    delete_args,
    put_args,
)
from ocibucket._client.subprocess_runner import SubprocessRunner
from ocibucket.config import BucketConfig
from ocibucket.models import Failure, Success

if TYPE_CHECKING:
    from ocibucket._client.ports import ProcessRunner
    from ocibucket.models import Result

_SPAWN_FAILED_PREFIX = "Failed to invoke OCI CLI: "
_RETRIEVE_FAILED_PREFIX = "Error retrieving objects: "
_UPLOAD_FAILED_PREFIX = "Error uploading objects: "
_DELETE_FAILED_PREFIX = "Error deleting object: "

_UNNAMED_PARTS = frozenset({"", ".", ".."})


class ObjectStoreClient:
    """Download, upload and delete objects in one bucket via the OCI CLI.

    Every call spawns at most one ``oci`` process and blocks until it
    exits::

        client = ObjectStoreClient(BucketConfig.load().require())
        result = client.upload("./data")
        if not result.ok:
            logger.error(result.reason)

    Exit status zero is ``Success``; anything else, including a failure to
    start the executable, is ``Failure``.  Nothing is raised for those
    cases and nothing is retried.
    """

    def __init__(
        self,
        cfg: BucketConfig,
        runner: ProcessRunner | None = None,
    ) -> None:
        """Bind to *cfg*; *runner* defaults to a ``SubprocessRunner``.

        The runner's timeout is taken from ``cfg.timeout``.
        """
        self._cfg = cfg
        self._runner: ProcessRunner = runner or SubprocessRunner(timeout=cfg.timeout)

    @property
    def config(self) -> BucketConfig:
        return self._cfg

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def retrieve(self, destination_dir: str | os.PathLike[str]) -> Result:
        """Bulk-download the whole bucket into *destination_dir*.

        The directory is not checked here; the OCI CLI creates it if needed.
        """
        local_dir = os.fspath(destination_dir)
        args = bulk_download_args(self._cfg.bucket_name, self._cfg.namespace, local_dir)
        failure = self._invoke(args, _RETRIEVE_FAILED_PREFIX)
        if failure is not None:
            return failure
        message = f"Successfully downloaded objects to {local_dir}"
        logger.info(message)
        return Success(message=message)

    def upload(self, local_path: str | os.PathLike[str]) -> Result:
        """Upload a file (as one object) or a directory (bulk) to the bucket.

        A single file is stored under its base name.  A directory is handed
        to ``bulk-upload`` as-is, which names objects by relative path.
        """
        path_str = os.fspath(local_path)
        path = Path(path_str)
        # Path("") normalises to the working directory
        if not path_str or not path.exists():
            return Failure(
                kind="precondition_failure",
                reason=f"path does not exist: {path_str}",
                detail=path_str,
            )

        if path.is_dir():
            args = bulk_upload_args(
                self._cfg.bucket_name,
                self._cfg.namespace,
                path_str,
            )
        else:
            object_name = path.name
            if object_name in _UNNAMED_PARTS:
                return Failure(
                    kind="precondition_failure",
                    reason=f"cannot determine object name for: {path_str}",
                    detail=path_str,
                )
            args = put_args(
                self._cfg.bucket_name,
                self._cfg.namespace,
                path_str,
                object_name,
            )

        failure = self._invoke(args, _UPLOAD_FAILED_PREFIX)
        if failure is not None:
            return failure
        message = f"Successfully uploaded {path_str} to bucket {self._cfg.bucket_name}"
        logger.info(message)
        return Success(message=message)

    def delete_object(self, object_name: str) -> Result:
        """Delete *object_name* without a confirmation prompt.

        An object that no longer exists is reported by the CLI as an error
        and therefore yields ``Failure``, same as any other error.
        """
        args = delete_args(self._cfg.bucket_name, self._cfg.namespace, object_name)
        failure = self._invoke(args, _DELETE_FAILED_PREFIX)
        if failure is not None:
            return failure
        message = (
            f"Successfully deleted object {object_name} "
            f"from bucket {self._cfg.bucket_name}"
        )
        logger.info(message)
        return Success(message=message)

    # ------------------------------------------------------------------
    # Process invocation
    # ------------------------------------------------------------------

    def _invoke(self, args: list[str], error_prefix: str) -> Failure | None:
        """Run the executable with *args*; return ``None`` on exit status zero."""
        executable = self._cfg.executable
        try:
            output = self._runner.run(executable, args)
        except subprocess.TimeoutExpired as e:
            return Failure(
                kind="timeout",
                reason=f"{error_prefix}timed out after {e.timeout} seconds",
                detail=str(e),
            )
        except OSError as e:
            return Failure(
                kind="spawn_failure",
                reason=f"{_SPAWN_FAILED_PREFIX}{e}",
                detail=str(e),
            )

        if output.succeeded:
            return None

        stderr = output.stderr_text()
        logger.debug(f"{executable} exited with status {output.returncode}")
        return Failure(
            kind="non_zero_exit",
            reason=f"{error_prefix}{stderr}",
            detail=stderr,
        )


# ---------------------------------------------------------------------------
# Per-call convenience wrappers
# ---------------------------------------------------------------------------


def _client_for(
    bucket_name: str,
    namespace: str,
    runner: ProcessRunner | None,
) -> ObjectStoreClient:
    return ObjectStoreClient(
        BucketConfig(bucket_name=bucket_name, namespace=namespace),
        runner,
    )


def retrieve_objects(
    bucket_name: str,
    namespace: str,
    local_dir: str | os.PathLike[str],
    *,
    runner: ProcessRunner | None = None,
) -> Result:
    """Bulk-download *bucket_name* into *local_dir*.

    Thin wrapper around ``ObjectStoreClient.retrieve`` for one-off calls.
    """
    return _client_for(bucket_name, namespace, runner).retrieve(local_dir)


def upload_objects(
    bucket_name: str,
    namespace: str,
    local_path: str | os.PathLike[str],
    *,
    runner: ProcessRunner | None = None,
) -> Result:
    """Upload a file or directory; see ``ObjectStoreClient.upload``."""
    return _client_for(bucket_name, namespace, runner).upload(local_path)


def delete_object(
    bucket_name: str,
    namespace: str,
    object_name: str,
    *,
    runner: ProcessRunner | None = None,
) -> Result:
    """Force-delete one object; see ``ObjectStoreClient.delete_object``."""
    return _client_for(bucket_name, namespace, runner).delete_object(object_name)
