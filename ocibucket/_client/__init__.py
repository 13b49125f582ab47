"""Internal helpers for splitting `ocibucket.client` responsibilities."""

from ocibucket._client.commands import (
    bulk_download_args,
    bulk_upload_args,
    delete_args,
    put_args,
)
from ocibucket._client.dtos import ProcessOutput
from ocibucket._client.ports import ProcessRunner
from ocibucket._client.subprocess_runner import SubprocessRunner

__all__ = [
    "ProcessOutput",
    "ProcessRunner",
    "SubprocessRunner",
    "bulk_download_args",
    "bulk_upload_args",
    "delete_args",
    "put_args",
]
