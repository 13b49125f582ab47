"""ocibucket -- OCI Object Storage operations through the OCI CLI."""

from ocibucket._client.dtos import ProcessOutput
from ocibucket._client.ports import ProcessRunner
from ocibucket._client.subprocess_runner import SubprocessRunner
from ocibucket.client import (
    ObjectStoreClient,
    delete_object,
    retrieve_objects,
    upload_objects,
)
from ocibucket.config import BucketConfig
from ocibucket.exceptions import (
    ConfigError,
    InteractiveModeRequiredError,
    ObjectStoreError,
    OciBucketError,
)
from ocibucket.models import ErrorKind, Failure, Result, Success

__all__ = [
    "BucketConfig",
    "ConfigError",
    "ErrorKind",
    "Failure",
    "InteractiveModeRequiredError",
    "ObjectStoreClient",
    "ObjectStoreError",
    "OciBucketError",
    "ProcessOutput",
    "ProcessRunner",
    "Result",
    "Success",
    "SubprocessRunner",
    "delete_object",
    "retrieve_objects",
    "upload_objects",
]
