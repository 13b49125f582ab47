"""Implementation of ``ocibucket download``, ``upload``, ``delete`` and ``example``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ocibucket.client import ObjectStoreClient
from ocibucket.commands._helpers import (
    exit_on_failure,
    load_config_from_args,
    require_bucket,
)

if TYPE_CHECKING:
    import argparse

EXAMPLE_OBJECT_NAME = "hello.txt"


def _make_client(args: argparse.Namespace) -> ObjectStoreClient:
    cfg = require_bucket(load_config_from_args(args), args.config)
    return ObjectStoreClient(cfg)


def run_download(args: argparse.Namespace) -> None:
    """Run the ``download`` command."""
    client = _make_client(args)
    exit_on_failure(client.retrieve(args.dest))


def run_upload(args: argparse.Namespace) -> None:
    """Run the ``upload`` command."""
    client = _make_client(args)
    exit_on_failure(client.upload(args.path))


def run_delete(args: argparse.Namespace) -> None:
    """Run the ``delete`` command."""
    client = _make_client(args)
    exit_on_failure(client.delete_object(args.object_name))


def run_example(args: argparse.Namespace) -> None:
    """Delete ``hello.txt`` from the configured bucket.

    A failed delete is logged and the command still exits normally.
    """
    client = _make_client(args)
    result = client.delete_object(EXAMPLE_OBJECT_NAME)
    if not result.ok:
        logger.error(f"Delete failed: {result}")
