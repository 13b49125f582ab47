"""Shared helpers for CLI commands."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from loguru import logger

from ocibucket.config import BucketConfig, get_config_path, load_env_file
from ocibucket.exceptions import ConfigError

if TYPE_CHECKING:
    import argparse
    from pathlib import Path

    from ocibucket.models import Result


def load_config(
    config_path: Path | None = None,
    *,
    bucket_name: str | None = None,
    namespace: str | None = None,
) -> BucketConfig:
    """Load ``.env``, config file and env, then apply CLI overrides."""
    load_env_file()
    cfg = BucketConfig.load(config_path=config_path)
    override = BucketConfig(
        bucket_name=(bucket_name or "").strip(),
        namespace=(namespace or "").strip(),
        executable="",
    )
    return cfg.merge(override)


def load_config_from_args(args: argparse.Namespace) -> BucketConfig:
    """``load_config`` driven by the global ``--config/--bucket/--namespace``.

    Exits with a message when the config file holds invalid values.
    """
    try:
        return load_config(
            args.config,
            bucket_name=args.bucket,
            namespace=args.namespace,
        )
    except ConfigError as e:
        sys.exit(f"Error: {e}\nConfig file: {get_config_path(args.config)}")


def require_bucket(
    cfg: BucketConfig,
    config_path: Path | None = None,
) -> BucketConfig:
    """Abort with a friendly message when bucket name or namespace is missing."""
    try:
        return cfg.require()
    except ConfigError as e:
        sys.exit(
            f"Error: {e}\n"
            "Run setup to save the settings:\n  ocibucket setup\n"
            "Or set the environment variables BUCKET_NAME and NAMESPACE "
            "(a .env file in the current directory is read too).\n"
            f"Config file: {get_config_path(config_path)}"
        )


def exit_on_failure(result: Result) -> None:
    """Log a failed result and exit with status 1; do nothing on success."""
    if result.ok:
        return
    logger.error(str(result))
    sys.exit(1)
