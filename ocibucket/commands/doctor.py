"""Health checks for ocibucket configuration and the OCI CLI.

Called by ``ocibucket doctor``.  All checks log their results via loguru
and return ``True`` when everything is fine.
"""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

from loguru import logger

from ocibucket.config import BucketConfig, get_config_path, load_env_file
from ocibucket.exceptions import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


def run_doctor(config_path: Path | None = None) -> bool:
    """Run all doctor checks and log a final summary."""
    load_env_file()
    try:
        cfg = BucketConfig.load(config_path=config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        logger.warning("doctor: some checks failed (see messages above)")
        return False

    ok = True
    if not check_config(cfg, config_path):
        ok = False
    if not check_executable(cfg):
        ok = False

    if ok:
        logger.info("doctor: all checks passed")
    else:
        logger.warning("doctor: some checks failed (see messages above)")
    return ok


# ------------------------------------------------------------------
# 1. Config validation
# ------------------------------------------------------------------


def check_config(cfg: BucketConfig, config_path: Path | None = None) -> bool:
    """Validate that bucket name and namespace are configured."""
    logger.info("doctor: checking configuration …")

    path = get_config_path(config_path)
    if path.is_file():
        logger.info(f"Config file: {path}")
    else:
        logger.warning(
            f"Config file not found: {path}. "
            "Run 'ocibucket setup' or set env variables."
        )

    problems: list[str] = []
    if not cfg.bucket_name:
        problems.append("bucket name is not configured (set BUCKET_NAME)")
    if not cfg.namespace:
        problems.append("namespace is not configured (set NAMESPACE)")

    if problems:
        for p in problems:
            logger.error(f"config: {p}")
        return False

    logger.info(f"Config: OK (bucket={cfg.bucket_name}, namespace={cfg.namespace})")
    return True


# ------------------------------------------------------------------
# 2. OCI CLI executable
# ------------------------------------------------------------------


def check_executable(cfg: BucketConfig) -> bool:
    """Check that the configured OCI CLI executable can be found on PATH."""
    logger.info("doctor: checking OCI CLI executable …")

    resolved = shutil.which(cfg.executable)
    if resolved is None:
        logger.error(
            f"OCI CLI: {cfg.executable!r} not found on PATH. "
            "Install it or set OCIBUCKET_OCI_EXECUTABLE."
        )
        return False

    logger.info(f"OCI CLI: {resolved}")
    return True
