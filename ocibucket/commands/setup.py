"""Implementation of the ``ocibucket setup`` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ocibucket.config import BucketConfig, require_interactive

if TYPE_CHECKING:
    from pathlib import Path


def _ask(label: str, default: str) -> str:
    prompt = label
    if default:
        prompt += f" [{default}]"
    prompt += ": "
    return input(prompt).strip() or default


def run_setup(config_path: Path) -> None:
    """Interactively ask for bucket settings and save them to *config_path*."""
    require_interactive(
        "The 'setup' command is fully interactive. "
        "Configure via env vars (BUCKET_NAME, NAMESPACE) "
        "or edit the config file directly."
    )
    existing = BucketConfig.from_file(config_path)

    bucket_name = _ask("Bucket name", existing.bucket_name)
    namespace = _ask("Namespace", existing.namespace)
    executable = _ask("OCI CLI executable", existing.executable)

    if not bucket_name or not namespace:
        logger.warning("Bucket name or namespace is empty; it can be added later.")

    cfg = existing.model_copy(
        update={
            "bucket_name": bucket_name,
            "namespace": namespace,
            "executable": executable,
        },
    )
    saved_path = cfg.save_to_file(config_path)
    logger.info(f"Done! Configuration saved to {saved_path}")
