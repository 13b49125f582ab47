"""CLI entry point for ocibucket."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ocibucket.commands.doctor import run_doctor
from ocibucket.commands.setup import run_setup
from ocibucket.commands.transfer import (
    run_delete,
    run_download,
    run_example,
    run_upload,
)
from ocibucket.config import get_config_path
from ocibucket.exceptions import InteractiveModeRequiredError


class CliApp:
    """Command-line interface for ocibucket."""

    def __init__(self) -> None:
        """Initialize parser and command definitions."""
        self._parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            description="Download, upload and delete OCI Object Storage objects "
            "through the OCI CLI.",
        )
        parser.add_argument(
            "--config",
            type=Path,
            default=None,
            help=(
                "Path to YAML config (default: ~/.config/ocibucket/config.yaml "
                "or OCIBUCKET_CONFIG)."
            ),
        )
        parser.add_argument(
            "--bucket",
            "-b",
            type=str,
            default=None,
            help="Bucket name (overrides BUCKET_NAME and the config file).",
        )
        parser.add_argument(
            "--namespace",
            "-n",
            type=str,
            default=None,
            help="Object Storage namespace (overrides NAMESPACE and the config file).",
        )
        subparsers = parser.add_subparsers(dest="command", required=True)

        self._add_download_parser(subparsers)
        self._add_upload_parser(subparsers)
        self._add_delete_parser(subparsers)
        subparsers.add_parser(
            "example",
            help="Delete 'hello.txt' from the configured bucket.",
        )
        subparsers.add_parser(
            "setup",
            help="Interactively configure bucket settings.",
        )
        subparsers.add_parser(
            "doctor",
            help="Check configuration and that the OCI CLI is installed.",
        )

        return parser

    def _add_download_parser(
        self,
        subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    ) -> None:
        """Add the ``download`` command parser."""
        parser = subparsers.add_parser(
            "download",
            help="Bulk-download every object in the bucket.",
        )
        parser.add_argument(
            "--dest",
            "-d",
            required=True,
            help="Local directory to download into.",
        )

    def _add_upload_parser(
        self,
        subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    ) -> None:
        """Add the ``upload`` command parser."""
        parser = subparsers.add_parser(
            "upload",
            help=(
                "Upload a file (stored under its base name) "
                "or a directory (bulk upload)."
            ),
        )
        parser.add_argument("path", help="Local file or directory.")

    def _add_delete_parser(
        self,
        subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    ) -> None:
        """Add the ``delete`` command parser."""
        parser = subparsers.add_parser(
            "delete",
            help="Delete one object without a confirmation prompt.",
        )
        parser.add_argument("object_name", help="Name of the object to delete.")

    def _run_command(self, args: argparse.Namespace) -> None:
        """Dispatch parsed args to the target command implementation."""
        if args.command == "download":
            run_download(args)
            return
        if args.command == "upload":
            run_upload(args)
            return
        if args.command == "delete":
            run_delete(args)
            return
        if args.command == "example":
            run_example(args)
            return
        if args.command == "setup":
            try:
                run_setup(get_config_path(args.config))
            except InteractiveModeRequiredError as e:
                sys.exit(str(e))
            return
        if args.command == "doctor":
            if not run_doctor(args.config):
                sys.exit(1)
            return
        sys.exit(f"Unknown command: {args.command}")

    def run(self, argv: list[str] | None = None) -> None:
        """Run the CLI with the given arguments."""
        args = self._parser.parse_args(argv)
        self._run_command(args)


def main(argv: list[str] | None = None) -> None:
    """Compatibility entry point for setuptools/CLI wrappers."""
    CliApp().run(argv)


if __name__ == "__main__":
    main()
