"""Argument vectors for the ``oci os object`` subcommands.

Each builder returns the arguments that follow the executable name.
Values are passed through unchanged; the OCI CLI validates them.
"""

from __future__ import annotations


def _object_command(subcommand: str, bucket_name: str, namespace: str) -> list[str]:
    return [
        "os",
        "object",
        subcommand,
        "--bucket-name",
        bucket_name,
        "--namespace-name",
        namespace,
    ]


def bulk_download_args(
    bucket_name: str,
    namespace: str,
    download_dir: str,
) -> list[str]:
    """Download every object in the bucket into *download_dir*."""
    return [
        *_object_command("bulk-download", bucket_name, namespace),
        "--download-dir",
        download_dir,
    ]


def bulk_upload_args(bucket_name: str, namespace: str, src_dir: str) -> list[str]:
    """Upload a directory tree; object names follow relative paths."""
    return [
        *_object_command("bulk-upload", bucket_name, namespace),
        "--src-dir",
        src_dir,
    ]


def put_args(
    bucket_name: str,
    namespace: str,
    file_path: str,
    object_name: str,
) -> list[str]:
    """Upload a single file as *object_name*."""
    return [
        *_object_command("put", bucket_name, namespace),
        "--file",
        file_path,
        "--name",
        object_name,
    ]


def delete_args(bucket_name: str, namespace: str, object_name: str) -> list[str]:
    """Delete one object without the interactive confirmation prompt."""
    return [
        *_object_command("delete", bucket_name, namespace),
        "--name",
        object_name,
        "--force",
    ]
