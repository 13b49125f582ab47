"""Shared pytest fixtures for ocibucket tests."""

from __future__ import annotations

import pytest

from ocibucket.client import ObjectStoreClient
from ocibucket.config import BucketConfig
from tests.fixtures.fake_runner import FakeRunner

_OCIBUCKET_ENV_VARS = (
    "BUCKET_NAME",
    "NAMESPACE",
    "OCIBUCKET_CONFIG",
    "OCIBUCKET_OCI_EXECUTABLE",
    "OCIBUCKET_TIMEOUT",
    "OCIBUCKET_NO_INTERACTIVE",
)


@pytest.fixture(autouse=True)
def _isolated_env(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path_factory: pytest.TempPathFactory,
) -> None:
    """Clear ocibucket env vars and run from an empty directory (no .env)."""
    for var in _OCIBUCKET_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


@pytest.fixture
def bucket_cfg() -> BucketConfig:
    """Config pointing at a test bucket."""
    return BucketConfig(bucket_name="mybucket", namespace="myns")


def make_client(
    runner: FakeRunner,
    cfg: BucketConfig | None = None,
) -> ObjectStoreClient:
    """Create an ObjectStoreClient backed by *runner*."""
    return ObjectStoreClient(
        cfg or BucketConfig(bucket_name="mybucket", namespace="myns"),
        runner,
    )


def track_env(monkeypatch: pytest.MonkeyPatch, *names: str) -> None:
    """Make monkeypatch remove *names* at teardown even if set by dotenv."""
    for name in names:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
