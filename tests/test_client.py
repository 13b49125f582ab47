"""Tests for ObjectStoreClient: invocation shape and outcome mapping."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest
from loguru import logger

from ocibucket._client.dtos import ProcessOutput
from ocibucket.client import delete_object, retrieve_objects, upload_objects
from ocibucket.config import BucketConfig
from ocibucket.exceptions import ObjectStoreError
from ocibucket.models import Failure, Success
from tests.conftest import make_client
from tests.fixtures.fake_runner import FakeRunner, failed


# ---------------------------------------------------------------------------
# retrieve
# ---------------------------------------------------------------------------


class TestRetrieve:
    """Tests for ObjectStoreClient.retrieve()."""

    def test_success_on_exit_zero(self) -> None:
        runner = FakeRunner(ProcessOutput(returncode=0, stdout=b"done"))
        result = make_client(runner).retrieve("./work_dir")

        assert isinstance(result, Success)
        assert result.ok
        assert result.message == "Successfully downloaded objects to ./work_dir"
        assert runner.calls == [
            (
                "oci",
                [
                    "os",
                    "object",
                    "bulk-download",
                    "--bucket-name",
                    "mybucket",
                    "--namespace-name",
                    "myns",
                    "--download-dir",
                    "./work_dir",
                ],
            ),
        ]

    @pytest.mark.parametrize("returncode", [1, 2, 255])
    def test_failure_embeds_stderr_verbatim(self, returncode: int) -> None:
        stderr = "ServiceError:\n{\"code\": \"BucketNotFound\"}\n"
        runner = FakeRunner(failed(stderr, returncode))

        result = make_client(runner).retrieve("./work_dir")

        assert isinstance(result, Failure)
        assert result.kind == "non_zero_exit"
        assert result.detail == stderr
        assert result.reason == f"Error retrieving objects: {stderr}"

    def test_success_ignores_stderr_content(self) -> None:
        """Only the exit status decides the outcome."""
        runner = FakeRunner(ProcessOutput(returncode=0, stderr=b"WARNING: deprecated"))
        assert make_client(runner).retrieve("out").ok

    def test_failure_ignores_stdout_content(self) -> None:
        runner = FakeRunner(ProcessOutput(returncode=3, stdout=b"Success!"))
        result = make_client(runner).retrieve("out")
        assert isinstance(result, Failure)
        assert result.detail == ""

    def test_undecodable_stderr_is_replaced(self) -> None:
        runner = FakeRunner(ProcessOutput(returncode=1, stderr=b"bad \xff byte"))
        result = make_client(runner).retrieve("out")
        assert isinstance(result, Failure)
        assert result.detail == "bad \ufffd byte"

    def test_accepts_path_objects(self, tmp_path: Path) -> None:
        runner = FakeRunner()
        make_client(runner).retrieve(tmp_path)
        assert runner.last_args[-1] == str(tmp_path)


# ---------------------------------------------------------------------------
# spawn failures / timeouts
# ---------------------------------------------------------------------------


class TestInvocationErrors:
    """Errors raised by the runner itself become Failure values."""

    def test_missing_executable_is_spawn_failure(self) -> None:
        error = FileNotFoundError(2, "No such file or directory", "oci")
        runner = FakeRunner(error)

        result = make_client(runner).retrieve("out")

        assert isinstance(result, Failure)
        assert result.kind == "spawn_failure"
        assert result.reason == f"Failed to invoke OCI CLI: {error}"
        assert result.detail == str(error)

    def test_permission_denied_is_spawn_failure(self) -> None:
        runner = FakeRunner(PermissionError(13, "Permission denied"))
        result = make_client(runner).delete_object("hello.txt")
        assert isinstance(result, Failure)
        assert result.kind == "spawn_failure"
        assert "Permission denied" in result.reason

    def test_spawn_failure_is_not_retried(self) -> None:
        runner = FakeRunner(FileNotFoundError("oci"))
        make_client(runner).retrieve("out")
        assert len(runner.calls) == 1

    def test_timeout_is_failure(self) -> None:
        runner = FakeRunner(subprocess.TimeoutExpired(["oci"], 5))
        result = make_client(runner).retrieve("out")
        assert isinstance(result, Failure)
        assert result.kind == "timeout"
        assert result.reason == "Error retrieving objects: timed out after 5 seconds"

    def test_configured_executable_is_used(self) -> None:
        runner = FakeRunner()
        cfg = BucketConfig(
            bucket_name="mybucket",
            namespace="myns",
            executable="/opt/oci/bin/oci",
        )
        make_client(runner, cfg).delete_object("hello.txt")
        assert runner.calls[0][0] == "/opt/oci/bin/oci"


# ---------------------------------------------------------------------------
# upload
# ---------------------------------------------------------------------------


class TestUpload:
    """Tests for ObjectStoreClient.upload()."""

    def test_missing_path_fails_without_spawning(self) -> None:
        runner = FakeRunner()

        result = make_client(runner).upload("./missing_dir")

        assert isinstance(result, Failure)
        assert result.kind == "precondition_failure"
        assert result.reason == "path does not exist: ./missing_dir"
        assert str(result) == "path does not exist: ./missing_dir"
        assert runner.calls == []

    def test_empty_path_fails_without_spawning(self) -> None:
        """An empty string is not the working directory."""
        runner = FakeRunner()

        result = make_client(runner).upload("")

        assert isinstance(result, Failure)
        assert result.kind == "precondition_failure"
        assert result.reason == "path does not exist: "
        assert runner.calls == []

    def test_directory_uses_bulk_upload(self, tmp_path: Path) -> None:
        data_dir = tmp_path / "data"
        data_dir.mkdir()
        (data_dir / "a.txt").write_text("a", encoding="utf-8")
        runner = FakeRunner()

        result = make_client(runner).upload(str(data_dir))

        assert result.ok
        assert runner.last_args == [
            "os",
            "object",
            "bulk-upload",
            "--bucket-name",
            "mybucket",
            "--namespace-name",
            "myns",
            "--src-dir",
            str(data_dir),
        ]
        assert "--name" not in runner.last_args

    def test_file_uses_put_with_base_name(self, tmp_path: Path) -> None:
        file_path = tmp_path / "nested" / "report.csv"
        file_path.parent.mkdir()
        file_path.write_text("x", encoding="utf-8")
        runner = FakeRunner()

        result = make_client(runner).upload(str(file_path))

        assert isinstance(result, Success)
        assert result.message == (
            f"Successfully uploaded {file_path} to bucket mybucket"
        )
        assert runner.last_args == [
            "os",
            "object",
            "put",
            "--bucket-name",
            "mybucket",
            "--namespace-name",
            "myns",
            "--file",
            str(file_path),
            "--name",
            "report.csv",
        ]

    def test_relative_file_path(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "hello.txt").write_text("hi", encoding="utf-8")
        runner = FakeRunner()

        make_client(runner).upload("./hello.txt")

        assert runner.last_args[-4:] == [
            "--file",
            "./hello.txt",
            "--name",
            "hello.txt",
        ]

    def test_unnamed_file_path_fails_without_spawning(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """A path whose last component is '..' yields no object name."""
        monkeypatch.setattr(Path, "exists", lambda _self, **_kw: True)
        monkeypatch.setattr(Path, "is_dir", lambda _self, **_kw: False)
        runner = FakeRunner()

        result = make_client(runner).upload("some/dir/..")

        assert isinstance(result, Failure)
        assert result.kind == "precondition_failure"
        assert result.reason == "cannot determine object name for: some/dir/.."
        assert runner.calls == []

    def test_failure_uses_upload_prefix(self, tmp_path: Path) -> None:
        runner = FakeRunner(failed("quota exceeded"))
        result = make_client(runner).upload(tmp_path)
        assert isinstance(result, Failure)
        assert result.reason == "Error uploading objects: quota exceeded"


# ---------------------------------------------------------------------------
# delete
# ---------------------------------------------------------------------------


class TestDelete:
    """Tests for ObjectStoreClient.delete_object()."""

    def test_success_end_to_end(self) -> None:
        runner = FakeRunner(ProcessOutput(returncode=0))

        result = make_client(runner).delete_object("hello.txt")

        assert isinstance(result, Success)
        assert result.message == (
            "Successfully deleted object hello.txt from bucket mybucket"
        )
        assert runner.last_args == [
            "os",
            "object",
            "delete",
            "--bucket-name",
            "mybucket",
            "--namespace-name",
            "myns",
            "--name",
            "hello.txt",
            "--force",
        ]

    def test_always_forced(self) -> None:
        runner = FakeRunner(failed("boom"), ProcessOutput(returncode=0))
        client = make_client(runner)
        client.delete_object("a")
        client.delete_object("b")
        assert all("--force" in args for _exe, args in runner.calls)

    def test_second_delete_of_missing_object_is_failure(self) -> None:
        not_found = 'ServiceError: {"code": "ObjectNotFound", "status": 404}'
        runner = FakeRunner(ProcessOutput(returncode=0), failed(not_found))
        client = make_client(runner)

        first = client.delete_object("hello.txt")
        second = client.delete_object("hello.txt")

        assert first.ok
        assert isinstance(second, Failure)
        assert second.kind == "non_zero_exit"
        assert second.reason == f"Error deleting object: {not_found}"

    def test_success_is_logged(self) -> None:
        messages: list[str] = []
        handler_id = logger.add(lambda msg: messages.append(str(msg)), level="INFO")
        try:
            make_client(FakeRunner()).delete_object("hello.txt")
        finally:
            logger.remove(handler_id)
        assert any("Successfully deleted object hello.txt" in m for m in messages)


# ---------------------------------------------------------------------------
# raise_for_failure and module-level wrappers
# ---------------------------------------------------------------------------


def test_raise_for_failure() -> None:
    result = make_client(FakeRunner(failed("denied"))).delete_object("x")
    with pytest.raises(ObjectStoreError) as exc_info:
        result.raise_for_failure()
    assert exc_info.value.kind == "non_zero_exit"
    assert exc_info.value.detail == "denied"
    assert str(exc_info.value) == "Error deleting object: denied"


def test_raise_for_failure_on_success_returns_result() -> None:
    result = make_client(FakeRunner()).delete_object("x")
    assert result.raise_for_failure() is result


def test_module_level_wrappers(tmp_path: Path) -> None:
    runner = FakeRunner()

    assert retrieve_objects("bkt", "ns", "out", runner=runner).ok
    assert upload_objects("bkt", "ns", tmp_path, runner=runner).ok
    assert delete_object("bkt", "ns", "obj", runner=runner).ok

    subcommands = [args[2] for _exe, args in runner.calls]
    assert subcommands == ["bulk-download", "bulk-upload", "delete"]
    assert all(args[4] == "bkt" and args[6] == "ns" for _exe, args in runner.calls)


def test_module_level_upload_missing_path() -> None:
    runner = FakeRunner()
    result = upload_objects("bkt", "ns", "./missing_dir", runner=runner)
    assert str(result) == "path does not exist: ./missing_dir"
    assert runner.calls == []
