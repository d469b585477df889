"""Tests for the command line interface."""

import json
import os

import pytest
from click.testing import CliRunner

from spreadfs.app.cli.main import cli
from spreadfs.core import SpreadFS

ABC_SHA1 = "a9993e364706816aba3e25717850c26c9cd0d89d"


@pytest.fixture(autouse=True)
def quiet(monkeypatch):
    monkeypatch.setenv("SFS_LOG_LEVEL", "WARNING")
    monkeypatch.delenv("SFS_DIR_MODE", raising=False)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def invoke(runner, root):
    def _invoke(*args: str, input: bytes | None = None):
        return runner.invoke(cli, ["--root", str(root), *args], input=input)

    return _invoke


def test_path(invoke, root):
    result = invoke("path", "abc")

    assert result.exit_code == 0
    assert result.output.strip() == os.path.join(str(root), "a9", "99", ABC_SHA1)


def test_put_get_round_trip(invoke):
    put = invoke("put", "cover:1", input=b"image bytes")
    assert put.exit_code == 0, put.output
    summary = json.loads(put.output)
    assert summary["size"] == len(b"image bytes")
    assert summary["key"] == "cover:1"

    get = invoke("get", "cover:1")
    assert get.exit_code == 0
    assert get.stdout_bytes == b"image bytes"


def test_put_from_file_get_to_file(invoke, tmp_path):
    src = tmp_path / "in.bin"
    src.write_bytes(b"\x00\x01" * 10_000)
    out = tmp_path / "out.bin"

    assert invoke("put", "k", str(src)).exit_code == 0
    assert invoke("get", "k", "-o", str(out)).exit_code == 0

    assert out.read_bytes() == src.read_bytes()


def test_get_missing(invoke):
    result = invoke("get", "missing")

    assert result.exit_code == 1
    assert "No cache entry for key: missing" in result.output


def test_stat(invoke):
    invoke("put", "k", input=b"12345")

    result = invoke("stat", "k")

    assert result.exit_code == 0
    assert json.loads(result.output)["size"] == 5


def test_stat_missing(invoke):
    assert invoke("stat", "missing").exit_code == 1


def test_reload(invoke, root):
    for key in ("aaaaa", "bbbbb", "ccccc"):
        invoke("put", key, input=key.encode())

    result = invoke("reload")

    assert result.exit_code == 0
    assert json.loads(result.output) == {"root": str(root), "entries": 3, "total_bytes": 15}


def test_purge(invoke, root):
    invoke("put", "k", input=b"x")

    result = invoke("purge", "--yes")

    assert result.exit_code == 0
    assert os.listdir(root) == []


def test_purge_aborts_without_confirmation(invoke, root):
    invoke("put", "k", input=b"x")

    result = invoke("purge", input=b"n\n")

    assert result.exit_code == 1
    assert os.listdir(root) != []


def test_mode_option(runner, tmp_path):
    root = tmp_path / "moded"
    result = runner.invoke(cli, ["--root", str(root), "--mode", "0700", "path", "abc"])

    assert result.exit_code == 0
    assert os.stat(root).st_mode & 0o777 == 0o700


def test_invalid_mode(runner, tmp_path):
    result = runner.invoke(cli, ["--root", str(tmp_path / "c"), "--mode", "nope", "path", "abc"])

    assert result.exit_code == 1
    assert "Invalid permission mode" in result.output


def test_root_from_environment(runner, tmp_path, monkeypatch):
    monkeypatch.setenv("SFS_CACHE_DIR", str(tmp_path / "env-root"))

    result = runner.invoke(cli, ["path", "abc"])

    assert result.exit_code == 0
    assert result.output.startswith(str(tmp_path / "env-root"))


def test_stat_os_error(invoke, monkeypatch):
    def denied(self, path):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(SpreadFS, "stat", denied)

    result = invoke("stat", "k")

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error: [Errno 13] Permission denied" in result.output
