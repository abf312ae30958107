from pathlib import Path

import pytest

from libsysnr.codegen.exceptions import ArtifactReadError, ArtifactWriteError
from libsysnr.codegen.writer import is_artifact_stale, write_artifact


def test_write_artifact_creates_parents(tmp_path: Path) -> None:
    path = tmp_path / "sys" / "sys_amd64.go"
    write_artifact(path, "package sys\n")
    assert path.read_text() == "package sys\n"
    assert not is_artifact_stale(path, "package sys\n")
    assert is_artifact_stale(path, "package sys\n\n")


def test_missing_artifact_is_stale(tmp_path: Path) -> None:
    assert is_artifact_stale(tmp_path / "syscalls.h", "")


def test_write_artifact_over_directory(tmp_path: Path) -> None:
    path = tmp_path / "syscalls.h"
    path.mkdir()
    with pytest.raises(ArtifactWriteError):
        write_artifact(path, "")


def test_unreadable_artifact(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "syscalls.h"
    path.write_text("")

    def read_bytes(_: Path) -> bytes:
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(Path, "read_bytes", read_bytes)
    with pytest.raises(ArtifactReadError) as e:
        is_artifact_stale(path, "")
    assert e.value.path == path
    assert "Permission denied" in repr(e.value)
