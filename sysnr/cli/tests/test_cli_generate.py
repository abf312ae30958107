import json
from pathlib import Path

import pytest

from sysnr.cli.main import cli_entry_point


@pytest.fixture
def probe_table(tmp_path: Path) -> Path:
    path = tmp_path / "table.json"
    path.write_text(json.dumps({"x86": {"__NR_read": 0}, "arm64": {"__NR_read": 63}}))
    return path


@pytest.fixture
def syscalls_file(tmp_path: Path) -> Path:
    path = tmp_path / "syscalls.txt"
    path.write_text("read\nsyz_open_pts\n")
    return path


def _run(argv: list[str]) -> int | str | None:
    with pytest.raises(SystemExit) as e:
        cli_entry_point(prog="sysnr", argv=argv)
    return e.value.code


def test_cli_generate_static(tmp_path: Path, probe_table: Path, syscalls_file: Path) -> None:
    output = tmp_path / "out"
    code = _run(
        [
            str(syscalls_file),
            "--probe", "static",
            "--probe-table", str(probe_table),
            "--arch", "arm64",
            "--arch", "amd64",
            "-o", str(output),
        ],
    )
    assert code == 0
    assert (output / "sys" / "sys_amd64.go").read_text().endswith("[]int{0, 1000002}\n")
    assert (output / "sys" / "sys_arm64.go").exists()
    assert not (output / "sys" / "sys_ppc64le.go").exists()
    assert "#define __NR_syz_open_pts\t1000002\n" in (output / "executor" / "syscalls.h").read_text()


def test_cli_check_stale(
    tmp_path: Path,
    probe_table: Path,
    syscalls_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    code = _run(
        [
            str(syscalls_file),
            "--probe", "static",
            "--probe-table", str(probe_table),
            "--check",
            "-o", str(tmp_path / "out"),
        ],
    )
    assert code == 1
    assert "stale-artifact-error" in capsys.readouterr().err


def test_cli_unknown_architecture(
    probe_table: Path,
    syscalls_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    code = _run(
        [str(syscalls_file), "--probe", "static", "--probe-table", str(probe_table), "-a", "mips"],
    )
    assert code == 1
    assert "Unknown architecture 'mips'" in capsys.readouterr().err


def test_cli_requires_kernel_source(
    syscalls_file: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("LINUX", raising=False)
    assert _run([str(syscalls_file)]) == 1


def test_cli_list_architectures(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["--list-archs"]) == 0
    out = capsys.readouterr().out
    assert "amd64:" in out
    assert "arch/powerpc" in out


def test_cli_malformed_recorded_table(
    tmp_path: Path,
    syscalls_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    table = tmp_path / "broken.json"
    table.write_text('{"x86": {"__NR_read": null}}')
    code = _run(
        [str(syscalls_file), "--probe", "static", "--probe-table", str(table), "-o", str(tmp_path / "out")],
    )
    assert code == 1
    assert "probe-table-format-error" in capsys.readouterr().err
