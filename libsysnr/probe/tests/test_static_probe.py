import json
from pathlib import Path

import pytest

from libsysnr.probe import StaticProbeDriver
from libsysnr.probe.exceptions import ProbeTableFormatError, ProbeUnresolvedSymbolError


def test_static_probe_falls_back_to_defaults() -> None:
    driver = StaticProbeDriver({"x86": {"__NR_read": 0}})
    values = driver.fetch_values(
        "x86",
        ["__NR_read", "__NR_missing"],
        [],
        {"__NR_read": -1, "__NR_missing": -1},
    )
    assert values == ["0", "18446744073709551615"]
    assert driver.calls == [("x86", ("__NR_read", "__NR_missing"))]


def test_static_probe_unresolved_without_default() -> None:
    driver = StaticProbeDriver({})
    with pytest.raises(ProbeUnresolvedSymbolError):
        driver.fetch_values("x86", ["__NR_read"], [], {})


def test_static_probe_passes_raw_values() -> None:
    driver = StaticProbeDriver({"x86": {"__NR_read": "abc"}})
    assert driver.fetch_values("x86", ["__NR_read"], [], {}) == ["abc"]


def test_static_probe_from_json_file(tmp_path: Path) -> None:
    path = tmp_path / "table.json"
    path.write_text(json.dumps({"arm64": {"__NR_write": 64}}))
    driver = StaticProbeDriver.from_json_file(path)
    assert driver.fetch_values("arm64", ["__NR_write"], [], {}) == ["64"]


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[1, 2]",
        '{"x86": 5}',
        '{"x86": {"__NR_read": null}}',
        '{"x86": {"__NR_read": true}}',
    ],
)
def test_static_table_from_malformed_json_file(tmp_path: Path, content: str) -> None:
    path = tmp_path / "table.json"
    path.write_text(content)
    with pytest.raises(ProbeTableFormatError) as e:
        StaticProbeDriver.from_json_file(path)
    assert e.value.path == path
    assert str(path) in repr(e.value)


def test_static_table_from_undecodable_file(tmp_path: Path) -> None:
    path = tmp_path / "table.json"
    path.write_bytes(b'{"x86": {"\xff": 0}}')
    with pytest.raises(ProbeTableFormatError):
        StaticProbeDriver.from_json_file(path)
