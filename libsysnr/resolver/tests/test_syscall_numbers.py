import pytest

from libsysnr.resolver import parse_syscall_number
from libsysnr.resolver.exceptions import MalformedSyscallNumberError


def test_parse_plain_number() -> None:
    assert parse_syscall_number("0", symbol="__NR_read", architecture="amd64") == 0
    assert parse_syscall_number("1000001", symbol="__NR_syz_open_dev", architecture="amd64") == 1000001


def test_parse_wrapped_sentinel() -> None:
    assert parse_syscall_number("18446744073709551615", symbol="__NR_x", architecture="amd64") == -1


@pytest.mark.parametrize(
    "value",
    ["abc", "", "-1", "+1", "1_000", " 1", "0x10", "18446744073709551616", "١٢"],
)
def test_parse_malformed(value: str) -> None:
    with pytest.raises(MalformedSyscallNumberError) as e:
        parse_syscall_number(value, symbol="__NR_read", architecture="arm64")
    assert e.value.value == value
    assert e.value.symbol == "__NR_read"
    assert e.value.architecture == "arm64"
