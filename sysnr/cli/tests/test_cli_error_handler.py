import pytest

from libsysnr.syscalls.exceptions import SyntheticCallRangeError
from sysnr.cli.errors import cli_sysnr_error_handler


def test_error_handler_emits_sysnr_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as e, cli_sysnr_error_handler():
        raise SyntheticCallRangeError(name="syz_open_dev", nr=5)
    assert e.value.code == 1
    err = capsys.readouterr().err
    assert "[ERROR]" in err
    assert "[synthetic-call-range-error]" in err


def test_error_handler_reraises_when_debugging() -> None:
    with pytest.raises(SyntheticCallRangeError), cli_sysnr_error_handler(debug_user_friendly_errors=False):
        raise SyntheticCallRangeError(name="syz_open_dev", nr=5)


def test_error_handler_interrupt_exits_cleanly(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as e, cli_sysnr_error_handler():
        raise KeyboardInterrupt
    assert e.value.code == 0
    assert "Interrupted by user" in capsys.readouterr().out


def test_error_handler_propagates_foreign_errors() -> None:
    with pytest.raises(ValueError, match="foreign"), cli_sysnr_error_handler():
        raise ValueError("foreign")
