import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from libsysnr.exceptions import SysnrError
from sysnr.cli.output import cli_fatal_abort, cli_message


@contextmanager
def cli_sysnr_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Wrap function to properly emit generator internal errors."""
    try:
        yield
    except SysnrError as se:
        if debug_user_friendly_errors:
            return cli_fatal_abort(repr(se))
        raise  # re-throw exception due to unfriendly flag set for debugging
    except KeyboardInterrupt:
        print()
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        return sys.exit(0)
    # This is unreachable but error wrapper must fail
    cli_fatal_abort("Bug in a CLI: error handler must has no-return")
