from .exceptions import MalformedSyscallNumberError

UINT64_MAX = (1 << 64) - 1
INT64_SIGN_BIT = 1 << 63


def parse_syscall_number(value: str, *, symbol: str, architecture: str) -> int:
    """Parse probe output value as unsigned 64-bit decimal integer, reinterpreted as signed.

    Probe prints `-1` (unresolved syscall) as `18446744073709551615`, so it is turned back into `-1`.
    """
    # `int()` accepts signs, underscores and whitespace, probe output never has them
    if not value.isascii() or not value.isdigit():
        raise MalformedSyscallNumberError(
            value=value,
            symbol=symbol,
            architecture=architecture,
        )

    nr = int(value, 10)
    if nr > UINT64_MAX:
        raise MalformedSyscallNumberError(
            value=value,
            symbol=symbol,
            architecture=architecture,
        )

    if nr & INT64_SIGN_BIT:
        return nr - (1 << 64)
    return nr
