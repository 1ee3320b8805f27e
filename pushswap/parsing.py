"""Command-line token parsing and validation for push_swap."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MAX = 2147483647
INT_MIN = -2147483648

COMPLEXITY_FLAGS = ("--adaptive", "--simple", "--medium", "--complex")
BENCH_FLAG = "--bench"
VALID_FLAGS = COMPLEXITY_FLAGS + (BENCH_FLAG,)

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class InputError(ValueError):
    """Raised when the command-line input is not acceptable."""


def _split_sign(token: str) -> tuple[int, str]:
    """Strip leading whitespace and an optional sign; return (sign, rest)."""
    rest = token.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    return sign, rest


def _leading_digits(text: str) -> str:
    end = 0
    for char in text:
        if char not in _DIGITS:
            break
        end += 1
    return text[:end]


def _wrap_int32(number: int) -> int:
    return (number + 2**31) % 2**32 - 2**31


def is_int_token(token: str) -> bool:
    """True if ``token`` is whitespace, an optional sign and digits, and nothing else."""
    _, rest = _split_sign(token)
    digits = _leading_digits(rest)
    return bool(digits) and len(digits) == len(rest)


def to_int(token: str) -> int:
    """Read the leading integer of ``token`` as a 32-bit int (0 if there is none)."""
    sign, rest = _split_sign(token)
    digits = _leading_digits(rest)
    if not digits:
        return 0
    return _wrap_int32(sign * int(digits))


def overflows(token: str) -> bool:
    """True if the leading integer of ``token`` does not fit in a 32-bit int."""
    sign, rest = _split_sign(token)
    digits = _leading_digits(rest)
    if not digits:
        return False
    number = sign * int(digits)
    return number > INT_MAX or number < INT_MIN


def is_valid_flag(token: str) -> bool:
    """True for the strategy flags and ``--bench``."""
    return token in VALID_FLAGS


def is_complexity_flag(token: str) -> bool:
    """True for ``--adaptive``, ``--simple``, ``--medium`` and ``--complex``."""
    return token in COMPLEXITY_FLAGS


def has_complexity_flag(tokens: Iterable[str]) -> bool:
    """True if any token is a strategy flag."""
    return any(is_complexity_flag(token) for token in tokens)


def has_bench_flag(tokens: Iterable[str]) -> bool:
    """True if any token is ``--bench``."""
    return any(token == BENCH_FLAG for token in tokens)


def verify_tokens(tokens: Sequence[str]) -> None:
    """Raise InputError unless ``tokens`` form acceptable input."""
    if any(overflows(token) for token in tokens):
        raise InputError("integer out of range")

    seen: set[int] = set()
    for token in tokens:
        if is_int_token(token):
            number = to_int(token)
            if number in seen:
                raise InputError(f"duplicate value {number}")
            seen.add(number)

    for token in tokens:
        if not is_int_token(token) and not is_valid_flag(token):
            raise InputError(f"unexpected argument {token!r}")

    if not any(is_int_token(token) for token in tokens) and has_complexity_flag(tokens):
        raise InputError("strategy flag given without any number")


def parse_arguments(args: Sequence[str]) -> tuple[list[str], list[int]]:
    """Split the arguments into tokens, verify them and read the numbers.

    Arguments are joined with spaces and split on spaces, so one argument may
    hold several numbers. Returns the tokens and the numbers in input order.
    """
    if not args:
        return [], []
    tokens = [token for token in " ".join(args).split(" ") if token]
    verify_tokens(tokens)
    values = [to_int(token) for token in tokens if is_int_token(token)]
    return tokens, values