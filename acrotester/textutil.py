"""Small text, checksum and formatting helpers."""

from __future__ import annotations

from functools import reduce
from operator import xor

_STRING_PREFIX = "@String"
_SIZE_UNITS = ("KB", "MB", "GB", "TB")


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def _left(text: str, count: int) -> str:
    if count < 0 or count >= len(text):
        return text
    return text[:count]


def _right(text: str, count: int) -> str:
    if count < 0 or count >= len(text):
        return text
    return text[len(text) - count:] if count else ""


def xor_encrypt_decrypt(value: str, key: int | str) -> str:
    """XOR every character of ``value`` with ``key``; applying it twice restores the text.

    Keys outside 0..126 are replaced by 127. A leading ``@String(...)`` wrapper,
    as written by some settings stores, is removed first. Characters outside
    Latin-1 are treated as code 0.
    """
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError("key must be a single character")
        key = ord(key)
    if key < 0 or key >= 127:
        key = 127

    result = value
    if result.startswith(_STRING_PREFIX):
        start = len(_STRING_PREFIX) + 1
        result = result[start:start + max(len(result) - start - 1, 0)]

    return "".join(
        chr((ord(char) if ord(char) <= 0xFF else 0) ^ key) for char in result
    )


def or_code(data: bytes) -> int:
    """XOR of all bytes, as an unsigned byte."""
    return reduce(xor, data, 0) & 0xFF


def check_code(data: bytes) -> int:
    """Sum of all bytes modulo 256."""
    return sum(data) % 256


def cut_string(
    text: str, length: int, left: int, right: int, file: bool, mid: str = "..."
) -> str:
    """Shorten ``text`` to ``prefix + mid + suffix`` when it is longer than ``length``.

    With ``file`` set, the last extension is dropped first.
    """
    result = text
    if file and "." in result:
        result = result[: result.rindex(".")]
    if len(result) > length:
        result = f"{_left(result, left)}{mid}{_right(result, right)}"
    return result


def time_string(milliseconds: int) -> str:
    """Format a duration in milliseconds as ``MM:SS``."""
    seconds = _trunc_div(int(milliseconds), 1000)
    minutes = _trunc_div(seconds, 60)
    remainder = seconds - minutes * 60
    return f"{minutes:02d}:{remainder:02d}"


def elapsed_string(elapsed_ms: float) -> str:
    """Format elapsed milliseconds as seconds with three decimals."""
    return f"{elapsed_ms / 1000:.3f}"


def size_string(size: int) -> str:
    """Format a byte count using bytes, KB, MB, GB or TB with two decimals."""
    if size < 0:
        raise ValueError("size must not be negative")
    number = float(size)
    unit = "bytes"
    units = iter(_SIZE_UNITS)
    while number >= 1024.0:
        next_unit = next(units, None)
        if next_unit is None:
            break
        unit = next_unit
        number /= 1024.0
    return f"{number:.2f} {unit}"


def range_value(
    old_min: int, old_max: int, old_value: int, new_min: int, new_max: int
) -> int:
    """Map ``old_value`` from one integer range onto another, truncating."""
    if old_max == old_min:
        raise ZeroDivisionError("old range is empty")
    scaled = (old_value - old_min) * (new_max - new_min)
    return _trunc_div(scaled, old_max - old_min) + new_min