"""Human-readable byte formatting."""

from __future__ import annotations

import math
from typing import Union

BYTE_UNITS = ("Bytes", "KB", "MB", "GB", "TB", "PB")
_K = 1024


def format_bytes(num_bytes: Union[int, float], decimals: int = 2) -> str:
    """
    Format a byte count using the largest base-1024 unit that keeps the value >= 1.

    The mantissa is rounded to `decimals` places and trailing zeros are dropped,
    so 1024 renders as "1 KB" and 1536 as "1.5 KB". Values below 1 byte stay in
    Bytes; values beyond the PB range stay in PB.
    """
    if num_bytes == 0:
        return "0 Bytes"

    dm = max(decimals, 0)
    index = 0
    if num_bytes >= 1:
        index = min(int(math.floor(math.log(num_bytes, _K))), len(BYTE_UNITS) - 1)
        # guard against float error in log() right below a unit boundary
        if index + 1 < len(BYTE_UNITS) and num_bytes >= _K ** (index + 1):
            index += 1
        elif index > 0 and num_bytes < _K**index:
            index -= 1

    value = round(num_bytes / _K**index, dm)
    text = f"{value:.{dm}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {BYTE_UNITS[index]}"


def format_count(value: Union[int, float]) -> str:
    """Thousands-separated number with at most two decimals."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")


__all__ = ["BYTE_UNITS", "format_bytes", "format_count"]
