from __future__ import annotations

_UNITS = ("Bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def format_bytes(size: int, decimals: int = 2) -> str:
    """ Human readable byte size in base 1024, e.g. 1536 -> "1.5 KB". Trailing zeros are dropped. """
    if size <= 0:
        return "0 Bytes"
    decimals = max(0, decimals)
    i = 0
    while i < len(_UNITS) - 1 and size >= 1024 ** (i + 1):
        i += 1
    text = f"{size / 1024 ** i:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {_UNITS[i]}"
