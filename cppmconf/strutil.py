"""Small string helpers used when generating build files."""

from __future__ import annotations

from collections.abc import Iterable

_MASK64 = (1 << 64) - 1


def quot(text: str) -> str:
    """Wrap ``text`` in double quotes."""
    return f'"{text}"'


def str_cut(text: str, size: int) -> str:
    """Shorten ``text`` to ``size`` characters, marking the cut with ``$``."""
    if len(text) > size:
        return text[: size - 1] + "$"
    return text


def has_str(target: str, text: str) -> bool:
    """Tell whether ``text`` occurs in ``target``; an empty target holds nothing."""
    if target == "":
        return False
    return text in target


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``, dropping a trailing empty field.

    Empty input yields an empty list, and a delimiter at the very end
    does not produce an extra empty element.
    """
    parts = text.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def accumulate(items: Iterable[str], token: str = "") -> str:
    """Concatenate ``items``, putting ``token`` in front of every piece."""
    return "".join(token + piece for piece in items)


def _signed_char(byte: int) -> int:
    return byte - 256 if byte > 127 else byte


def hash_string(text: str) -> int:
    """Return the 64-bit string hash used for switch-like dispatch on names."""
    state = 0
    for byte in reversed(text.encode("utf-8")):
        char = _signed_char(byte)
        state = ((state << 7) + (~(state >> 3) & _MASK64) + ~char) & _MASK64
    return state