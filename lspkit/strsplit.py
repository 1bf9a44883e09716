"""Splitting strings into pieces and joining them back together."""

from __future__ import annotations

from collections.abc import Iterable

_SPLIT_WHITESPACE = " \n\t\r"


def _check_limit(limit: int | None) -> None:
    if limit is not None and limit < 1:
        raise ValueError(f"limit must be at least 1: {limit}")


def split_whitespace(text: str, limit: int | None = None) -> list[str]:
    """Split ``text`` at whitespace.

    A run of whitespace ends a piece only at its last character, so the earlier
    characters of a run stay at the end of the piece before it. Once the number
    of pieces reaches ``limit - 1`` the rest of the text becomes the last piece.
    """
    _check_limit(limit)
    pieces: list[str] = []
    last = 0
    for index, ch in enumerate(text):
        if ch not in _SPLIT_WHITESPACE:
            continue
        if index + 1 < len(text) and text[index + 1] in _SPLIT_WHITESPACE:
            continue
        pieces.append(text[last:index])
        last = index + 1
        if limit is not None and len(pieces) >= limit - 1:
            pieces.append(text[last:])
            return pieces
    if last != len(text):
        pieces.append(text[last:])
    return pieces


def split(text: str, separator: str, limit: int | None = None) -> list[str]:
    """Split ``text`` on ``separator``, which is removed from the pieces.

    A trailing separator yields no empty final piece. Once the number of pieces
    reaches ``limit - 1`` the rest of the text becomes the last piece.
    """
    if not separator:
        raise ValueError("separator must not be empty")
    _check_limit(limit)
    pieces: list[str] = []
    last = 0
    pos = text.find(separator)
    while pos >= 0:
        pieces.append(text[last:pos])
        last = pos + len(separator)
        if limit is not None and len(pieces) >= limit - 1:
            pieces.append(text[last:])
            return pieces
        pos = text.find(separator, last)
    if last != len(text):
        pieces.append(text[last:])
    return pieces


def chunk_split(text: str, chunklen: int) -> list[str]:
    """Cut ``text`` into pieces of ``chunklen`` characters; the last may be shorter."""
    if chunklen <= 0:
        raise ValueError(f"chunk length must be positive: {chunklen}")
    return [text[start:start + chunklen] for start in range(0, len(text), chunklen)]


def join(glue: str, items: Iterable[str]) -> str:
    """Join ``items`` with ``glue`` between them.

    Joining nothing with a non-empty glue is an error.
    """
    pieces = list(items)
    if not pieces and glue:
        raise ValueError("cannot join an empty sequence with a non-empty glue")
    return glue.join(pieces)