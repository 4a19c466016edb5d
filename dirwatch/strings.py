"""Small string helpers used for path handling."""

from __future__ import annotations

__all__ = ["split", "starts_with_index"]


def split(text: str, separator: str, keep_empty: bool = False) -> list[str]:
    """Split *text* on a single-character *separator*.

    Empty pieces between separators are kept only when *keep_empty* is true;
    an empty trailing piece is never kept.
    """
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    *pieces, last = text.split(separator)
    result = [piece for piece in pieces if keep_empty or piece]
    if last:
        result.append(last)
    return result


def starts_with_index(start: str, text: str) -> int:
    """Return the index of the last character of *start* if *text* begins with it, else -1.

    An empty *start* never matches.
    """
    if start and text.startswith(start):
        return len(start) - 1
    return -1