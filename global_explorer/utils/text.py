"""Text helpers: locale-aware ordering and substring highlighting."""

from __future__ import annotations

import html
import unicodedata
from typing import Iterable, TypeVar

T = TypeVar("T")


def collation_key(value: str) -> tuple[str, str]:
    """Approximate ``localeCompare`` ordering for country names.

    Accents are folded away so that "Åland Islands" sorts with the other
    A-names and "Curaçao" before "Cyprus"; the raw string breaks ties.
    """

    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), value


def sort_by_name(items: Iterable[T], *, key=lambda item: item.common_name) -> list[T]:
    return sorted(items, key=lambda item: collation_key(key(item)))


def find_match(text: str, query: str) -> tuple[int, int] | None:
    """Case-insensitive ``str.find`` returning ``(start, length)`` in ``text``.

    Positions refer to the original string even when case folding changes
    the length of a character ("İ", "ß").
    """

    target = query.casefold()
    if not target:
        return None
    for start in range(len(text)):
        folded = ""
        for end in range(start, len(text)):
            folded += text[end].casefold()
            if folded == target:
                return start, end + 1 - start
            if not target.startswith(folded):
                break
    return None


def highlight(text: str, start: int, length: int, *, tag: str = "strong") -> str:
    before = html.escape(text[:start])
    match = html.escape(text[start : start + length])
    after = html.escape(text[start + length :])
    return f"{before}<{tag}>{match}</{tag}>{after}"


__all__ = ["collation_key", "find_match", "highlight", "sort_by_name"]
