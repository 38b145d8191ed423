"""Offset/limit override for short auto-generated resource lists."""

from __future__ import annotations

from dataclasses import dataclass


SHORT_LIST_THRESHOLD = 9
SHORT_LIST_PAGE_SIZE = 3


@dataclass(frozen=True, slots=True)
class ListWindow:
    offset: int
    limit: int


def limit_window(start_offset: int, end_offset: int) -> ListWindow | None:
    """Window for lists ending before the threshold; None keeps the default pager.

    ``start_offset`` is 1-based.
    """

    if end_offset >= SHORT_LIST_THRESHOLD:
        return None
    return ListWindow(offset=max(0, start_offset - 1), limit=SHORT_LIST_PAGE_SIZE)
