from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
DEFAULT_PAGE_SIZE_OPTIONS: tuple[int, ...] = (5, 10, 20, 50)


def total_pages(count: int, page_size: int) -> int:
    if count <= 0:
        return 0
    return math.ceil(count / max(1, page_size))


def clamp_page(page: int, pages: int) -> int:
    return min(max(1, page), max(1, pages))


def paginate(rows: Sequence[T], page: int, page_size: int) -> list[T]:
    size = max(1, page_size)
    start = (page - 1) * size
    if page < 1 or start >= len(rows):
        return []
    return list(rows[start : start + size])
