"""Page slicing and page-button window for the download list."""
import math
from typing import Sequence, TypeVar

T = TypeVar("T")

ELLIPSIS = "..."
WINDOW = 2  # pages shown either side of the current one


def total_pages(total: int, per_page: int) -> int:
    return math.ceil(total / per_page) if total else 0


def clamp_page(page: int, pages: int) -> int:
    return min(max(1, page), max(1, pages))


def page_window(current: int, pages: int) -> list[int | str]:
    """First, last and current±2 as numbers; "..." where current±3 is hidden."""
    out: list[int | str] = []
    for p in range(1, pages + 1):
        if p == 1 or p == pages or current - WINDOW <= p <= current + WINDOW:
            out.append(p)
        elif p == current - WINDOW - 1 or p == current + WINDOW + 1:
            out.append(ELLIPSIS)
    return out


def paginate(items: Sequence[T], page: int, per_page: int) -> dict:
    pages = total_pages(len(items), per_page)
    page = clamp_page(page, pages)
    start = (page - 1) * per_page
    return {
        "items": list(items[start:start + per_page]),
        "total": len(items),
        "page": page,
        "per_page": per_page,
        "total_pages": pages,
        "start_index": start,
        "pages": page_window(page, pages),
    }
