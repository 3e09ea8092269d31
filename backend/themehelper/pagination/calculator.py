"""
ThemeHelper — Page list calculator.

Maps (per_page, total, start, max_pages) to the current page and the list
of page buttons to show. Long ranges are truncated to exactly `max_pages`
entries, always keeping the first and last page:

  near start:  1 2 3 4 5 6 7 … 20
  middle:      1 … 8 9 10 11 12 … 20
  near end:    1 … 14 15 16 17 18 19 20
"""

from __future__ import annotations

from themehelper.errors import InvalidArgumentError
from themehelper.models.pagination import ELIDED, PaginationRequest, PaginationResult

MIN_MAX_PAGES = 5


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def _validate(per_page: int, total: int, start: int, max_pages: int) -> None:
    if per_page <= 0:
        raise InvalidArgumentError("per_page", per_page, "must be a positive integer")
    if total < 0:
        raise InvalidArgumentError("total", total, "must not be negative")
    if start < 0:
        raise InvalidArgumentError("start", start, "must not be negative")
    if max_pages < MIN_MAX_PAGES:
        raise InvalidArgumentError("max_pages", max_pages, f"must be at least {MIN_MAX_PAGES}")


def compute_pages(per_page: int, total: int, start: int, max_pages: int = 9) -> tuple[int, list[int]]:
    """
    Return (current_page, pages). ELIDED (-1) marks a skipped run.

    `start` is the 1-indexed position of the first item shown.
    """
    _validate(per_page, total, start, max_pages)

    total_pages = _ceil_div(total, per_page)
    if total_pages == 0:
        return 0, []

    current_page = _ceil_div(start, per_page)
    pages = list(range(1, total_pages + 1))

    if total_pages <= max_pages:
        return current_page, pages

    if current_page <= max_pages - 4:
        return current_page, pages[: max_pages - 2] + [ELIDED, total_pages]

    if current_page >= total_pages - 4:
        end = total_pages - max_pages + 2
        return current_page, [1, ELIDED] + pages[end:]

    width = max_pages - 4
    front = current_page - max_pages // 2 + 1
    # keep the window clear of the first and last page
    front = max(1, min(front, total_pages - 1 - width))
    return current_page, [1, ELIDED] + pages[front:front + width] + [ELIDED, total_pages]


def paginate(request: PaginationRequest) -> PaginationResult:
    """Typed entry point around compute_pages."""
    current_page, pages = compute_pages(
        request.per_page, request.total, request.start, request.max_pages,
    )
    return PaginationResult(
        current_page=current_page,
        last_page=_ceil_div(request.total, request.per_page),
        pages=pages,
    )
