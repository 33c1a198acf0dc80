"""Search, status filter and pagination over the loaded product list.

Everything here is pure: the page builds a ``ViewState`` from user input and
asks ``compute_page`` for the rows to render.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from config import PAGE_SIZE_OPTIONS
from src.models.product import Product, stock_status

# Status filter values -> dropdown labels
STATUS_FILTERS = {
    "all": "All Statuses",
    "low": "Low Stock",
    "out": "Out of Stock",
    "high": "In Stock",
}


def matches_search(product: Product, search_term: str) -> bool:
    """Case-insensitive substring match against name or description."""
    needle = search_term.lower()
    if not needle:
        return True
    return needle in product.name.lower() or needle in product.description.lower()


def matches_status(product: Product, filter_status: str) -> bool:
    if filter_status == "all":
        return True
    if filter_status not in STATUS_FILTERS:
        raise ValueError(f"Unknown status filter: {filter_status!r}")
    return stock_status(product.quantity).value == filter_status


def filter_products(products: list[Product], search_term: str, filter_status: str) -> list[Product]:
    return [
        p for p in products
        if matches_search(p, search_term) and matches_status(p, filter_status)
    ]


def total_pages(record_count: int, page_size: int) -> int:
    return max(1, math.ceil(record_count / page_size))


@dataclass(frozen=True)
class PageView:
    """One rendered page of the filtered product list."""

    items: list[Product]
    total_records: int
    total_pages: int
    current_page: int
    page_size: int

    @property
    def visible_ids(self) -> list:
        return [p.id for p in self.items]

    @property
    def first_index(self) -> int:
        """1-based index of the first visible row (0 when empty)."""
        return (self.current_page - 1) * self.page_size + 1 if self.items else 0

    @property
    def last_index(self) -> int:
        return self.first_index + len(self.items) - 1 if self.items else 0


def compute_page(
    products: list[Product],
    search_term: str,
    filter_status: str,
    page_size: int,
    current_page: int,
) -> PageView:
    """Filter, then slice out *current_page* (clamped into range)."""
    filtered = filter_products(products, search_term, filter_status)
    pages = total_pages(len(filtered), page_size)
    page = min(max(1, current_page), pages)
    start = (page - 1) * page_size
    return PageView(
        items=filtered[start:start + page_size],
        total_records=len(filtered),
        total_pages=pages,
        current_page=page,
        page_size=page_size,
    )


def stock_summary(products: list[Product]) -> dict[str, int]:
    """Counts per stock status over the unfiltered list."""
    summary = {"total": len(products), "high": 0, "low": 0, "out": 0}
    for p in products:
        summary[stock_status(p.quantity).value] += 1
    return summary


@dataclass
class ViewState:
    """User-controlled view inputs.

    Changing the search term, the status filter or the page size sends the
    user back to page 1 so they never land past the last page.
    """

    search_term: str = ""
    filter_status: str = "all"
    page_size: int = PAGE_SIZE_OPTIONS[0]
    current_page: int = 1

    def set_search(self, term: str | None) -> None:
        self.search_term = term or ""
        self.current_page = 1

    def set_filter(self, status: str) -> None:
        if status not in STATUS_FILTERS:
            raise ValueError(f"Unknown status filter: {status!r}")
        self.filter_status = status
        self.current_page = 1

    def set_page_size(self, size: int) -> None:
        if size not in PAGE_SIZE_OPTIONS:
            raise ValueError(f"Unsupported page size: {size}")
        self.page_size = size
        self.current_page = 1

    def go_to_page(self, page: int) -> None:
        self.current_page = max(1, page)

    def apply(self, products: list[Product]) -> PageView:
        view = compute_page(
            products, self.search_term, self.filter_status,
            self.page_size, self.current_page,
        )
        self.current_page = view.current_page
        return view
