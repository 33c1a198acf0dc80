"""Checkbox selection backing the bulk actions."""
from __future__ import annotations

from typing import Iterable

from src.models.product import ProductId


class SelectionTracker:
    """Set of checked product ids.

    The header checkbox only ever looks at the visible page: turning it on
    selects exactly the visible ids, turning it off clears everything,
    including ids checked on other pages.
    """

    def __init__(self):
        self._selected: set[ProductId] = set()

    @property
    def selected(self) -> set[ProductId]:
        return set(self._selected)

    @property
    def any_selected(self) -> bool:
        return bool(self._selected)

    def __len__(self) -> int:
        return len(self._selected)

    def __contains__(self, product_id) -> bool:
        return product_id in self._selected

    def ordered(self, ids_in_display_order: Iterable[ProductId]) -> list[ProductId]:
        """Selected ids in the given order, then any leftovers."""
        ordered = [pid for pid in ids_in_display_order if pid in self._selected]
        seen = set(ordered)
        ordered.extend(pid for pid in self._selected if pid not in seen)
        return ordered

    def all_selected(self, visible_ids: Iterable[ProductId]) -> bool:
        visible = list(visible_ids)
        return bool(visible) and all(pid in self._selected for pid in visible)

    def toggle_all(self, visible_ids: Iterable[ProductId], checked: bool) -> None:
        if checked:
            self._selected = set(visible_ids)
        else:
            self._selected.clear()

    def toggle(self, product_id: ProductId, checked: bool) -> None:
        if checked:
            self._selected.add(product_id)
        else:
            self._selected.discard(product_id)

    def discard(self, product_ids: Iterable[ProductId]) -> None:
        self._selected.difference_update(product_ids)

    def clear(self) -> None:
        self._selected.clear()

    def prune(self, existing_ids: Iterable[ProductId]) -> set[ProductId]:
        """Drop ids no longer present after a reload; return what was dropped.

        Ids that are merely filtered out or on another page still exist and
        stay selected.
        """
        gone = self._selected - set(existing_ids)
        self._selected -= gone
        return gone
