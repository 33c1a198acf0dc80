"""State and handlers behind the inventory screen.

``InventoryController`` owns everything the page shows (product list, view
inputs, selection, activity log, error banner, the add/edit dialog) and the
async handlers that talk to the API. The page only renders this state and
forwards user input, so the logic here runs without a browser.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from src.models.activity import ActivityAction, ActivityLog
from src.models.product import Product, ProductDraft, ProductId
from src.services.api_client import (
    DeleteError,
    InventoryAPIClient,
    LoadError,
    SaveError,
)
from src.services.bulk import BulkResult, run_bulk
from src.services.csv_importer import ImportFileError, ImportResult, import_rows, parse_import_file
from src.services.selection import SelectionTracker
from src.services.view_state import PageView, ViewState, stock_summary

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Unable to load products. Please check your API/server."
SAVE_ERROR_MESSAGE = "Failed to save product. Please check your input or try again."
DELETE_ERROR_MESSAGE = "Failed to delete product. Try again!"

Notifier = Callable[[str, str], None]


class InventoryController:
    """Session-scoped state for one open inventory page."""

    def __init__(
        self,
        client: Optional[InventoryAPIClient] = None,
        activity: Optional[ActivityLog] = None,
        notify: Optional[Notifier] = None,
    ):
        self.client = client or InventoryAPIClient()
        self.activity = activity or ActivityLog()
        self.view = ViewState()
        self.selection = SelectionTracker()
        self.products: list[Product] = []
        self.loading = False
        self.error: str | None = None

        # Add/edit dialog
        self.dialog_open = False
        self.editing: Product | None = None
        self.draft: ProductDraft | None = None
        self.draft_errors: list[str] = []

        self.on_change: Optional[Callable[[], None]] = None
        self._notify = notify
        self._load_generation = 0

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    def page(self) -> PageView:
        return self.view.apply(self.products)

    def summary(self) -> dict[str, int]:
        return stock_summary(self.products)

    def product_label(self, product_id: ProductId) -> str:
        """Name of a loaded product, or its raw id when unknown or unnamed."""
        for p in self.products:
            if p.id == product_id and p.name:
                return p.name
        return str(product_id)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load(self) -> None:
        """Fetch the product list. Only the newest dispatched load may apply."""
        self._load_generation += 1
        generation = self._load_generation
        self.loading = True
        self.error = None
        self._changed()

        loop = asyncio.get_event_loop()
        try:
            products = await loop.run_in_executor(None, self.client.list_products)
        except LoadError as exc:
            if generation != self._load_generation:
                logger.debug("Ignoring failure of superseded load #%d", generation)
                return
            logger.error("Loading products failed: %s", exc)
            self.products = []
            self.error = LOAD_ERROR_MESSAGE
        else:
            if generation != self._load_generation:
                logger.debug("Ignoring result of superseded load #%d", generation)
                return
            self.products = products
            dropped = self.selection.prune(p.id for p in products)
            if dropped:
                logger.info("Dropped %d stale selection(s) after reload", len(dropped))

        self.loading = False
        self._changed()

    # ------------------------------------------------------------------
    # View input
    # ------------------------------------------------------------------

    def set_search(self, term: str | None) -> None:
        self.view.set_search(term)
        self._changed()

    def set_filter(self, status: str) -> None:
        self.view.set_filter(status)
        self._changed()

    def set_page_size(self, size: int) -> None:
        self.view.set_page_size(size)
        self._changed()

    def go_to_page(self, page: int) -> None:
        self.view.go_to_page(page)
        self._changed()

    def toggle_all(self, checked: bool) -> None:
        self.selection.toggle_all(self.page().visible_ids, checked)
        self._changed()

    def toggle(self, product_id: ProductId, checked: bool) -> None:
        self.selection.toggle(product_id, checked)
        self._changed()

    def dismiss_error(self) -> None:
        self.error = None
        self._changed()

    # ------------------------------------------------------------------
    # Add / edit dialog
    # ------------------------------------------------------------------

    def open_add(self) -> None:
        self._open_dialog(None, ProductDraft())

    def open_edit(self, product: Product) -> None:
        self._open_dialog(product, ProductDraft.from_product(product))

    def _open_dialog(self, editing: Product | None, draft: ProductDraft) -> None:
        self.editing = editing
        self.draft = draft
        self.draft_errors = []
        # A save error belongs to the dialog that produced it
        if self.error == SAVE_ERROR_MESSAGE:
            self.error = None
        self.dialog_open = True
        self._changed()

    def close_dialog(self) -> None:
        self.dialog_open = False
        self.editing = None
        self.draft = None
        self.draft_errors = []
        self._changed()

    async def save_draft(self) -> bool:
        """Create or update from the open draft.

        On failure the dialog stays open with the draft untouched so the user
        can retry; nothing is logged and the list is not reloaded.
        """
        if self.draft is None:
            return False
        self.draft_errors = self.draft.validation_errors()
        if self.draft_errors:
            self._changed()
            return False

        draft = self.draft
        editing = self.editing
        payload = draft.to_payload()
        loop = asyncio.get_event_loop()
        try:
            if editing is not None:
                await loop.run_in_executor(None, self.client.update_product, editing.id, payload)
            else:
                await loop.run_in_executor(None, self.client.create_product, payload)
        except SaveError as exc:
            logger.error("Saving product %r failed: %s", payload["name"], exc)
            self.error = SAVE_ERROR_MESSAGE
            self._changed()
            return False

        name = payload["name"]
        if editing is not None:
            self.activity.record(ActivityAction.EDITED, name)
            self._toast(f"{name} has been edited in the inventory")
        else:
            self.activity.record(ActivityAction.ADDED, name)
            self._toast(f"{name} has been added to the inventory")
        self.close_dialog()
        await self.load()
        return True

    # ------------------------------------------------------------------
    # Deletes and bulk actions (confirmation happens in the page)
    # ------------------------------------------------------------------

    async def delete_product(self, product_id: ProductId) -> bool:
        label = self.product_label(product_id)
        loop = asyncio.get_event_loop()
        try:
            await loop.run_in_executor(None, self.client.delete_product, product_id)
        except DeleteError as exc:
            logger.error("Deleting product %s failed: %s", product_id, exc)
            self.error = DELETE_ERROR_MESSAGE
            self._changed()
            return False

        self.activity.record(ActivityAction.DELETED, label)
        self.selection.discard([product_id])
        await self.load()
        return True

    async def bulk_delete(self) -> BulkResult | None:
        return await self._run_bulk(
            self.client.delete_product, ActivityAction.DELETED, "Deleted",
        )

    async def bulk_mark_out_of_stock(self) -> BulkResult | None:
        return await self._run_bulk(
            lambda pid: self.client.patch_product(pid, {"quantity": 0}),
            ActivityAction.MARKED_OUT_OF_STOCK,
            "Marked out of stock:",
        )

    async def _run_bulk(self, action, log_action: ActivityAction, verb: str) -> BulkResult | None:
        if not self.selection.any_selected:
            return None
        ids = self.selection.ordered(p.id for p in self.products)
        labels = {pid: self.product_label(pid) for pid in ids}

        result = await run_bulk(ids, action)

        for pid in result.succeeded:
            self.activity.record(log_action, labels[pid])
        self.selection.clear()
        await self.load()
        if result.ok:
            self._toast(result.summary(verb))
        else:
            # Set after load(), which resets the banner
            self.error = result.summary(verb)
            self._changed()
        return result

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    async def import_file(
        self,
        filename: str,
        content: bytes,
        on_progress: Optional[Callable[[int, int], None]] = None,
    ) -> ImportResult | None:
        """Parse an uploaded CSV/XLSX and create its rows one by one."""
        try:
            rows = parse_import_file(filename, content)
        except ImportFileError as exc:
            logger.warning("Rejected import file %s: %s", filename, exc)
            self.error = f"Import failed: {exc}"
            self._changed()
            return None

        result = await import_rows(
            rows,
            self.client.create_product,
            on_imported=lambda row: self.activity.record(
                ActivityAction.IMPORTED, str(row["name"]),
            ),
            on_progress=on_progress,
        )
        await self.load()
        if result.failed:
            self.error = (
                f"Imported {len(result.imported)} product(s); "
                f"{len(result.failed)} row(s) failed."
            )
            self._changed()
        else:
            self._toast(f"Imported {len(result.imported)} product(s).")
        return result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def _toast(self, message: str, kind: str = "positive") -> None:
        if self._notify is not None:
            self._notify(message, kind)
