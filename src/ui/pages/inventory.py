"""Inventory page -- list, filter, edit and bulk-manage products."""
import logging

from nicegui import ui

from config import IMPORT_MAX_FILE_SIZE, PAGE_SIZE_OPTIONS
from src.services.inventory import InventoryController
from src.services.view_state import STATUS_FILTERS
from src.ui.components.activity_panel import activity_panel
from src.ui.components.confirm_dialog import confirm_dialog
from src.ui.components.helpers import INPUT_PROPS, page_header, pluralize
from src.ui.components.product_form import open_product_dialog
from src.ui.components.product_table import product_table
from src.ui.components.progress_tracker import ProgressTracker
from src.ui.components.stats_card import stock_summary_cards
from src.ui.layout import build_layout

logger = logging.getLogger(__name__)


def inventory_page(controller: InventoryController | None = None):
    """Render the inventory management screen.

    Args:
        controller: Optional pre-built controller (one is created per page
            visit otherwise, so state is never shared between browser tabs).
    """
    controller = controller or InventoryController(
        notify=lambda message, kind: ui.notify(message, type=kind),
    )

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _confirm_delete(product_id):
        confirm_dialog(
            f'Delete "{controller.product_label(product_id)}"?',
            "Are you sure you want to delete this product? This action cannot be undone.",
            on_confirm=lambda: controller.delete_product(product_id),
        )

    def _confirm_bulk_delete():
        if not controller.selection.any_selected:
            return
        confirm_dialog(
            f"Delete {pluralize(len(controller.selection), 'product')}?",
            "Delete selected products? This action cannot be undone.",
            on_confirm=controller.bulk_delete,
            confirm_label="Delete All",
        )

    async def _handle_upload(e):
        import_status.clear()
        with import_status:
            tracker = ProgressTracker(label="Reading file...")
        try:
            content_bytes = await e.file.read()
            result = await controller.import_file(
                e.file.name, content_bytes, on_progress=tracker.update,
            )
        finally:
            upload.reset()

        if result is None:
            tracker.set_error("Import failed.")
            return
        message = f"Imported {pluralize(len(result.imported), 'product')}"
        if result.skipped:
            message += f", skipped {result.skipped} incomplete row(s)"
        if result.failed:
            message += f", {len(result.failed)} failed"
        tracker.complete(message + ".")

    content = build_layout()

    with content:
        page_header(
            "Inventory Management",
            subtitle="Search, edit and bulk-manage your products.",
            icon="inventory_2",
        )

        # --- Error banner (one message at a time, last one wins) ---
        @ui.refreshable
        def _banner():
            if not controller.error:
                return
            with ui.row().classes(
                "w-full items-center gap-3 p-3 rounded bg-red-1 text-negative"
            ):
                ui.icon("error")
                ui.label(controller.error).classes("text-body2 flex-1")
                ui.button(icon="close", on_click=controller.dismiss_error).props(
                    "flat round dense size=sm color=negative"
                )

        _banner()

        @ui.refreshable
        def _summary():
            stock_summary_cards(controller.summary())

        _summary()

        # --- Controls: search, status, page size, total ---
        with ui.row().classes("w-full items-center gap-4 flex-wrap"):
            search_input = ui.input(
                placeholder="Search products...",
            ).props(f"clearable {INPUT_PROPS}").classes("w-96")
            search_input.props('prepend-inner-icon="search"')

            ui.select(
                STATUS_FILTERS,
                value=controller.view.filter_status,
                label="Status",
                on_change=lambda e: controller.set_filter(e.value),
            ).props(INPUT_PROPS).classes("w-48")

            ui.space()

            ui.label("Records:").classes("text-body2 font-bold text-primary")
            ui.toggle(
                {size: str(size) for size in PAGE_SIZE_OPTIONS},
                value=controller.view.page_size,
                on_change=lambda e: controller.set_page_size(e.value),
            ).props("dense unelevated toggle-color=primary")

            @ui.refreshable
            def _total():
                ui.label(f"Total: {controller.page().total_records}").classes(
                    "text-body2 text-accent font-medium"
                )

            _total()

        _search_timer = {"ref": None}

        def _debounced_search(_):
            if _search_timer["ref"] is not None:
                _search_timer["ref"].cancel()
            _search_timer["ref"] = ui.timer(
                0.3, lambda: controller.set_search(search_input.value), once=True,
            )

        search_input.on_value_change(_debounced_search)

        # --- Import + bulk actions + add ---
        with ui.row().classes("w-full items-center gap-2"):
            upload = ui.upload(
                label="Import CSV",
                auto_upload=True,
                max_file_size=IMPORT_MAX_FILE_SIZE,
                on_upload=_handle_upload,
            ).props('accept=".csv,.xlsx" flat bordered').classes("w-64")

            @ui.refreshable
            def _bulk_actions():
                count = len(controller.selection)
                ui.button(
                    "Delete Selected" + (f" ({count})" if count else ""),
                    icon="delete",
                    on_click=_confirm_bulk_delete,
                ).props("color=negative outline").set_enabled(count > 0)
                ui.button(
                    "Mark Out of Stock",
                    icon="remove_shopping_cart",
                    on_click=controller.bulk_mark_out_of_stock,
                ).props("color=warning outline").set_enabled(count > 0)

            _bulk_actions()

            ui.space()
            ui.button(
                "Add Product", icon="add",
                on_click=lambda: open_product_dialog(controller),
            ).props("color=primary")

        import_status = ui.column().classes("w-full gap-2")

        # --- Table + pagination ---
        @ui.refreshable
        def _table():
            view = controller.page()
            product_table(
                controller, view,
                on_edit=lambda product: open_product_dialog(controller, product),
                on_delete=_confirm_delete,
            )

            with ui.row().classes("w-full items-center justify-between"):
                if view.items:
                    ui.label(
                        f"Showing {view.first_index}-{view.last_index} of "
                        f"{pluralize(view.total_records, 'product')}"
                    ).classes("text-body2 text-secondary")
                else:
                    ui.label("").classes("text-body2")
                with ui.row().classes("gap-1 flex-wrap justify-center"):
                    for page_num in range(1, view.total_pages + 1):
                        btn = ui.button(
                            str(page_num),
                            on_click=lambda _, n=page_num: controller.go_to_page(n),
                        ).props("dense")
                        if page_num == view.current_page:
                            btn.props("unelevated color=primary")
                        else:
                            btn.props("outline color=primary")

        _table()

        @ui.refreshable
        def _activity():
            activity_panel(controller.activity)

        _activity()

    def _refresh_all():
        try:
            for section in (_banner, _summary, _total, _bulk_actions, _table, _activity):
                section.refresh()
        except RuntimeError:
            logger.debug("Inventory page closed before refresh")

    controller.on_change = _refresh_all
    ui.timer(0.1, controller.load, once=True)
