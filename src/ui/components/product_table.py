"""Paged product table with selection checkboxes and row actions."""
from nicegui import ui

from src.services.inventory import InventoryController
from src.services.view_state import PageView
from src.ui.components.helpers import ROW_STRIPE_BG, status_badge

_COLUMNS = [
    ("Product", "w-1/5"),
    ("Description", "flex-1"),
    ("Quantity", "w-24"),
    ("Status", "w-32"),
    ("Actions", "w-40"),
]


def product_table(controller: InventoryController, view: PageView, on_edit, on_delete):
    """Render one page of products.

    *on_edit* receives the product, *on_delete* its id.
    """
    with ui.card().classes("w-full p-0 overflow-x-auto"):
        # Header row
        with ui.row().classes(
            "w-full items-center gap-4 px-4 py-2 no-wrap bg-blue-50 "
            "text-primary font-bold uppercase text-caption"
        ):
            ui.checkbox(
                value=controller.selection.all_selected(view.visible_ids),
                on_change=lambda e: controller.toggle_all(e.value),
            ).props("dense")
            for title, width in _COLUMNS:
                ui.label(title).classes(width)

        if controller.loading:
            _message_row("Loading...")
            return
        if not view.items:
            _message_row("No products found.")
            return

        for idx, p in enumerate(view.items):
            stripe = ROW_STRIPE_BG if idx % 2 else "bg-white"
            with ui.row().classes(f"w-full items-center gap-4 px-4 py-2 no-wrap {stripe}"):
                ui.checkbox(
                    value=p.id in controller.selection,
                    on_change=lambda e, pid=p.id: controller.toggle(pid, e.value),
                ).props("dense")
                ui.label(p.name).classes("w-1/5 font-medium")
                ui.label(p.description).classes("flex-1 text-secondary")
                ui.label(str(p.quantity)).classes("w-24")
                with ui.element("div").classes("w-32"):
                    status_badge(p.quantity)
                with ui.row().classes("w-40 gap-1 no-wrap"):
                    ui.button(
                        "Edit", on_click=lambda _, prod=p: on_edit(prod),
                    ).props("flat dense color=primary")
                    ui.button(
                        "Delete", on_click=lambda _, pid=p.id: on_delete(pid),
                    ).props("flat dense color=negative")


def _message_row(text: str):
    with ui.row().classes("w-full justify-center p-6"):
        ui.label(text).classes("text-body2 text-accent")
