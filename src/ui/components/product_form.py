"""Add / edit product dialog."""
from nicegui import ui

from src.models.product import Product
from src.services.inventory import SAVE_ERROR_MESSAGE, InventoryController
from src.ui.components.helpers import INPUT_PROPS


def open_product_dialog(controller: InventoryController, product: Product | None = None):
    """Open the product form for a new product, or for editing *product*.

    The dialog closes only after a successful save or on Cancel; a failed
    save leaves it open with the typed values intact.
    """
    if product is None:
        controller.open_add()
    else:
        controller.open_edit(product)
    draft = controller.draft
    is_edit = product is not None

    with ui.dialog().props("persistent") as dialog, ui.card().classes("w-full max-w-md p-6"):
        with ui.row().classes("items-center gap-2 mb-2"):
            ui.icon("edit" if is_edit else "add_circle").classes("text-accent")
            ui.label("Edit Product" if is_edit else "Add New Product").classes(
                "text-h6 font-bold text-primary"
            )

        ui.input(
            label="Product Name",
            placeholder="Enter product name",
            value=draft.name,
            on_change=lambda e: setattr(draft, "name", e.value or ""),
        ).props(INPUT_PROPS).classes("w-full")

        ui.textarea(
            label="Description",
            placeholder="Enter product description",
            value=draft.description,
            on_change=lambda e: setattr(draft, "description", e.value or ""),
        ).props(f"{INPUT_PROPS} rows=3").classes("w-full")

        ui.number(
            label="Quantity",
            placeholder="Enter quantity",
            value=draft.quantity,
            min=0,
            precision=0,
            format="%d",
            on_change=lambda e: setattr(draft, "quantity", int(e.value or 0)),
        ).props(INPUT_PROPS).classes("w-full")

        @ui.refreshable
        def _errors():
            problems = list(controller.draft_errors)
            if controller.error == SAVE_ERROR_MESSAGE:
                problems.append(controller.error)
            for msg in problems:
                ui.label(msg).classes("text-body2 text-negative")

        _errors()

        with ui.row().classes("w-full justify-end gap-2 mt-4"):
            def _cancel():
                controller.close_dialog()
                dialog.close()

            ui.button("Cancel", on_click=_cancel).props("flat")

            async def _save():
                save_btn.disable()
                saved = await controller.save_draft()
                if saved:
                    dialog.close()
                    return
                save_btn.enable()
                _errors.refresh()

            save_btn = ui.button(
                "Update Product" if is_edit else "Add Product",
                icon="save",
                on_click=_save,
            ).props("color=primary")

        ui.label(
            "Update the product details and click Update Product."
            if is_edit
            else "Fill in the details and click Add Product to create a new entry."
        ).classes("text-caption text-secondary text-center w-full mt-4")

    dialog.open()
    return dialog
