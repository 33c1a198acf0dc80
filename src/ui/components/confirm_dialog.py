"""Yes/no confirmation dialog used before destructive actions."""
from typing import Awaitable, Callable

from nicegui import ui


def confirm_dialog(
    title: str,
    message: str,
    on_confirm: Callable[[], Awaitable[object]],
    confirm_label: str = "Delete",
):
    """Open a dialog; *on_confirm* runs only when the user confirms."""
    with ui.dialog() as dialog, ui.card():
        ui.label(title).classes("text-subtitle1 font-bold")
        ui.label(message).classes("text-body2 text-secondary")
        with ui.row().classes("justify-end gap-2 mt-4"):
            ui.button("Cancel", on_click=dialog.close).props("flat")

            async def _confirm():
                dialog.close()
                await on_confirm()

            ui.button(confirm_label, on_click=_confirm).props("color=negative")
    dialog.open()
    return dialog
