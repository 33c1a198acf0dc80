"""Recent activity card."""
from nicegui import ui

from src.models.activity import ActivityLog


def activity_panel(log: ActivityLog):
    """Render the newest-first activity entries."""
    with ui.card().classes("w-full max-w-2xl mx-auto p-4"):
        ui.label("Recent Activity").classes("text-subtitle1 font-bold text-primary mb-2")
        entries = log.entries
        if not entries:
            ui.label("No activity yet.").classes("text-body2 text-secondary")
            return
        with ui.scroll_area().classes("w-full h-40"):
            for entry in entries:
                with ui.row().classes("items-center gap-2 text-body2 no-wrap"):
                    ui.label(entry.time_label).classes("text-caption text-grey-6")
                    ui.label(entry.user).classes("font-medium")
                    ui.label(entry.action.value).classes("text-secondary")
                    ui.label(entry.product).classes("font-bold text-primary")
