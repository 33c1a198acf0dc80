"""Shared layout: header and content area."""
from nicegui import ui

from config import APP_TITLE


def build_layout(title: str = APP_TITLE):
    """Create the page shell and return the main content column."""
    ui.colors(
        primary="#1E3A8A",
        secondary="#5f6368",
        accent="#3B82F6",
        positive="#34a853",
        negative="#ea4335",
        warning="#F59E0B",
    )
    ui.query("body").classes("bg-blue-50")

    with ui.header().classes("items-center justify-between px-4 bg-primary"):
        with ui.row().classes("items-center gap-3"):
            ui.icon("inventory", size="md").classes("text-white")
            ui.label(title).classes("text-subtitle1 text-white font-bold")
        ui.space()

    content = ui.column().classes("w-full p-6 max-w-7xl mx-auto gap-4")
    return content
