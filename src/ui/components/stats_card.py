"""Reusable statistics card component."""
from nicegui import ui


def stats_card(title: str, value: str, icon: str = "info", color: str = "primary"):
    """Render a small stock-count card (total, in stock, low, out)."""
    with ui.card().classes("min-w-[160px] flex-1 p-4"):
        with ui.row().classes("items-center gap-3 w-full"):
            ui.icon(icon).classes(f"text-{color} text-3xl")
            with ui.column().classes("gap-0"):
                ui.label(value).classes("text-h5 font-bold")
                ui.label(title).classes("text-caption text-secondary")


def stock_summary_cards(summary: dict[str, int]) -> None:
    """Row of cards for the counts returned by ``stock_summary``."""
    with ui.row().classes("w-full gap-4"):
        stats_card("Products", str(summary["total"]), icon="inventory_2", color="primary")
        stats_card("In Stock", str(summary["high"]), icon="check_circle", color="blue")
        stats_card("Low Stock", str(summary["low"]), icon="warning", color="warning")
        stats_card("Out of Stock", str(summary["out"]), icon="remove_shopping_cart", color="negative")
