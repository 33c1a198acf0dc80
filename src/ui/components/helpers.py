"""Shared UI helper functions and design tokens for the inventory screen."""

from nicegui import ui

from src.models.product import StockStatus, stock_status


# ─── Design Tokens ────────────────────────────────────────────────────────────

INPUT_PROPS = "outlined dense"
ROW_STRIPE_BG = "bg-blue-50"


def page_header(title: str, subtitle: str | None = None, icon: str | None = None):
    """Render a consistent page title with optional icon + subtitle."""
    with ui.row().classes("items-center gap-3"):
        if icon:
            ui.icon(icon, size="sm").classes("text-accent")
        ui.label(title).classes("text-h5 font-bold")
    if subtitle:
        ui.label(subtitle).classes("text-body2 text-secondary")


# ─── Status Badges ────────────────────────────────────────────────────────────

STATUS_COLORS = {
    StockStatus.OUT_OF_STOCK: "negative",
    StockStatus.LOW_STOCK: "warning",
    StockStatus.IN_STOCK: "blue",
}
STATUS_LABELS = {
    StockStatus.OUT_OF_STOCK: "Out of Stock",
    StockStatus.LOW_STOCK: "Low Stock",
    StockStatus.IN_STOCK: "In Stock",
}


def status_badge(quantity: int) -> None:
    """Render the colored stock-status pill for *quantity*."""
    status = stock_status(quantity)
    ui.badge(STATUS_LABELS[status], color=STATUS_COLORS[status]).props("rounded")


def pluralize(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"
