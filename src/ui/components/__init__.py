"""Reusable UI components."""
from src.ui.components.activity_panel import activity_panel
from src.ui.components.confirm_dialog import confirm_dialog
from src.ui.components.helpers import page_header, status_badge
from src.ui.components.product_form import open_product_dialog
from src.ui.components.product_table import product_table
from src.ui.components.progress_tracker import ProgressTracker
from src.ui.components.stats_card import stats_card, stock_summary_cards

__all__ = [
    "activity_panel",
    "confirm_dialog",
    "page_header",
    "status_badge",
    "open_product_dialog",
    "product_table",
    "ProgressTracker",
    "stats_card",
    "stock_summary_cards",
]
