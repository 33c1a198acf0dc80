"""Domain models package."""
from src.models.activity import ActivityAction, ActivityEntry, ActivityLog
from src.models.product import Product, ProductDraft, ProductId, StockStatus, stock_status

__all__ = [
    "ActivityAction",
    "ActivityEntry",
    "ActivityLog",
    "Product",
    "ProductDraft",
    "ProductId",
    "StockStatus",
    "stock_status",
]
