"""Services package."""
from src.services.api_client import (
    DeleteError,
    InventoryAPIClient,
    InventoryAPIError,
    LoadError,
    SaveError,
    parse_product_list,
)
from src.services.bulk import BulkResult, run_bulk
from src.services.csv_importer import (
    ImportFileError,
    ImportResult,
    import_rows,
    is_importable,
    parse_csv,
    parse_import_file,
    parse_xlsx,
)
from src.services.inventory import InventoryController
from src.services.selection import SelectionTracker
from src.services.view_state import PageView, ViewState, compute_page, stock_summary

__all__ = [
    "InventoryAPIClient",
    "InventoryAPIError",
    "LoadError",
    "SaveError",
    "DeleteError",
    "parse_product_list",
    "BulkResult",
    "run_bulk",
    "ImportFileError",
    "ImportResult",
    "import_rows",
    "is_importable",
    "parse_csv",
    "parse_import_file",
    "parse_xlsx",
    "InventoryController",
    "SelectionTracker",
    "PageView",
    "ViewState",
    "compute_page",
    "stock_summary",
]
