"""Application configuration."""
import os

from dotenv import load_dotenv

load_dotenv()

# Backend REST API
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")
API_PRODUCTS_PATH = os.getenv("API_PRODUCTS_PATH", "/api/products")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "15"))

# Inventory rules
LOW_STOCK_THRESHOLD = 10
PAGE_SIZE_OPTIONS = [10, 20, 40, 80, 100]

# Activity log (in-memory only, lost on reload)
ACTIVITY_LOG_LIMIT = int(os.getenv("ACTIVITY_LOG_LIMIT", "20"))
ACTIVITY_USER = os.getenv("ACTIVITY_USER", "Admin")

# Import
IMPORT_MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MB

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# App settings
APP_TITLE = "Inventory Management"
APP_PORT = int(os.getenv("APP_PORT", "8080"))
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
