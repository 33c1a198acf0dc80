"""Inventory Manager - Main entry point."""
import logging

from nicegui import app, ui

from config import API_BASE_URL, APP_HOST, APP_PORT, APP_TITLE, LOG_LEVEL
from src.ui.pages.inventory import inventory_page

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@ui.page("/")
def index():
    inventory_page()


@app.get("/_health")
async def health_check():
    return {"status": "ok", "app": "inventory-manager"}


logger.info("Serving %s against API at %s", APP_TITLE, API_BASE_URL)

ui.run(
    title=APP_TITLE,
    host=APP_HOST,
    port=APP_PORT,
    reload=False,
    dark=False,
)
