"""Product review dashboard - Main entry point."""
import logging

from nicegui import app, ui

from config import APP_TITLE, APP_PORT, APP_HOST, BACKEND_BASE_URL, LOG_LEVEL
from src.ui.pages.review import review_page

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logging.getLogger(__name__).info("Using product backend at %s", BACKEND_BASE_URL)


@ui.page("/")
def index():
    review_page()


@app.get("/_health")
async def health_check():
    return {"status": "ok", "app": "product-review-dashboard"}


ui.run(
    title=APP_TITLE,
    host=APP_HOST,
    port=APP_PORT,
    reload=False,
    dark=False,
)
