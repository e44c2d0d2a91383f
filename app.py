"""User Directory - Main entry point."""
import logging

from nicegui import app, ui

from config import APP_TITLE, APP_PORT, APP_HOST, LOG_LEVEL
from src.models import init_db
from src.services import PreferenceStore
from src.ui.pages.dashboard import dashboard_page

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Initialize preference table and read the theme once at startup
init_db()
preferences = PreferenceStore()
preferences.read()


@ui.page("/")
def index(search: str | None = None, company: str | None = None):
    dashboard_page(preferences, search=search, company=company)


@app.get("/_health")
async def health_check():
    return {"status": "ok", "app": "user-directory"}


ui.run(
    title=APP_TITLE,
    host=APP_HOST,
    port=APP_PORT,
    reload=False,
    dark=preferences.value,
)
