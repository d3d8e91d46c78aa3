import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.routers import api, pages
from app.settings import settings
from app.site_config import site_config

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=site_config.siteName, description=site_config.siteDescription)

app.mount("/static", StaticFiles(directory="static", check_dir=False), name="static")
app.include_router(api.router)
app.include_router(pages.router)

logger.info(f"Serving posts from {settings.content_path.resolve()}")
