from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from fastapi.responses import PlainTextResponse
from village_site.config import settings
from contextlib import asynccontextmanager
from pathlib import Path

import logging

_log_dir = Path(settings.LOG_DIR)
_log_dir.mkdir(parents=True, exist_ok=True)

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.FileHandler(_log_dir / "app.log"), logging.StreamHandler()],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown events"""
    logger.info(f"[>>] Starting {settings.APP_NAME} site...")
    logger.info(
        "[OK] Page sizes: news=%d population=%d gallery=%d (fallback %d)",
        settings.NEWS_PER_PAGE,
        settings.POPULATION_PER_PAGE,
        settings.GALLERY_PER_PAGE,
        settings.DEFAULT_ITEMS_PER_PAGE,
    )
    if settings.CLAMP_NEGATIVE_PAGES:
        logger.info("[OK] Negative page numbers are clamped to page 1")
    yield
    logger.info(f"[<<] Shutting down {settings.APP_NAME} site...")


app = FastAPI(
    title=settings.APP_NAME,
    description="Village government information site",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Logs every unhandled exception"""
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        str(exc),
        exc_info=True,
    )
    return PlainTextResponse(
        "Internal Server Error. Please contact support if the problem persists.",
        status_code=500,
    )


@app.get("/api/health")
async def health_check():
    return {"status": "ok"}


PACKAGE_DIR = Path(__file__).parent

static_dir = PACKAGE_DIR / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")
