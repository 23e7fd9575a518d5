"""FastAPI application — main entry point."""

import os
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from shop_manager.config import get_settings
from shop_manager.core.exceptions import AppError, global_exception_handler
from shop_manager.core.logging import configure_logging
from shop_manager.core.middleware import setup_middleware
from shop_manager.infrastructure.seed import init_db

# Import all models so SQLAlchemy knows about them
from shop_manager.domain.models.product import Product  # noqa: F401

# Import routers
from shop_manager.interfaces.api.products import router as products_router
from shop_manager.interfaces.api.query import router as query_router
from shop_manager.interfaces.api.sales import router as sales_router

settings = get_settings()

STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting Shop Manager...", env=settings.ENVIRONMENT)
    init_db()

    yield

    logger.info("Shop Manager stopped")


app = FastAPI(
    title="Shop Manager",
    description="Product catalog with sales questions in plain words",
    version="1.0.0",
    lifespan=lifespan,
)

setup_middleware(app)

# AppError is matched by class in the exception middleware; the bare
# Exception handler only runs as the last-resort 500 page.
app.add_exception_handler(AppError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(products_router)
app.include_router(sales_router)
app.include_router(query_router)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.get("/", include_in_schema=False)
def root():
    return FileResponse(os.path.join(STATIC_DIR, "index.html"))


@app.get("/health")
def health():
    return {"status": "healthy"}


def run() -> None:
    """Console entry point for the web UI and REST API."""
    logger.info("Shop Manager UI running", url=f"http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)
