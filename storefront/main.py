# storefront/main.py
from contextlib import asynccontextmanager
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from storefront.core.config import get_settings
from storefront.core.errors import StorefrontError
from storefront import database

# Import models so SQLModel metadata is populated before create_all()
from storefront.models import product as _product_models  # noqa: F401
from storefront.models import cart as _cart_models  # noqa: F401
from storefront.models import order as _order_models  # noqa: F401


# Routers
from storefront.routers.catalog import router as catalog_router
from storefront.routers.catalog import product_service
from storefront.routers.cart import router as cart_router
from storefront.routers.cart import cart_repo
from storefront.routers.orders import router as orders_router
from storefront.routers.orders import service as checkout_service

settings = get_settings()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Verify DB connectivity and create tables.

    Shutdown:
      - No special cleanup needed for sync engine.
    """
    logger.info("Startup: connecting to store %s", database.database_name())
    try:
        database.create_db_and_tables()
        logger.info("Startup: DB connection OK, tables verified.")
    except Exception as e:
        logger.error(f"Startup: DB connection FAILED: {e}")
        raise
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


# --- Error handling ---


@app.exception_handler(StorefrontError)
async def storefront_error_handler(request: Request, exc: StorefrontError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("%s %s store failure: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Store failure"})


app.include_router(catalog_router)
app.include_router(cart_router)
app.include_router(orders_router)


@app.get("/healthz")
def healthz(session: Session = Depends(database.get_session)):
    """Health check endpoint with store counts."""
    return {
        "status": "ok",
        "database": database.database_name(),
        "products": product_service.count(session),
        "cart_items": cart_repo.count_lines(session),
        "orders": checkout_service.count_orders(session),
    }
