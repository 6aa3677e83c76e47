import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, status
from app.core.db import init_db, close_db
from app.api.v1.auth import router as auth_router
from app.api.v1.catalog import router as catalog_router
from app.api.v1.menu import router as menu_router
from app.api.v1.notifications import router as notifications_router
from app.api.v1.orders import router as orders_router
from app.api.v1.pricing import router as pricing_router
from app.core.config import LOG_LEVEL, PROJECT_NAME, SEED_DEMO_DATA, VERSION
from app.core.exception_handlers import setup_exception_handlers
from app.scripts.seed_data import seed

logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
log = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handles startup and shutdown events."""
    log.info(f"Starting {PROJECT_NAME} v{VERSION}...")
    await init_db() # Connect to DB and generate schemas
    if SEED_DEMO_DATA:
        await seed()
    yield
    await close_db()
    log.info(f"{PROJECT_NAME} stopped.")

app = FastAPI(
    title=PROJECT_NAME,
    version=VERSION,
    lifespan=lifespan,
    # Configure API documentation and paths
    docs_url="/docs",
    redoc_url="/redoc"
)

# Include routers for modular API structure
app.include_router(auth_router, prefix="/api/v1", tags=["Accounts"])
app.include_router(catalog_router, prefix="/api/v1", tags=["Catalog"])
app.include_router(menu_router, prefix="/api/v1/menu", tags=["Menu Management"])
app.include_router(pricing_router, prefix="/api/v1/pricing", tags=["Pricing"])
app.include_router(orders_router, prefix="/api/v1/orders", tags=["Order Management"])
app.include_router(notifications_router, prefix="/api/v1/notifications", tags=["Notifications"])


setup_exception_handlers(app)

@app.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Simple health check endpoint."""
    return {"status": "ok", "app_name": PROJECT_NAME}
