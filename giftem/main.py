import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from giftem.database import PERSIST_STATE, AsyncSessionLocal, close_db, get_db, init_db
from giftem.repositories.settings_repository import SettingsStore
from giftem.routers.cart import router as cart_router
from giftem.routers.conversations import router as conversations_router
from giftem.routers.feed import router as feed_router
from giftem.routers.notifications import router as notifications_router
from giftem.routers.products import router as products_router
from giftem.routers.quotes import router as quotes_router
from giftem.routers.users import router as users_router
from giftem.routers.workouts import router as workouts_router
from giftem.scheduling import LoopScheduler
from giftem.state import build_services

# Load environment variables
load_dotenv()

# Environment variable parsing
ENV = os.getenv("ENV")
ENV_IS_PROD = ENV == "prod"
COMMIT_HASH = os.getenv("COMMIT_HASH")
if not COMMIT_HASH and ENV_IS_PROD:
    raise ValueError("COMMIT_HASH is required for production environments")

APP_ADDR = os.getenv("HOST", "0.0.0.0")
APP_PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
AUTO_REPLY_DELAY_SECONDS = float(os.getenv("AUTO_REPLY_DELAY_SECONDS", "2.0"))

logging.basicConfig(
    level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown."""
    # Startup
    settings_store: Optional[SettingsStore] = None
    if PERSIST_STATE:
        await init_db()
        settings_store = SettingsStore(AsyncSessionLocal)
    app.state.services = await build_services(
        scheduler=LoopScheduler(),
        settings_store=settings_store,
        auto_reply_delay=AUTO_REPLY_DELAY_SECONDS,
    )
    yield
    # Shutdown
    await close_db()


app = FastAPI(
    title="giftem",
    description="Social-commerce app service: catalog, cart, messaging, feed",
    version=COMMIT_HASH,
    lifespan=lifespan,
)

# Include routers
app.include_router(users_router, prefix="/api/users", tags=["users"])
app.include_router(products_router, prefix="/api/products", tags=["products"])
app.include_router(
    conversations_router, prefix="/api/conversations", tags=["conversations"]
)
app.include_router(cart_router, prefix="/api/cart", tags=["cart"])
app.include_router(
    notifications_router, prefix="/api/notifications", tags=["notifications"]
)
app.include_router(feed_router, prefix="/api/feed", tags=["feed"])
app.include_router(quotes_router, prefix="/api/quotes", tags=["quotes"])
app.include_router(workouts_router, prefix="/api/workouts", tags=["workouts"])


@app.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)) -> Dict[str, Optional[str]]:
    """Health check endpoint with local mirror connectivity."""
    if not PERSIST_STATE:
        db_status = "disabled"
    else:
        try:
            result = await db.execute(text("SELECT 1"))
            db_status = "connected" if result.scalar() == 1 else "error"
        except Exception:
            logger.exception("Local mirror health check failed")
            db_status = "disconnected"

    return {
        "status": "healthy" if db_status in ("connected", "disabled") else "degraded",
        "database": db_status,
        "environment": ENV,
        "version": COMMIT_HASH,
    }


# If run directly, start the server
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=APP_ADDR, port=APP_PORT)
