# shopcart/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from shopcart.api.routers import cart, orders, health
from shopcart.data.database import init_db
from shopcart.data.seed import seed
from shopcart.utils.settings import SEED_DATA
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Initializing database")
    try:
        init_db()
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise
    if SEED_DATA:
        seed()
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Shopping Cart Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(cart.router)
    app.include_router(orders.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
