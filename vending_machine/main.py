# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import auth_router, deposit_router, health_router, product_router, purchase_router
from .core.config import get_settings
from .infrastructure.db import close_client, ensure_indexes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures the unique username index on startup and closes the MongoDB
    client on shutdown.
    """
    try:
        await ensure_indexes()
    except Exception as e:
        # Don't fail app startup if MongoDB is not reachable yet
        logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    yield

    close_client()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    application = FastAPI(
        title="Vending Machine API",
        version="1.0.2",
        description=(
            "API for a vending machine, allowing users with a seller role to add, update or "
            "remove products, while users with a buyer role can deposit coins and make purchases"
        ),
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health_router)
    application.include_router(auth_router)
    application.include_router(deposit_router)
    application.include_router(purchase_router)
    application.include_router(product_router)

    return application


# Create application instance
app = create_application()
