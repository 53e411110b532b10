# backend/main.py
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from database import init_db, check_db_connection
from utils.errors import register_error_handlers
from utils.logging_setup import setup_logging
from utils.origins import OriginGuardMiddleware

# Import routerów
from routes.health import router as health_router
from routes.auth import router as auth_router
from routes.users import router as users_router
from routes.assets import router as assets_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    # An unreachable database is logged, not fatal; requests report 500 until it is back
    if check_db_connection():
        init_db()
        logger.info("Database connected successfully")
    else:
        logger.warning("Starting without a database connection, tables were not checked")
    logger.info("Asset API started")
    yield
    logger.info("Asset API shutting down")


app = FastAPI(title="IT Asset Management API", version="1.0.0", lifespan=lifespan)

# CORS headers for allowed browser origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
# Added last so it runs first: unknown origins never reach CORS or the routes
app.add_middleware(OriginGuardMiddleware, allowed_origins=settings.ALLOWED_ORIGINS)

register_error_handlers(app)

# Rejestracja routerów
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(assets_router)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
