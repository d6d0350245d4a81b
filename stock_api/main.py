from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stock_api.api.errors import init_error_handlers
from stock_api.api.router import api_router
from stock_api.core.config import settings
from stock_api.core.logging import configure_logging
from stock_api.db.base import Base
from stock_api.db.session import engine
from stock_api import models  # noqa: F401  registers tables on Base.metadata

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info("Creating tables on %s", engine.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=engine)
    yield
    logger.info("Shutting down")
    engine.dispose()


configure_logging(settings.log_level.upper())

app = FastAPI(title="Stock API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.client_origin],
    allow_methods=["*"],
    allow_headers=["*"],
)
init_error_handlers(app)
app.include_router(api_router, prefix=settings.api_prefix)
