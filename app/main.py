# main.py
"""
Campus directory API.

Run: python manage.py serve [--reset]
"""
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import sessionmaker

from app.api.errors import register_error_handlers
from app.api.router import api_router
from app.database.bootstrap import boot
from app.database.config.settings import Settings, get_settings
from app.database.database import create_db_engine, create_session_factory

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app(settings: Settings, session_factory: sessionmaker) -> FastAPI:
    app = FastAPI(title="Campus Directory API")
    app.state.settings = settings
    app.state.session_factory = session_factory

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router)
    return app


def serve(settings: Settings, reset: bool = False) -> None:
    configure_logging(settings.LOG_LEVEL)
    engine = create_db_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    session_factory = create_session_factory(engine)

    boot(settings, engine, session_factory, reset=reset or settings.RESET_ON_BOOT)

    app = create_app(settings, session_factory)
    logger.info(f"Server started on {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    serve(get_settings())
