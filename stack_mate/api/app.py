"""Application factory. Run with: uvicorn --factory stack_mate.api.app:create_app"""

from fastapi import FastAPI

from stack_mate.api.routes import game_error_handler, router
from stack_mate.core.config import SETTINGS
from stack_mate.core.exceptions import GameError
from stack_mate.core.logging_setup import setup_logging
from stack_mate.db.database import init_db


def create_app(create_tables: bool = True) -> FastAPI:
    setup_logging(SETTINGS.log_level)
    if create_tables:
        init_db()

    app = FastAPI(title="Stack Mate")
    app.include_router(router)
    app.add_exception_handler(GameError, game_error_handler)
    return app
