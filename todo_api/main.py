import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api.config import get_settings
from todo_api.error_handlers import register_error_handlers
from todo_api.observability import setup_logging
from todo_api.routers import todo_router, user_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Mangum runs the lifespan on every invocation; the registry is not reset
    # here.
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.app_title} started")
    yield
    logger.info(f"{settings.app_title} shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.app_title, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(user_router.router, prefix="/users", tags=["Users"])
    app.include_router(todo_router.router, prefix="/todos", tags=["Todos"])

    # Root health
    @app.get("/")
    async def read_root():
        return {"status": "ok"}

    return app


app = create_app()
