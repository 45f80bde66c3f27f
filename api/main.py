from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import db
from core.config import get_settings
from core.errors import register_exception_handlers
from core.logging import setup_logging
from restaurants import router as restaurants_router
from reviews import router as reviews_router


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        if get_settings().init_schema:
            await db.init_schema()
        yield
    finally:
        await db.close_pool()


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Restaurant Reviews API", lifespan=lifespan)

    # Allow local frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(restaurants_router.router, tags=["restaurants"])
    app.include_router(reviews_router.router, tags=["reviews"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "restaurant-reviews api"}

    return app


app = create_app()
