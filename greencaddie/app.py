from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from greencaddie import __version__
from greencaddie.api.health import health as _health_handler
from greencaddie.config import get_settings

from .routes.course_map import router as course_map_router
from .routes.course_qa import router as course_qa_router
from .routes.live import router as live_router


def create_app() -> FastAPI:
    app = FastAPI(title="GreenCaddie", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(course_qa_router)
    app.include_router(course_map_router)
    app.include_router(live_router)
    app.add_api_route(
        "/health",
        _health_handler,
        methods=["GET"],
        response_model=None,
        tags=["health"],
    )
    return app


app = create_app()
