"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lsystem3d import config
from lsystem3d.api.routes import router


def create_app() -> FastAPI:
    config.configure_logging()

    app = FastAPI(
        title="L-System Generator",
        description="Grammar-driven 3D turtle geometry engine",
        version="0.1.0",
    )

    # CORS: allow browser viewers on any origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
