from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes.chapters import router as chapters_router
from api.routes.navigation import router as navigation_router
from api.routes.state import router as state_router
from api.routes.verses import router as verses_router


def create_app() -> FastAPI:
    app = FastAPI(title="Gita Reader API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(chapters_router)
    app.include_router(verses_router)
    app.include_router(state_router)
    app.include_router(navigation_router)

    @app.get("/healthz")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
