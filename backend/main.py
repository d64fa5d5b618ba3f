"""Main FastAPI application for Binairo Solver."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import _get_predefined_puzzles, router


@asynccontextmanager
async def _app_lifespan(_: FastAPI):
    """Eagerly validate predefined puzzles so a bad one fails at startup."""
    puzzles, error = _get_predefined_puzzles()
    if puzzles is None:
        raise RuntimeError(f"Failed to load predefined puzzles at startup: {error}")
    yield


app = FastAPI(
    title="Binairo Solver API",
    description="API for solving Binairo (binary / Takuzu) puzzles",
    version="1.0.0",
    lifespan=_app_lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Binairo Solver API", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.main:app", host="0.0.0.0", port=8000, reload=True)
