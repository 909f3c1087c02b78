"""
Compare Backend - FastAPI Application Entry Point

Serves the side-by-side line comparison engine to the editor over HTTP:
/api/compare for structured rows, /api/compare/preview for a plain-text
rendering, and /api/config for the persisted comparison defaults.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import compare, config
from services.config_manager import ConfigManager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load configuration once at startup and report the active compare defaults"""
    config_manager = ConfigManager.get_instance()
    options = config_manager.compare_options()
    print(f"[Backend] Config file: {config_manager.config_file}")
    print(
        f"[Backend] Compare defaults: ignore_whitespace={options.ignore_whitespace}, "
        f"ignore_case={options.ignore_case}, max_lines={config_manager.max_lines()}"
    )

    yield
    print("[Backend] Compare Backend stopped")


app = FastAPI(
    title="Compare Backend",
    description="Side-by-side text comparison backend for the editor",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for local editor communication
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # editor runs locally
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(compare.router, prefix="/api/compare", tags=["compare"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "compare-backend"}


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=server.get("port", 8000))
