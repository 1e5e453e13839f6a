import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import default_config
from app_state import AppState
from middleware import RequestLoggingMiddleware, register_error_handlers
from startup.manager import StartupManager
from routes.health import router as health_router
from routes.drive import router as drive_router
from routes.folders import router as folders_router
from routes.documents import router as documents_router
from routes.assets import router as assets_router, api_route_table, build_static_files


def configure_logging(config=default_config.logging):
    """Configure root logging once for the process"""
    logging.basicConfig(level=config.level, format=config.format)


# Global state
state = AppState()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the pool, close it on shutdown.

    A startup failure propagates, so the server exits.
    """
    configure_logging()
    manager = StartupManager(state, default_config)
    await manager.initialize()
    yield
    await manager.shutdown()


app = FastAPI(
    title="Dox Drive API",
    description="Folders and documents backed by PostgreSQL",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(RequestLoggingMiddleware)
register_error_handlers(app)

# Store state in app for route access
app.state.app_state = state
app.state.max_body_bytes = default_config.server.max_body_bytes
app.state.static_files = build_static_files(default_config.server.public_dir)

API_ROUTERS = (health_router, drive_router, folders_router, documents_router)
app.state.api_routes = api_route_table(*API_ROUTERS)

# Include route modules; the asset fallback matches every GET, so it goes last
for api_router in API_ROUTERS:
    app.include_router(api_router)
app.include_router(assets_router)


if __name__ == "__main__":
    import uvicorn
    # Requests are logged by RequestLoggingMiddleware
    uvicorn.run(app, host=default_config.server.host, port=default_config.server.port,
                access_log=False)
