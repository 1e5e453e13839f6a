"""Static front-end assets

Every GET that no API route handles is served from the public asset
directory. A path owned by an API route never falls through to the assets:
requesting it with an unsupported method stays a 405.

The API routes are looked up in ``app.state.api_routes``, collected from
the API routers with ``api_route_table`` when the app is assembled.
"""
from typing import List

from fastapi import APIRouter, HTTPException, Request
from fastapi.routing import APIRoute
from fastapi.staticfiles import StaticFiles

from config import default_config

router = APIRouter()

API_PREFIX = "/api/"


def build_static_files(public_dir=None) -> StaticFiles:
    """StaticFiles app for public_dir; index.html is served for directories"""
    directory = public_dir or default_config.server.public_dir
    return StaticFiles(directory=str(directory), html=True, check_dir=False)


def api_route_table(*routers: APIRouter) -> List[APIRoute]:
    """API routes declared by the given routers, in declaration order"""
    return [
        route
        for api_router in routers
        for route in api_router.routes
        if isinstance(route, APIRoute) and route.path.startswith(API_PREFIX)
    ]


def _is_api_path(request: Request) -> bool:
    path = request.url.path
    routes = getattr(request.app.state, "api_routes", ())
    return any(route.path_regex.match(path) for route in routes)


@router.get("/{asset_path:path}", include_in_schema=False)
async def serve_asset(request: Request):
    """Serve a file from the public directory, 404 when absent"""
    if _is_api_path(request):
        raise HTTPException(status_code=405, detail="method not allowed")
    static_files = getattr(request.app.state, "static_files", None) or build_static_files()
    return await static_files.get_response(static_files.get_path(request.scope), request.scope)
