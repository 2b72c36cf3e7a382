from __future__ import annotations

import importlib

from fastapi import APIRouter

api_router = APIRouter()


def _include(module_path: str) -> None:
    mod = importlib.import_module(module_path)
    router = getattr(mod, "router", None)
    if router is not None:
        api_router.include_router(router)


# Keep this list in the order you want routes registered.
for _mod in (
    "app.api.routes.health",
    "app.api.routes.availability",
    "app.api.routes.bookings",
    "app.api.routes.gallery",
    "app.api.routes.admin_auth",
    "app.api.routes.admin_bookings",
    "app.api.routes.admin_gallery",
):
    _include(_mod)
