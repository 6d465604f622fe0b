from fastapi import APIRouter

from relay.api.routers import currency


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(currency.router, tags=["settlement"])
    return router


__all__ = [
    "create_api_router",
]
