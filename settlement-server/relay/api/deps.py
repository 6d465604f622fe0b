"""Reusable FastAPI dependencies."""

from fastapi import Depends, Request

from relay.core.container import ApplicationContainer
from relay.modules.settlements import SettlementService


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_settlement_service(container: ApplicationContainer = Depends(get_container)) -> SettlementService:
    return container.settlements


__all__ = [
    "get_container",
    "get_settlement_service",
]
