"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from relay.core.config import Settings
from relay.modules.ledger import BalanceUpdater, LootLockerClient, SessionManager
from relay.modules.replay import ReplayGuard
from relay.modules.settlements import SettlementService


@dataclass(slots=True)
class ApplicationContainer:
    """Process-wide collaborators shared by every request."""

    settings: Settings
    http: httpx.AsyncClient
    sessions: SessionManager
    replay_guard: ReplayGuard
    balances: BalanceUpdater
    settlements: SettlementService

    @classmethod
    def build(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ApplicationContainer":
        http = httpx.AsyncClient(
            base_url=settings.lootlocker_base_url,
            timeout=settings.upstream_timeout,
            transport=transport,
        )
        client = LootLockerClient(http=http, api_version=settings.lootlocker_api_version)
        sessions = SessionManager(client, settings.server_api_key, settings.game_version)
        replay_guard = ReplayGuard(retention_seconds=settings.replay_retention_seconds)
        balances = BalanceUpdater(client=client, sessions=sessions)
        settlements = SettlementService(
            balances=balances,
            replay_guard=replay_guard,
            hmac_secret=settings.hmac_secret,
            currency_id=settings.currency_id,
            freshness_window_seconds=settings.freshness_window_seconds,
        )
        return cls(
            settings=settings,
            http=http,
            sessions=sessions,
            replay_guard=replay_guard,
            balances=balances,
            settlements=settlements,
        )

    async def aclose(self) -> None:
        await self.http.aclose()


__all__ = ["ApplicationContainer"]
