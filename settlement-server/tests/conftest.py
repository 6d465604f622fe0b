import json
import time
from collections import deque

import httpx
import pytest
from fastapi.testclient import TestClient

from relay.core.config import Settings
from relay.core.security import compute_signature
from relay.main import create_app

HMAC_SECRET = "test-hmac-secret"
CURRENCY_ID = "01HCURRENCY"


class FakeLootLocker:
    """Scriptable stand-in for the LootLocker server API.

    Session calls hand out ``token-1``, ``token-2`` ... in order. Balance
    calls pop queued status codes and answer 200 once the queue is empty.
    """

    def __init__(self):
        self.session_calls = []
        self.balance_calls = []
        self.session_statuses = deque()
        self.balance_statuses = deque()
        self.balance_error = None

    @property
    def transport(self):
        return httpx.MockTransport(self.handle)

    def handle(self, request):
        body = json.loads(request.content or b"{}")
        if request.url.path == "/server/session":
            self.session_calls.append({"headers": request.headers, "json": body})
            status = self.session_statuses.popleft() if self.session_statuses else 200
            if status != 200:
                return httpx.Response(status, json={"message": "session rejected"})
            return httpx.Response(200, json={"token": f"token-{len(self.session_calls)}"})

        if request.url.path.startswith("/server/balances/"):
            if self.balance_error is not None:
                raise self.balance_error
            endpoint = request.url.path.rsplit("/", 1)[-1]
            self.balance_calls.append(
                {"endpoint": endpoint, "token": request.headers.get("x-auth-token"), "headers": request.headers, "json": body}
            )
            status = self.balance_statuses.popleft() if self.balance_statuses else 200
            if status != 200:
                return httpx.Response(status, json={"message": "balance rejected"})
            return httpx.Response(200, json={"amount": body["amount"], "currency_id": body["currency_id"]})

        return httpx.Response(404, json={"message": "not found"})


def sign(payload, secret=HMAC_SECRET):
    return compute_signature(payload, secret)


def settlement_body(wallet_id="w1", amount=100, round_id="r1", timestamp=None, secret=HMAC_SECRET):
    payload = {
        "wallet_id": wallet_id,
        "amount": amount,
        "round_id": round_id,
        "timestamp": int(time.time()) if timestamp is None else timestamp,
    }
    payload["signature"] = sign(payload, secret)
    return payload


@pytest.fixture()
def settings():
    return Settings(
        _env_file=None,
        server_api_key="server-key",
        game_version="1.2.3.4",
        game_id="42",
        currency_id=CURRENCY_ID,
        hmac_secret=HMAC_SECRET,
        lootlocker={"base_url": "https://lootlocker.test"},
    )


@pytest.fixture()
def lootlocker():
    return FakeLootLocker()


@pytest.fixture()
def client(settings, lootlocker):
    application = create_app(settings, transport=lootlocker.transport)
    with TestClient(application) as test_client:
        yield test_client
