"""Fixtures compartidos: transporte en memoria y configuración de cliente."""

from typing import Any, Dict, List, Optional

import pytest

from woocommerce_api.core.client_config import ClientConfig
from woocommerce_api.core.config import Settings
from woocommerce_api.core.credential_store import InMemoryCredentialStore
from woocommerce_api.db.woo_clients.transport import TransportResponse


class RecordingTransport:
    """
    Transporte en memoria que registra cada llamada y devuelve respuestas
    preparadas en orden. Una excepción en la cola se lanza en lugar de responder.
    """

    def __init__(self, responses: Optional[List[Any]] = None):
        self.responses: List[Any] = list(responses or [])
        self.calls: List[Dict[str, Any]] = []

    def queue(self, response: Any) -> None:
        self.responses.append(response)

    def queue_json(self, data: Any, status: int = 200) -> None:
        self.responses.append(TransportResponse.from_json(status, data))

    async def request(self, method, path, *, params=None, json=None):
        self.calls.append({"method": method, "path": path, "params": params, "json": json})
        if not self.responses:
            raise AssertionError(f"Unexpected call {method} {path}")
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response

    @property
    def last_call(self) -> Dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def credential_store():
    return InMemoryCredentialStore()


@pytest.fixture
def config(credential_store):
    return ClientConfig(use_faker=False, credential_store=credential_store)


@pytest.fixture
def faker_config(credential_store):
    return ClientConfig(use_faker=True, credential_store=credential_store)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        WOOCOMMERCE_BASE_URL="shop.example.com/",
        WOOCOMMERCE_CONSUMER_KEY="ck_test",
        WOOCOMMERCE_CONSUMER_SECRET="cs_test",
    )
