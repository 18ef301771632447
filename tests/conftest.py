import httpx
import pytest

import model_catalog.discovery as discovery_mod
from model_catalog.config import PROVIDER_CATALOGUE


@pytest.fixture(autouse=True)
def clean_provider_env(monkeypatch):
    """Remove every provider credential and base-URL override."""
    for name, cfg in PROVIDER_CATALOGUE.items():
        monkeypatch.delenv(cfg["api_key_env"], raising=False)
        monkeypatch.delenv(f"{name.upper()}_BASE_URL", raising=False)
    discovery_mod.reset_default_catalog()
    yield
    discovery_mod.reset_default_catalog()


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler):
        self.requests = []

        def _record(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def make_transport():
    def _make(payload=None, status_code=200, exc=None, content=None):
        def handler(request):
            if exc is not None:
                raise exc
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=payload)

        return RecordingTransport(handler)

    return _make
