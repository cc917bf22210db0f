from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.luxestay.repos.mock_store import MockStore, get_store, get_today
from app.main import create_app
from luxestay_control.app.modules import Clients
from luxestay_control.clients.luxestay_sdk import HttpClient, SDKConfig

TODAY = date(2024, 1, 16)


@pytest.fixture()
def store():
    return MockStore.seeded()


@pytest.fixture()
def client(store):
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture()
def people():
    return [
        {"name": "Bob", "age": 30},
        {"name": "Ann", "age": None},
        {"name": "cara", "age": 25},
    ]


@pytest.fixture()
def api_clients(client):
    def transport(method, url, **kwargs):
        kwargs.pop("verify", None)
        kwargs.pop("timeout", None)
        return client.request(method, url, **kwargs)

    http_client = HttpClient(SDKConfig(base_url="http://testserver", retry_backoff_ms=0), transport=transport)
    return Clients.from_http(http_client)
