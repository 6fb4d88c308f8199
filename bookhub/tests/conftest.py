"""Общие фикстуры: заглушка HTTP транспорта, хранилище, навигатор, клиент."""

import json
from urllib.parse import urlparse
from typing import Any, Dict, List, Optional, Tuple

import pytest
import requests
from requests.adapters import BaseAdapter

from bookhub.api_client import BookApiClient
from bookhub.core.session import SessionStore
from bookhub.core.storage import FileStorage
from bookhub.navigation import InMemoryNavigator

BASE_URL = "https://api.test"


class StubAdapter(BaseAdapter):
    """Транспорт requests, отвечающий заранее заданными ответами."""

    def __init__(self):
        super().__init__()
        self.routes: Dict[Tuple[str, str], Dict[str, Any]] = {}
        self.requests: List[requests.PreparedRequest] = []

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json_body: Any = None,
        text: Optional[str] = None,
        exc: Optional[Exception] = None,
    ) -> None:
        self.routes[(method, path)] = {"status": status, "json": json_body, "text": text, "exc": exc}

    def send(self, request, **kwargs):
        self.requests.append(request)
        path = urlparse(request.url).path
        route = self.routes.get((request.method, path))
        if route is None:
            raise AssertionError(f"Unexpected request {request.method} {request.url}")
        if route["exc"] is not None:
            raise route["exc"]

        response = requests.Response()
        response.status_code = route["status"]
        response.reason = "Stub"
        response.url = request.url
        response.request = request
        response.encoding = "utf-8"
        if route["json"] is not None:
            response._content = json.dumps(route["json"]).encode("utf-8")
            response.headers["Content-Type"] = "application/json"
        elif route["text"] is not None:
            response._content = route["text"].encode("utf-8")
        else:
            response._content = b""
        return response

    def close(self):
        pass

    @property
    def last_request(self) -> requests.PreparedRequest:
        return self.requests[-1]


@pytest.fixture
def storage(tmp_path):
    return FileStorage(tmp_path / "session.json")


@pytest.fixture
def navigator():
    return InMemoryNavigator(initial_path="/books")


@pytest.fixture
def session(storage, navigator):
    return SessionStore(storage, navigator=navigator)


@pytest.fixture
def transport():
    return StubAdapter()


@pytest.fixture
def client(session, navigator, transport):
    api = BookApiClient(session, base_url=BASE_URL, navigator=navigator)
    api.http.mount("https://", transport)
    yield api
    api.close()
