from __future__ import annotations

import json
from typing import Any
from urllib.parse import parse_qsl, urlsplit

import pytest
import requests
from requests.adapters import BaseAdapter

from pypavlok.blocking import PavlokClient
from pypavlok.exceptions import PavlokOutOfBoundsError, PavlokTransportError

_OK_PAYLOAD = {"success": True, "id": "abc123"}


class FakeAdapter(BaseAdapter):
    """Answers every request locally and records what went over the wire."""

    def __init__(self, body: bytes | None = None, *, status: int = 200, error: Exception | None = None) -> None:
        super().__init__()
        self.body = json.dumps(_OK_PAYLOAD).encode() if body is None else body
        self.status = status
        self.error = error
        self.requests: list[requests.PreparedRequest] = []

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        response = requests.Response()
        response.status_code = self.status
        response._content = self.body
        response.encoding = "utf-8"
        response.url = request.url or ""
        response.request = request
        return response

    def close(self) -> None:
        return None


def _client(adapter: FakeAdapter, token: str = "token-1") -> PavlokClient:
    session = requests.Session()
    session.mount("https://", adapter)
    return PavlokClient(token, session=session)


def test_shock_returns_parsed_response() -> None:
    adapter = FakeAdapter()
    response = _client(adapter).shock(5, "because")

    assert response.success is True
    assert response.id == "abc123"

    sent = adapter.requests[0]
    assert sent.method == "POST"
    assert sent.body is None
    parts = urlsplit(sent.url)
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://app.pavlok.com/api/v1/shock/5"
    assert parse_qsl(parts.query, keep_blank_values=True) == [("access_token", "token-1"), ("reason", "because")]


@pytest.mark.parametrize(
    ("method", "intensity", "path"),
    [
        ("shock", 255, "/api/v1/shock/255"),
        ("beep", 1, "/api/v1/beep/1"),
        ("vibrate", 40, "/api/v1/vibration/40"),
        ("led", 4, "/api/v1/led/4"),
    ],
)
def test_each_command_hits_its_endpoint(method: str, intensity: int, path: str) -> None:
    adapter = FakeAdapter()
    getattr(_client(adapter), method)(intensity, "x")
    assert urlsplit(adapter.requests[0].url).path == path


def test_special_characters_round_trip_through_query() -> None:
    adapter = FakeAdapter()
    token = "tok&en=1 2+3"
    reason = "late & lazy, 100% ?"

    _client(adapter, token=token).vibrate(10, reason)

    query = dict(parse_qsl(urlsplit(adapter.requests[0].url).query, keep_blank_values=True))
    assert query == {"access_token": token, "reason": reason}


def test_empty_reason_is_still_sent() -> None:
    adapter = FakeAdapter()
    _client(adapter).beep(2)
    query = parse_qsl(urlsplit(adapter.requests[0].url).query, keep_blank_values=True)
    assert ("reason", "") in query


@pytest.mark.parametrize(
    ("method", "intensity"),
    [("shock", 0), ("vibrate", 0), ("beep", 0), ("beep", 5), ("led", 0), ("led", 5)],
)
def test_out_of_bounds_is_rejected_before_sending(method: str, intensity: int) -> None:
    adapter = FakeAdapter()
    with pytest.raises(PavlokOutOfBoundsError):
        getattr(_client(adapter), method)(intensity, "x")
    assert adapter.requests == []


def test_malformed_json_shape_is_transport_error() -> None:
    adapter = FakeAdapter(json.dumps({"bad": 1}).encode())
    with pytest.raises(PavlokTransportError) as exc_info:
        _client(adapter).beep(3, "x")
    assert exc_info.value.cause is not None
    assert str(exc_info.value)


def test_empty_body_is_transport_error() -> None:
    adapter = FakeAdapter(b"", status=204)
    with pytest.raises(PavlokTransportError) as exc_info:
        _client(adapter).led(1, "x")
    assert exc_info.value.status_code == 204


def test_connection_refused_is_transport_error() -> None:
    adapter = FakeAdapter(error=requests.ConnectionError("Connection refused"))
    with pytest.raises(PavlokTransportError) as exc_info:
        _client(adapter).shock(1, "x")
    assert isinstance(exc_info.value.cause, requests.ConnectionError)
    assert str(exc_info.value) == "Connection refused"


def test_context_manager_closes_owned_session() -> None:
    closed: list[bool] = []
    with PavlokClient("token") as client:
        client._http_session.close = lambda: closed.append(True)  # type: ignore[method-assign, union-attr]
    assert closed == [True]


def test_context_manager_leaves_external_session_open() -> None:
    session = requests.Session()
    closed: list[bool] = []
    session.close = lambda: closed.append(True)  # type: ignore[method-assign]
    with PavlokClient("token", session=session):
        pass
    assert closed == []
