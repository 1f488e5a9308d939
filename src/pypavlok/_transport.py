"""HTTP transports for the async and blocking clients."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

import aiohttp
import requests

from pypavlok._redact import redact_for_log
from pypavlok.exceptions import PavlokTransportError

_logger = logging.getLogger(__name__)

QueryParams = Sequence[tuple[str, str]]


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """Status code and decoded JSON body of one HTTP exchange."""

    status: int
    payload: Any


class Transport(Protocol):
    """Structural async transport interface used by :class:`pypavlok.client.PavlokClient`.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`AiohttpTransport`) concrete.
    """

    async def post(self, url: str, params: QueryParams) -> TransportResponse:
        ...


class BlockingTransport(Protocol):
    """Structural blocking transport interface used by :class:`pypavlok.blocking.PavlokClient`."""

    def post(self, url: str, params: QueryParams) -> TransportResponse:
        ...


def decode_json_body(body: bytes, *, url: str, status_code: int | None = None) -> Any:
    """JSON-decode a raw response body or raise :class:`PavlokTransportError`."""
    try:
        return json.loads(body)
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError both land here.
        raise PavlokTransportError(exc, status_code=status_code, url=url) from exc


class AiohttpTransport:
    """Non-blocking transport on top of a shared :class:`aiohttp.ClientSession`."""

    def __init__(self, http_session: aiohttp.ClientSession) -> None:
        self._http = http_session

    async def post(self, url: str, params: QueryParams) -> TransportResponse:
        """POST with query parameters only and return the decoded body."""
        _logger.debug("POST %s params=%s", url, redact_for_log(list(params)))

        try:
            async with self._http.post(url, params=list(params)) as resp:
                status = resp.status
                body = await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise PavlokTransportError(exc, url=url) from exc

        _logger.debug("HTTP %s from %s (%d bytes)", status, url, len(body))
        return TransportResponse(status=status, payload=decode_json_body(body, url=url, status_code=status))


class RequestsTransport:
    """Blocking transport on top of a shared :class:`requests.Session`."""

    def __init__(self, http_session: requests.Session) -> None:
        self._http = http_session

    def post(self, url: str, params: QueryParams) -> TransportResponse:
        """POST with query parameters only and return the decoded body."""
        _logger.debug("POST %s params=%s", url, redact_for_log(list(params)))

        try:
            resp = self._http.post(url, params=list(params))
        except requests.RequestException as exc:
            raise PavlokTransportError(exc, url=url) from exc

        _logger.debug("HTTP %s from %s (%d bytes)", resp.status_code, url, len(resp.content))
        return TransportResponse(
            status=resp.status_code,
            payload=decode_json_body(resp.content, url=url, status_code=resp.status_code),
        )
