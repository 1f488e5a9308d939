"""High-level async client for the Pavlok stimulus API."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pypavlok._api.stimulus import parse_stimulus_response, prepare_stimulus
from pypavlok._transport import AiohttpTransport, Transport
from pypavlok.config import PavlokConfig
from pypavlok.models.stimulus import StimuliResponse, Stimulus

_logger = logging.getLogger(__name__)


class PavlokClient:
    """Async client for the Pavlok API.

    Usage::

        async with PavlokClient(token) as client:
            await client.beep(2, "stand up")

    The client can also be used without ``async with``; the HTTP session
    is then created on the first call and released by :meth:`close`.
    """

    def __init__(
        self,
        access_token: str,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._access_token = access_token
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport
        if self._transport is None and session is not None:
            self._transport = AiohttpTransport(session)

    @classmethod
    def from_env(cls, **overrides: Any) -> PavlokClient:
        """Build a client from ``PAVLOK_ACCESS_TOKEN``."""
        config = PavlokConfig.from_env(**overrides)
        return cls(config.access_token)

    @property
    def access_token(self) -> str:
        return self._access_token

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> PavlokClient:
        self._require_transport()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
            self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            # aiohttp sessions must be created inside a running loop.
            self._http_session = aiohttp.ClientSession()
            self._transport = AiohttpTransport(self._http_session)
        return self._transport

    # ------------------------------------------------------------------
    # Stimuli
    # ------------------------------------------------------------------

    async def send(self, stimulus: Stimulus | str, intensity: int, reason: str = "") -> StimuliResponse:
        """Send one stimulus and return the API confirmation.

        Raises
        ------
        PavlokOutOfBoundsError
            Intensity rejected locally; no request was sent.
        PavlokTransportError
            The request failed or the response was not the expected JSON.
        """
        request = prepare_stimulus(stimulus, intensity, self._access_token, reason)
        transport = self._require_transport()
        result = await transport.post(request.url, request.params)
        return parse_stimulus_response(result.payload, url=request.url, status_code=result.status)

    async def shock(self, intensity: int, reason: str = "") -> StimuliResponse:
        """Send a shock (intensity 1-255)."""
        return await self.send(Stimulus.SHOCK, intensity, reason)

    async def beep(self, intensity: int, reason: str = "") -> StimuliResponse:
        """Send a beep (pattern 1-4)."""
        return await self.send(Stimulus.BEEP, intensity, reason)

    async def vibrate(self, intensity: int, reason: str = "") -> StimuliResponse:
        """Send a vibration (intensity 1-255)."""
        return await self.send(Stimulus.VIBRATION, intensity, reason)

    async def led(self, intensity: int, reason: str = "") -> StimuliResponse:
        """Flash the LED (pattern 1-4)."""
        return await self.send(Stimulus.LED, intensity, reason)
