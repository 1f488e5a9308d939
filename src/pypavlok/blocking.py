"""Blocking client for the Pavlok stimulus API.

Same contract as :class:`pypavlok.client.PavlokClient` but every call
blocks the calling thread for the duration of the request.
"""

from __future__ import annotations

from typing import Any

import requests

from pypavlok._api.stimulus import parse_stimulus_response, prepare_stimulus
from pypavlok._transport import BlockingTransport, RequestsTransport
from pypavlok.config import PavlokConfig
from pypavlok.models.stimulus import StimuliResponse, Stimulus


class PavlokClient:
    """Blocking client for the Pavlok API.

    Usage::

        with PavlokClient(token) as client:
            client.vibrate(120, "posture")
    """

    def __init__(
        self,
        access_token: str,
        *,
        session: requests.Session | None = None,
        transport: BlockingTransport | None = None,
    ) -> None:
        self._access_token = access_token
        self._external_session = session is not None
        self._http_session: requests.Session | None = session if session is not None else requests.Session()
        self._transport: BlockingTransport = transport or RequestsTransport(self._http_session)

    @classmethod
    def from_env(cls, **overrides: Any) -> PavlokClient:
        """Build a client from ``PAVLOK_ACCESS_TOKEN``."""
        config = PavlokConfig.from_env(**overrides)
        return cls(config.access_token)

    @property
    def access_token(self) -> str:
        return self._access_token

    def __enter__(self) -> PavlokClient:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if not self._external_session and self._http_session is not None:
            self._http_session.close()

    def send(self, stimulus: Stimulus | str, intensity: int, reason: str = "") -> StimuliResponse:
        """Send one stimulus and return the API confirmation.

        Raises
        ------
        PavlokOutOfBoundsError
            Intensity rejected locally; no request was sent.
        PavlokTransportError
            The request failed or the response was not the expected JSON.
        """
        request = prepare_stimulus(stimulus, intensity, self._access_token, reason)
        result = self._transport.post(request.url, request.params)
        return parse_stimulus_response(result.payload, url=request.url, status_code=result.status)

    def shock(self, intensity: int, reason: str = "") -> StimuliResponse:
        """Send a shock (intensity 1-255)."""
        return self.send(Stimulus.SHOCK, intensity, reason)

    def beep(self, intensity: int, reason: str = "") -> StimuliResponse:
        """Send a beep (pattern 1-4)."""
        return self.send(Stimulus.BEEP, intensity, reason)

    def vibrate(self, intensity: int, reason: str = "") -> StimuliResponse:
        """Send a vibration (intensity 1-255)."""
        return self.send(Stimulus.VIBRATION, intensity, reason)

    def led(self, intensity: int, reason: str = "") -> StimuliResponse:
        """Flash the LED (pattern 1-4)."""
        return self.send(Stimulus.LED, intensity, reason)
