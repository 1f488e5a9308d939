"""Stimulus endpoint helpers shared by the async and blocking clients.

Endpoint:
  - POST /api/v1/{stimulus}/{intensity}?access_token=...&reason=...

Both clients go through the same three steps: check the intensity,
build the request, parse the decoded body. Only the network call in
between differs.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from pypavlok._constants import API_PREFIX, BASE_URL
from pypavlok.exceptions import PavlokOutOfBoundsError, PavlokTransportError
from pypavlok.models.stimulus import StimuliResponse, Stimulus, StimulusRequest

_logger = logging.getLogger(__name__)


def build_url(stimulus: Stimulus | str, intensity: int) -> str:
    """Return the endpoint URL for *stimulus* at *intensity*."""
    return f"{BASE_URL}{API_PREFIX}/{Stimulus(stimulus).value}/{int(intensity)}"


def check_intensity(stimulus: Stimulus | str, intensity: int) -> None:
    """Reject intensities the API does not accept for *stimulus*.

    Raises
    ------
    TypeError
        If *intensity* is not an ``int`` (``bool`` is refused too).
    PavlokOutOfBoundsError
        If *intensity* is outside the stimulus' range.
    """
    stimulus = Stimulus(stimulus)
    if isinstance(intensity, bool) or not isinstance(intensity, int):
        raise TypeError(f"intensity must be an int, got {type(intensity).__name__}")
    low, high = stimulus.intensity_range
    if not low <= intensity <= high:
        raise PavlokOutOfBoundsError(command=stimulus.value, intensity=intensity)


def build_stimulus_request(
    stimulus: Stimulus | str,
    intensity: int,
    access_token: str,
    reason: str = "",
) -> StimulusRequest:
    """Build the request for one stimulus.

    The token and reason are carried unmodified as query parameters;
    percent-encoding is left to the HTTP library.
    """
    stimulus = Stimulus(stimulus)
    return StimulusRequest(
        stimulus=stimulus,
        intensity=intensity,
        url=build_url(stimulus, intensity),
        params=(("access_token", access_token), ("reason", reason)),
    )


def prepare_stimulus(
    stimulus: Stimulus | str,
    intensity: int,
    access_token: str,
    reason: str = "",
) -> StimulusRequest:
    """Validate *intensity* then build the request."""
    check_intensity(stimulus, intensity)
    return build_stimulus_request(stimulus, intensity, access_token, reason)


def parse_stimulus_response(
    payload: Any,
    *,
    url: str = "",
    status_code: int | None = None,
) -> StimuliResponse:
    """Validate a decoded JSON body into a :class:`StimuliResponse`."""
    try:
        response = StimuliResponse.model_validate(payload)
    except ValidationError as exc:
        raise PavlokTransportError(exc, status_code=status_code, url=url) from exc
    _logger.debug("Stimulus %s acknowledged: success=%s", response.id, response.success)
    return response
