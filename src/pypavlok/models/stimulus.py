"""Stimulus kinds, request and response models."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict

from pypavlok._constants import INTENSITY_MAX, PATTERN_MAX, PATTERN_MIN
from pypavlok.models._base import PavlokBaseModel


class Stimulus(enum.StrEnum):
    """Actions the device can perform.

    The value is the path segment used by the API.
    """

    SHOCK = "shock"
    BEEP = "beep"
    VIBRATION = "vibration"
    LED = "led"

    @property
    def intensity_range(self) -> tuple[int, int]:
        """Inclusive ``(min, max)`` intensity accepted for this stimulus."""
        if self in (Stimulus.BEEP, Stimulus.LED):
            return PATTERN_MIN, PATTERN_MAX
        return 1, INTENSITY_MAX


class StimulusRequest(BaseModel):
    """A fully built request, ready to hand to a transport."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    stimulus: Stimulus
    intensity: int
    url: str
    params: tuple[tuple[str, str], ...]


class StimuliResponse(PavlokBaseModel):
    """Confirmation returned by the API for a delivered stimulus.

    Parameters
    ----------
    success : bool
        Whether the API accepted the stimulus.
    id : str
        Identifier of the stimulus event.
    """

    success: bool
    id: str
