"""Data models for Pavlok API requests and responses."""

from pypavlok.models._base import PavlokBaseModel
from pypavlok.models.stimulus import StimuliResponse, Stimulus, StimulusRequest

__all__ = [
    "PavlokBaseModel",
    "StimuliResponse",
    "Stimulus",
    "StimulusRequest",
]
