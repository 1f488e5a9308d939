"""pypavlok - Python client for the Pavlok stimulus API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pypavlok")
except PackageNotFoundError:
    __version__ = "0+local"
from pypavlok.blocking import PavlokClient as BlockingPavlokClient
from pypavlok.client import PavlokClient
from pypavlok.config import PavlokConfig
from pypavlok.exceptions import (
    PavlokConfigError,
    PavlokError,
    PavlokOutOfBoundsError,
    PavlokTransportError,
)
from pypavlok.models import StimuliResponse, Stimulus

__all__ = [
    "__version__",
    "BlockingPavlokClient",
    "PavlokClient",
    "PavlokConfig",
    "PavlokConfigError",
    "PavlokError",
    "PavlokOutOfBoundsError",
    "PavlokTransportError",
    "StimuliResponse",
    "Stimulus",
]
