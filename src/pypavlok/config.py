"""Client configuration for pypavlok."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pypavlok.exceptions import PavlokConfigError

ACCESS_TOKEN_ENV = "PAVLOK_ACCESS_TOKEN"


@dataclasses.dataclass(frozen=True)
class PavlokConfig:
    """Client configuration.

    Parameters
    ----------
    access_token : str
        Pavlok API access token. Sent unmodified as the ``access_token``
        query parameter of every request.
    """

    access_token: str

    def __repr__(self) -> str:
        return "PavlokConfig(access_token=<redacted>)"

    @classmethod
    def from_env(cls, **overrides: Any) -> PavlokConfig:
        """Create configuration from environment variables.

        Reads ``PAVLOK_ACCESS_TOKEN``. Explicit keyword arguments override
        environment values.

        Raises
        ------
        PavlokConfigError
            If no access token is available.
        """
        config_kwargs: dict[str, Any] = {}
        token = os.environ.get(ACCESS_TOKEN_ENV)
        if token is not None:
            config_kwargs["access_token"] = token

        config_kwargs.update(overrides)

        access_token = config_kwargs.get("access_token")
        if not isinstance(access_token, str) or not access_token.strip():
            raise PavlokConfigError(f"No access token (set {ACCESS_TOKEN_ENV} or pass access_token)")

        return cls(**config_kwargs)
