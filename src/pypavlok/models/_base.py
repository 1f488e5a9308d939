"""Base model for Pavlok API payloads.

Response models inherit from :class:`PavlokBaseModel` which is frozen,
ignores fields it does not know and stashes the decoded payload in
``raw`` for forward compatibility.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PavlokBaseModel(BaseModel):
    """Base for Pavlok API response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        strict=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Original API response dict."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        """Keep a copy of the API dict unless ``raw`` was passed explicitly."""
        if not isinstance(values, dict) or "raw" in values:
            return values
        return {**values, "raw": dict(values)}
