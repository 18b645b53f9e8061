"""Pydantic data models shared by the request pipeline."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Credentials(BaseModel):
    """API key and secret used to sign requests. Either may be unset."""

    model_config = ConfigDict(frozen=True)

    key: Optional[str] = None
    secret: Optional[str] = None

    @property
    def complete(self) -> bool:
        return bool(self.key) and bool(self.secret)


class RawResponse(BaseModel):
    """Status, headers and body of an HTTP response, before classification."""

    status_code: int
    headers: dict[str, str] = Field(default_factory=dict)
    body: bytes = b""

    @field_validator("headers", mode="before")
    @classmethod
    def _lower_header_names(cls, value: Any) -> dict[str, str]:
        return {str(k).lower(): str(v) for k, v in dict(value or {}).items()}
