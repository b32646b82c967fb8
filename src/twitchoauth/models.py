# Token models - typed views of the Twitch OAuth2 JSON responses.
# Created: 2026-10-18

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


def _mask(secret: str) -> str:
    return f"***{secret[-4:]}" if len(secret) > 4 else "***"


class _TokenModel(BaseModel):
    """Strict, immutable base for decoded responses.

    Unknown keys are ignored. Required keys must be present with the
    right JSON type. Validation errors never echo the input, which may
    hold a bearer token.
    """

    model_config = ConfigDict(
        frozen=True, strict=True, extra="ignore", hide_input_in_errors=True
    )

    def to_json(self) -> str:
        return self.model_dump_json()


class AppAccessToken(_TokenModel):
    """App access token issued by the client-credentials grant."""

    access_token: str
    expires_in: int = Field(ge=0)
    scope: list[str] | None = None
    token_type: str

    def __str__(self) -> str:
        return (
            f"access_token: {_mask(self.access_token)}\n"
            f"expires_in: {self.expires_in}\n"
            f"scope: {self.scope}\n"
            f"token_type: {self.token_type}"
        )


class ValidatedToken(_TokenModel):
    """Token metadata returned by the validate endpoint.

    ``login`` and ``user_id`` are None for app access tokens.
    """

    client_id: str
    login: str | None = None
    user_id: str | None = None
    scopes: list[str]

    def __str__(self) -> str:
        return (
            f"client_id: {self.client_id}\n"
            f"login: {self.login}\n"
            f"user_id: {self.user_id}\n"
            f"scopes: {self.scopes}"
        )


class ErrorBody(BaseModel):
    """Error payload Twitch sends with non-2xx responses."""

    status: int | None = None
    message: str | None = None
