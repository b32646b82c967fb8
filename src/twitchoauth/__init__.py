"""Async client for the Twitch OAuth2 token service."""

from twitchoauth.client import (
    TokenServiceClient,
    get_app_access_token,
    get_app_access_token_with_scopes,
    revoke_token,
    validate_token,
)
from twitchoauth.errors import DecodeError, RemoteError, RequestError, TokenServiceError
from twitchoauth.models import AppAccessToken, ValidatedToken

__all__ = [
    "AppAccessToken",
    "DecodeError",
    "RemoteError",
    "RequestError",
    "TokenServiceClient",
    "TokenServiceError",
    "ValidatedToken",
    "get_app_access_token",
    "get_app_access_token_with_scopes",
    "revoke_token",
    "validate_token",
]
