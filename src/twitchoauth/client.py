# Token Service Client - issue, validate and revoke Twitch OAuth2 tokens.
# Created: 2026-10-18
#
# Every operation is one request/response round trip against the fixed
# id.twitch.tv authorization server. Nothing is cached, retried or refreshed.

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from twitchoauth.errors import DecodeError, RemoteError, RequestError
from twitchoauth.models import AppAccessToken, ErrorBody, ValidatedToken

logger = logging.getLogger(__name__)

_OAUTH_BASE = "https://id.twitch.tv/oauth2"
TOKEN_URL = f"{_OAUTH_BASE}/token"
VALIDATE_URL = f"{_OAUTH_BASE}/validate"
REVOKE_URL = f"{_OAUTH_BASE}/revoke"

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def _error_message(body: str) -> str | None:
    """Pull ``message`` out of a Twitch error body, if it has one."""
    try:
        return ErrorBody.model_validate_json(body).message
    except ValidationError:
        return None


class TokenServiceClient:
    """Async client for the Twitch OAuth2 token endpoints.

    Pass an ``httpx.AsyncClient`` to reuse its connection pool; the caller
    then owns its lifecycle. Without one, each call opens and closes its own
    client. No timeout is applied here: wrap calls in ``asyncio.wait_for``
    or configure one on the client you pass in.
    """

    def __init__(self, http_client: httpx.AsyncClient | None = None):
        self._http = http_client

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http is not None:
            yield self._http
            return
        async with httpx.AsyncClient(timeout=None) as client:
            yield client

    async def _send(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        logger.debug("%s %s", method, url)
        try:
            async with self._client() as client:
                return await client.request(method, url, params=params, headers=headers)
        except (httpx.RequestError, UnicodeEncodeError) as e:
            # UnicodeEncodeError: a header value httpx cannot encode as ASCII.
            logger.warning("%s %s failed: %s", method, url, e)
            raise RequestError(f"{method} {url} failed: {e}") from e

    @staticmethod
    def _decode(response: httpx.Response, model: type[_ModelT]) -> _ModelT:
        body = response.text
        if not response.is_success:
            message = _error_message(body)
            logger.warning(
                "Authorization server rejected request: HTTP %s %s",
                response.status_code,
                message or "",
            )
            raise RemoteError(response.status_code, body, message)
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(response.status_code, body, str(e)) from e

    async def _request_token(self, params: dict[str, str]) -> AppAccessToken:
        resp = await self._send("POST", TOKEN_URL, params=params)
        token = self._decode(resp, AppAccessToken)
        logger.info(
            "Obtained app access token for %s (expires in %ss)",
            params["client_id"],
            token.expires_in,
        )
        return token

    async def get_app_access_token(self, client_id: str, client_secret: str) -> AppAccessToken:
        """Request an app access token with the client-credentials grant.

        Args:
            client_id: Application client ID.
            client_secret: Application client secret.

        Returns:
            The decoded AppAccessToken.

        Raises:
            RequestError: The request could not be sent.
            RemoteError: The server answered with a non-2xx status.
            DecodeError: The body is not a token response.
        """
        return await self._request_token(
            {
                "grant_type": "client_credentials",
                "client_id": client_id,
                "client_secret": client_secret,
            }
        )

    async def get_app_access_token_with_scopes(
        self, client_id: str, client_secret: str, scopes: list[str]
    ) -> AppAccessToken:
        """Like get_app_access_token, but also requests ``scopes``.

        Scopes are sent space-separated in one ``scope`` parameter, in the
        given order. An empty list still sends ``scope=``.
        """
        return await self._request_token(
            {
                "grant_type": "client_credentials",
                "client_id": client_id,
                "client_secret": client_secret,
                "scope": " ".join(scopes),
            }
        )

    async def validate_token(self, access_token: str) -> ValidatedToken:
        """Ask the server who a token belongs to and what it may do.

        Raises:
            RequestError: The request could not be sent.
            RemoteError: The token was rejected (usually HTTP 401).
            DecodeError: The body is not a validation response.
        """
        resp = await self._send(
            "GET",
            VALIDATE_URL,
            headers={"Authorization": f"OAuth {access_token}"},
        )
        return self._decode(resp, ValidatedToken)

    async def revoke_token(self, access_token: str, client_id: str) -> int:
        """Revoke a token and return the server's HTTP status code.

        Any status is returned as-is; only a transport failure raises
        RequestError.
        """
        resp = await self._send(
            "POST",
            REVOKE_URL,
            params={"token": access_token, "client_id": client_id},
        )
        logger.info("Revoke for %s returned HTTP %s", client_id, resp.status_code)
        return resp.status_code


async def get_app_access_token(client_id: str, client_secret: str) -> AppAccessToken:
    """Shortcut for ``TokenServiceClient().get_app_access_token(...)``."""
    return await TokenServiceClient().get_app_access_token(client_id, client_secret)


async def get_app_access_token_with_scopes(
    client_id: str, client_secret: str, scopes: list[str]
) -> AppAccessToken:
    """Shortcut for ``TokenServiceClient().get_app_access_token_with_scopes(...)``."""
    return await TokenServiceClient().get_app_access_token_with_scopes(
        client_id, client_secret, scopes
    )


async def validate_token(access_token: str) -> ValidatedToken:
    """Shortcut for ``TokenServiceClient().validate_token(...)``."""
    return await TokenServiceClient().validate_token(access_token)


async def revoke_token(access_token: str, client_id: str) -> int:
    """Shortcut for ``TokenServiceClient().revoke_token(...)``."""
    return await TokenServiceClient().revoke_token(access_token, client_id)
