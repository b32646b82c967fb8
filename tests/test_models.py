# Tests for twitchoauth.models
# Created: 2026-10-18

import json

import pytest
from pydantic import ValidationError

from twitchoauth.models import AppAccessToken, ErrorBody, ValidatedToken

# ---------------------------------------------------------------------------
# AppAccessToken
# ---------------------------------------------------------------------------


class TestAppAccessToken:
    def test_decode_without_scope(self):
        token = AppAccessToken.model_validate_json(
            '{"access_token":"x","expires_in":3600,"scope":null,"token_type":"bearer"}'
        )
        assert token.access_token == "x"
        assert token.expires_in == 3600
        assert token.scope is None
        assert token.token_type == "bearer"

    def test_decode_scope_absent(self):
        token = AppAccessToken.model_validate_json(
            '{"access_token":"x","expires_in":10,"token_type":"bearer"}'
        )
        assert token.scope is None

    def test_decode_keeps_scope_order(self):
        token = AppAccessToken.model_validate_json(
            json.dumps(
                {
                    "access_token": "x",
                    "expires_in": 10,
                    "scope": ["user:read:email", "chat:read"],
                    "token_type": "bearer",
                }
            )
        )
        assert token.scope == ["user:read:email", "chat:read"]

    def test_missing_access_token_fails(self):
        with pytest.raises(ValidationError):
            AppAccessToken.model_validate_json('{"expires_in":3600,"token_type":"bearer"}')

    def test_string_expires_in_fails(self):
        with pytest.raises(ValidationError):
            AppAccessToken.model_validate_json(
                '{"access_token":"x","expires_in":"3600","token_type":"bearer"}'
            )

    def test_negative_expires_in_fails(self):
        with pytest.raises(ValidationError):
            AppAccessToken.model_validate_json(
                '{"access_token":"x","expires_in":-1,"token_type":"bearer"}'
            )

    def test_extra_keys_ignored(self):
        token = AppAccessToken.model_validate_json(
            '{"access_token":"x","expires_in":1,"token_type":"bearer","refresh_token":"r"}'
        )
        assert not hasattr(token, "refresh_token")

    def test_frozen(self):
        token = AppAccessToken(access_token="x", expires_in=1, token_type="bearer")
        with pytest.raises(ValidationError):
            token.access_token = "y"

    def test_json_round_trip(self):
        token = AppAccessToken(
            access_token="abc", expires_in=60, scope=["chat:read"], token_type="bearer"
        )
        assert AppAccessToken.model_validate_json(token.to_json()) == token

    def test_str_masks_token(self):
        token = AppAccessToken(
            access_token="supersecrettoken1234", expires_in=60, token_type="bearer"
        )
        text = str(token)
        assert "supersecrettoken1234" not in text
        assert "***1234" in text
        assert "expires_in: 60" in text
        assert "scope: None" in text
        assert "token_type: bearer" in text


# ---------------------------------------------------------------------------
# ValidatedToken
# ---------------------------------------------------------------------------


class TestValidatedToken:
    def test_decode_user_token(self):
        token = ValidatedToken.model_validate_json(
            json.dumps(
                {
                    "client_id": "wbmytr93xzw8zbg0p1izqyzzc5mbiz",
                    "login": "twitchdev",
                    "scopes": ["channel:read:subscriptions"],
                    "user_id": "141981764",
                    "expires_in": 5520838,
                }
            )
        )
        assert token.client_id == "wbmytr93xzw8zbg0p1izqyzzc5mbiz"
        assert token.login == "twitchdev"
        assert token.user_id == "141981764"
        assert token.scopes == ["channel:read:subscriptions"]

    def test_decode_app_token(self):
        token = ValidatedToken.model_validate_json(
            '{"client_id":"cid","login":null,"user_id":null,"scopes":[]}'
        )
        assert token.login is None
        assert token.user_id is None
        assert token.scopes == []

    def test_missing_scopes_fails(self):
        with pytest.raises(ValidationError):
            ValidatedToken.model_validate_json('{"client_id":"cid"}')

    def test_numeric_user_id_fails(self):
        with pytest.raises(ValidationError):
            ValidatedToken.model_validate_json(
                '{"client_id":"cid","user_id":141981764,"scopes":[]}'
            )

    def test_str_labels(self):
        token = ValidatedToken(client_id="cid", login="dev", user_id="42", scopes=["a", "b"])
        lines = str(token).splitlines()
        assert lines == [
            "client_id: cid",
            "login: dev",
            "user_id: 42",
            "scopes: ['a', 'b']",
        ]

    def test_equality_by_value(self):
        a = ValidatedToken(client_id="cid", scopes=["x"])
        b = ValidatedToken(client_id="cid", scopes=["x"])
        assert a == b


class TestErrorBody:
    def test_twitch_error(self):
        body = ErrorBody.model_validate_json('{"status":401,"message":"invalid access token"}')
        assert body.status == 401
        assert body.message == "invalid access token"

    def test_fields_optional(self):
        assert ErrorBody.model_validate_json("{}").message is None
