"""Unit tests for YouTubeIdentityProvider."""

import json
from unittest.mock import AsyncMock

import pytest

from ytauth.config import YouTubeConfig
from ytauth.domain.auth.model.value import AuthorizationOptions, ProtectedResource
from ytauth.domain.shared.error import ProfileFetchError, ProfileParseError, TransportError
from ytauth.infrastructure.auth.youtube import (
    YouTubeIdentityProvider,
    map_profile_fields,
    parse_profile,
)
from ytauth.infrastructure.http.client import create_http_client
from ytauth.infrastructure.http.transport import HttpxOAuth2Transport

CHANNEL_BODY = '{"items":[{"id":"abc","snippet":{"title":"My Channel"}}]}'


def make_transport(body: str | None = None, error: Exception | None = None) -> AsyncMock:
    transport = AsyncMock()
    if error is not None:
        transport.get_protected_resource.side_effect = error
    else:
        transport.get_protected_resource.return_value = ProtectedResource(body=body, status_code=200)
    return transport


def make_provider(
    transport: AsyncMock | None = None, config: YouTubeConfig | None = None
) -> YouTubeIdentityProvider:
    return YouTubeIdentityProvider(config=config, transport=transport or make_transport(CHANNEL_BODY))


class TestProviderConfig:
    def test_defaults(self):
        provider = make_provider()

        assert provider.provider_name == "youtube"
        assert provider.authorization_url == "https://accounts.google.com/o/oauth2/auth"
        assert provider.token_url == "https://accounts.google.com/o/oauth2/token"
        assert provider.scope == ["https://www.googleapis.com/auth/youtube.readonly"]
        assert provider.profile_url == (
            "https://www.googleapis.com/youtube/v3/channels?part=snippet&mine=true"
        )

    def test_overrides(self):
        config = YouTubeConfig(
            authorization_url="https://auth.test/authorize",
            token_url="https://auth.test/token",
            scope=["a", "b"],
            profile_url="https://api.test/me",
        )
        provider = make_provider(config=config)

        assert provider.authorization_url == "https://auth.test/authorize"
        assert provider.token_url == "https://auth.test/token"
        assert provider.scope == ["a", "b"]
        assert provider.profile_url == "https://api.test/me"

    def test_malformed_url_is_accepted(self):
        provider = make_provider(config=YouTubeConfig(profile_url="not a url"))
        assert provider.profile_url == "not a url"

    def test_scope_is_a_copy(self):
        provider = make_provider()
        provider.scope.append("extra")
        assert provider.scope == ["https://www.googleapis.com/auth/youtube.readonly"]


class TestAuthorizationParams:
    def test_empty_options(self):
        provider = make_provider()

        assert provider.authorization_params(AuthorizationOptions()) == {}
        assert provider.authorization_params({}) == {}
        assert provider.authorization_params(None) == {}

    def test_all_options_renamed(self):
        provider = make_provider()
        options = AuthorizationOptions(
            access_type="offline",
            approval_prompt="force",
            prompt="consent",
            login_hint="user@example.com",
            user_id="1234",
            hosted_domain="example.com",
            display="popup",
            request_visible_actions="http://schema.org/AddAction",
            openid_realm="https://example.com",
        )

        assert provider.authorization_params(options) == {
            "access_type": "offline",
            "approval_prompt": "force",
            "prompt": "consent",
            "login_hint": "user@example.com",
            "user_id": "1234",
            "hd": "example.com",
            "display": "popup",
            "request_visible_actions": "http://schema.org/AddAction",
            "openid.realm": "https://example.com",
        }

    @pytest.mark.parametrize(
        ("key", "value", "param"),
        [
            ("accessType", "offline", "access_type"),
            ("approvalPrompt", "force", "approval_prompt"),
            ("prompt", "select_account", "prompt"),
            ("loginHint", "user@example.com", "login_hint"),
            ("userID", "42", "user_id"),
            ("hostedDomain", "example.com", "hd"),
            ("hd", "example.org", "hd"),
            ("display", "page", "display"),
            ("requestVisibleActions", "x", "request_visible_actions"),
            ("openIDRealm", "https://realm.test", "openid.realm"),
        ],
    )
    def test_single_option_from_mapping(self, key, value, param):
        provider = make_provider()
        assert provider.authorization_params({key: value}) == {param: value}

    def test_hosted_domain_wins_over_hd(self):
        provider = make_provider()

        params = provider.authorization_params({"hostedDomain": "first.test", "hd": "second.test"})

        assert params == {"hd": "first.test"}

    def test_hd_used_when_hosted_domain_empty(self):
        provider = make_provider()

        params = provider.authorization_params(AuthorizationOptions(hosted_domain="", hd="second.test"))

        assert params == {"hd": "second.test"}

    def test_unrecognized_and_falsy_options_ignored(self):
        provider = make_provider()

        params = provider.authorization_params(
            {"bogus": "value", "prompt": "", "accessType": None, "loginHint": "me"}
        )

        assert params == {"login_hint": "me"}

    def test_non_string_values_are_stringified(self):
        provider = make_provider()
        assert provider.authorization_params({"userID": 42}) == {"user_id": "42"}

    def test_booleans_are_lower_case(self):
        provider = make_provider()

        params = provider.authorization_params({"prompt": True, "display": False})

        assert params == {"prompt": "true"}


class TestMapProfileFields:
    def test_name_expands_in_place(self):
        assert map_profile_fields(["id", "name", "username"]) == [
            "id",
            "last_name",
            "first_name",
            "username",
        ]

    def test_display_name(self):
        assert map_profile_fields(["displayName"]) == ["name"]

    def test_unknown_dropped(self):
        assert map_profile_fields(["bogus"]) == []
        assert map_profile_fields(["bogus", "id"]) == ["id"]

    def test_empty(self):
        assert map_profile_fields([]) == []

    def test_provider_methods(self):
        provider = make_provider()

        assert provider.map_profile_fields(["name", "displayName"]) == [
            "last_name",
            "first_name",
            "name",
        ]
        assert provider.profile_fields_param(["id", "name"]) == "id,last_name,first_name"


class TestParseProfile:
    def test_first_item(self):
        body = (
            '{"items":[{"id":"abc","snippet":{"title":"My Channel"}},'
            '{"id":"def","snippet":{"title":"Other"}}]}'
        )

        profile = parse_profile(body)

        assert profile.id == "abc"
        assert profile.display_name == "My Channel"

    def test_missing_items(self):
        profile = parse_profile('{"kind":"youtube#channelListResponse"}')

        assert profile.provider == "youtube"
        assert profile.id is None
        assert profile.display_name is None
        assert profile.json == {"kind": "youtube#channelListResponse"}

    @pytest.mark.parametrize("body", ['{"items":[null]}', '{"items":[{}]}', '{"items":[""]}'])
    def test_empty_first_item(self, body):
        profile = parse_profile(body)

        assert profile.is_empty
        assert profile.raw == body
        assert profile.json == json.loads(body)

    def test_item_without_snippet(self):
        with pytest.raises(ProfileParseError) as exc_info:
            parse_profile('{"items":[{"id":"abc"}]}')

        assert isinstance(exc_info.value.cause, KeyError)

    @pytest.mark.parametrize("body", ["null", "[1, 2]", '{"items": "abc"}', ""])
    def test_unexpected_shapes(self, body):
        with pytest.raises(ProfileParseError):
            parse_profile(body)


class TestFetchProfile:
    @pytest.mark.asyncio
    async def test_channel_profile(self):
        transport = make_transport(CHANNEL_BODY)
        provider = make_provider(transport)

        profile = await provider.fetch_profile("token-123")

        assert profile.provider == "youtube"
        assert profile.id == "abc"
        assert profile.display_name == "My Channel"
        assert profile.raw == CHANNEL_BODY
        assert profile.json == json.loads(CHANNEL_BODY)
        transport.get_protected_resource.assert_awaited_once_with(
            "https://www.googleapis.com/youtube/v3/channels?part=snippet&mine=true",
            "token-123",
        )

    @pytest.mark.asyncio
    async def test_empty_items_is_not_an_error(self):
        provider = make_provider(make_transport('{"items":[]}'))

        profile = await provider.fetch_profile("token")

        assert profile.provider == "youtube"
        assert profile.id is None
        assert profile.display_name is None
        assert profile.is_empty
        assert profile.raw == '{"items":[]}'
        assert profile.json == {"items": []}
        assert profile.to_dict() == {
            "provider": "youtube",
            "_raw": '{"items":[]}',
            "_json": {"items": []},
        }

    @pytest.mark.asyncio
    async def test_transport_error_wrapped(self):
        error = TransportError("GET failed", status_code=401)
        provider = make_provider(make_transport(error=error))

        with pytest.raises(ProfileFetchError) as exc_info:
            await provider.fetch_profile("expired")

        assert exc_info.value.cause is error
        assert exc_info.value.__cause__ is error
        assert exc_info.value.message == "failed to fetch user profile"

    @pytest.mark.asyncio
    async def test_malformed_profile_url_is_a_fetch_error(self):
        async with create_http_client() as client:
            provider = YouTubeIdentityProvider(
                YouTubeConfig(profile_url="http://[::1"), HttpxOAuth2Transport(client)
            )
            with pytest.raises(ProfileFetchError) as exc_info:
                await provider.fetch_profile("tok")

        assert isinstance(exc_info.value.cause, TransportError)

    @pytest.mark.asyncio
    async def test_unparseable_body(self):
        provider = make_provider(make_transport("not json"))

        with pytest.raises(ProfileParseError) as exc_info:
            await provider.fetch_profile("token")

        assert isinstance(exc_info.value.cause, ValueError)

    @pytest.mark.asyncio
    async def test_configured_profile_url(self):
        transport = make_transport(CHANNEL_BODY)
        provider = make_provider(transport, YouTubeConfig(profile_url="https://api.test/me"))

        await provider.fetch_profile("token")

        transport.get_protected_resource.assert_awaited_once_with("https://api.test/me", "token")

    @pytest.mark.asyncio
    async def test_single_request_per_call(self):
        transport = make_transport(CHANNEL_BODY)
        provider = make_provider(transport)

        await provider.fetch_profile("a")
        await provider.fetch_profile("b")

        assert transport.get_protected_resource.await_count == 2
