"""Profile commands."""

import asyncio
import sys

import cyclopts

from ytauth.cli.console import get_console
from ytauth.config import Config
from ytauth.domain.auth.model.profile import Profile
from ytauth.domain.shared.error import ProfileError, ProfileFetchError
from ytauth.infrastructure.auth.factory import build_youtube_provider
from ytauth.infrastructure.auth.youtube import map_profile_fields
from ytauth.infrastructure.http.client import create_http_client
from ytauth.infrastructure.http.transport import HttpxOAuth2Transport

app = cyclopts.App(name="profile", help="Fetch the YouTube profile for an access token")


async def _fetch(config: Config, access_token: str) -> Profile:
    async with create_http_client(config.http) as client:
        provider = build_youtube_provider(config.youtube, HttpxOAuth2Transport(client))
        return await provider.fetch_profile(access_token)


@app.default
def profile(access_token: str, /, *, raw: bool = False) -> None:
    """Fetch and print the normalized profile.

    Args:
        access_token: OAuth 2.0 access token with a YouTube scope.
        raw: Include the raw and parsed response body.
    """
    console = get_console()
    config = Config()

    try:
        result = asyncio.run(_fetch(config, access_token))
    except ProfileFetchError as e:
        console.error(f"Could not fetch profile: {e.cause}", hint="Is the access token still valid?")
        sys.exit(1)
    except ProfileError as e:
        console.error(f"Unexpected profile response: {e.message}")
        sys.exit(1)

    data = result.to_dict()
    if not raw:
        data.pop("_raw")
        data.pop("_json")
    if result.is_empty:
        console.info("No YouTube channel found for this account")
    console.json(data)


def fields(names: list[str], /) -> None:
    """Print the provider field names for logical profile fields.

    Args:
        names: Logical names: id, username, displayName, name.
    """
    get_console().plain(",".join(map_profile_fields(names)))
