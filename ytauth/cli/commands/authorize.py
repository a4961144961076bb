"""Authorization URL command."""

import sys

import cyclopts

from ytauth.cli.console import get_console
from ytauth.config import Config
from ytauth.domain.auth.model.value import AuthorizationOptions
from ytauth.domain.shared.error import ConfigurationError
from ytauth.infrastructure.auth.factory import build_oauth2_service
from ytauth.infrastructure.http.client import create_http_client

app = cyclopts.App(name="authorize-url", help="Print the Google authorization URL")


@app.default
def authorize_url(
    *,
    state: str | None = None,
    redirect_uri: str | None = None,
    access_type: str | None = None,
    approval_prompt: str | None = None,
    prompt: str | None = None,
    login_hint: str | None = None,
    user_id: str | None = None,
    hosted_domain: str | None = None,
    hd: str | None = None,
    display: str | None = None,
    request_visible_actions: str | None = None,
    openid_realm: str | None = None,
) -> None:
    """Print the URL to send the user to for YouTube sign-in.

    Args:
        state: Opaque value echoed back to the callback.
        redirect_uri: Callback URL. Defaults to youtube.callback_url.
        access_type: 'online' or 'offline' (offline also returns a refresh token).
        approval_prompt: 'force' or 'auto'.
        prompt: e.g. 'consent' or 'select_account'.
        login_hint: Email address or Google account ID to preselect.
        user_id: Same as login_hint.
        hosted_domain: Restrict sign-in to a Google Workspace domain.
        hd: Short form of hosted_domain; hosted_domain wins if both are given.
        display: 'page', 'popup', 'touch' or 'wap'.
        request_visible_actions: Space separated app activity types.
        openid_realm: OpenID 2.0 realm, sent as openid.realm.
    """
    console = get_console()
    config = Config()
    options = AuthorizationOptions(
        access_type=access_type,
        approval_prompt=approval_prompt,
        prompt=prompt,
        login_hint=login_hint,
        user_id=user_id,
        hosted_domain=hosted_domain,
        hd=hd,
        display=display,
        request_visible_actions=request_visible_actions,
        openid_realm=openid_realm,
    )

    try:
        # No request is sent, the client is never opened
        service = build_oauth2_service(config, create_http_client(config.http))
        url = service.get_authorization_url(state=state, redirect_uri=redirect_uri, options=options)
    except ConfigurationError as e:
        console.error(
            e.message,
            hint="Configure it via YTAUTH_YOUTUBE__* env vars or YTAUTH_CONFIG_FILE",
        )
        sys.exit(1)

    console.plain(url)
