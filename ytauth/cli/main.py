"""Main CLI application using Cyclopts."""

import cyclopts

from ytauth.cli.commands import authorize, profile
from ytauth.config import Config, configure_logging

app = cyclopts.App(
    name="ytauth",
    help="YouTube sign-in over Google OAuth 2.0",
)

app.command(authorize.app, name="authorize-url")
app.command(profile.app, name="profile")
app.command(profile.fields, name="fields")


def main() -> None:
    configure_logging(Config().logging)
    app()


if __name__ == "__main__":
    main()
