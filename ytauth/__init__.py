"""YouTube sign-in over Google's OAuth 2.0 endpoint."""
