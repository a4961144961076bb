"""Normalized user profile."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Profile:
    """Identity returned by a provider after a successful profile fetch.

    ``id`` and ``display_name`` are only set when the provider response
    contained at least one item. ``raw`` is always the exact response body
    and ``json`` its parsed form.
    """

    provider: str
    raw: str
    json: Any
    id: str | None = None
    display_name: str | None = None

    @property
    def is_empty(self) -> bool:
        """True when the provider returned no account item."""
        return self.id is None and self.display_name is None

    def to_dict(self) -> dict[str, Any]:
        """Render the normalized profile shape consumed by callers."""
        data: dict[str, Any] = {"provider": self.provider}
        if self.id is not None:
            data["id"] = self.id
        if self.display_name is not None:
            data["displayName"] = self.display_name
        data["_raw"] = self.raw
        data["_json"] = self.json
        return data
