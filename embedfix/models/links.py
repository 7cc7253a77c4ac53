"""Pydantic models for status link detection."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

# Every recognized source domain maps to exactly one mirror domain.
MIRROR_DOMAINS: dict[str, str] = {
    "twitter.com": "fxtwitter.com",
    "x.com": "fixupx.com",
}


class StatusLink(BaseModel):
    """A status link found in message text."""

    url: str
    domain: Literal["twitter.com", "x.com"]
    handle: str
    status_id: str
    escaped: bool = False
    start: int = 0
    end: int = 0

    @property
    def mirror_domain(self) -> str:
        return MIRROR_DOMAINS[self.domain]

    @property
    def mirror_url(self) -> str:
        """Canonical mirror link, without query string or ``www.``."""
        return f"https://{self.mirror_domain}/{self.handle}/status/{self.status_id}"
