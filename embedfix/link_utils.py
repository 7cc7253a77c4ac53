"""Utilities for detecting Twitter/X status links and rewriting them to mirror domains."""

from __future__ import annotations

import re

from .models.links import MIRROR_DOMAINS, StatusLink

# Cheap presence check used before looking at previews.
_STATUS_URL_RE = re.compile(r"https?://(?:www\.)?(?:twitter\.com|x\.com)/[a-zA-Z0-9_]+/status/[0-9]+")

# Candidate spans for rewriting, including an optional surrounding <...> escape.
_REWRITE_RE = re.compile(
    r"(<)?https?://(www\.)?(twitter\.com|x\.com)/([^/]+)/status/([0-9]+)(\?[^\s<>]*)?([^<\s]*)>?"
)

_PROTOCOLS = ("http://", "https://")


def contains_status_link(text: str | None) -> bool:
    """Return True if the text contains at least one Twitter/X status link."""
    if not text:
        return False
    return _STATUS_URL_RE.search(text) is not None


def _is_escaped(span: str) -> bool:
    return span.startswith("<") and span.endswith(">")


def find_status_links(text: str | None) -> list[StatusLink]:
    """Return every status link candidate in text, in order of appearance."""
    if not text:
        return []
    links: list[StatusLink] = []
    for match in _REWRITE_RE.finditer(text):
        span = match.group(0)
        links.append(
            StatusLink(
                url=span,
                domain=match.group(3),
                handle=match.group(4),
                status_id=match.group(5),
                escaped=_is_escaped(span),
                start=match.start(),
                end=match.end(),
            )
        )
    return links


def rewrite_status_link(link: str) -> str:
    """Rewrite a single status link to its mirror domain.

    Query parameters are dropped, ``www.`` is stripped and the protocol is
    always ``https``. Links on unknown domains come back without their
    protocol or query string but otherwise untouched.
    """
    link = link.split("?", 1)[0]

    for protocol in _PROTOCOLS:
        if link.startswith(protocol):
            link = link[len(protocol) :]
            break
    link = link.removeprefix("www.")

    for domain, mirror in MIRROR_DOMAINS.items():
        if link.startswith(domain):
            return f"https://{mirror}{link[len(domain) :]}"
    return link


def _replace_match(match: re.Match[str]) -> str:
    span = match.group(0)
    if _is_escaped(span):
        return span
    return rewrite_status_link(span)


def rewrite_status_links(text: str | None) -> str:
    """Replace every non-escaped status link in text with its mirror link.

    Links wrapped in ``<...>`` are left exactly as written. Everything else in
    the text, whitespace included, is preserved.
    """
    if not text:
        return text or ""
    return _REWRITE_RE.sub(_replace_match, text)
