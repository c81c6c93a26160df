"""Best-effort title and description derived purely from a URL's shape."""
from __future__ import annotations

import re
from urllib.parse import urlsplit

from linkpreview.app.constants import (
    EXTERNAL_LINK_TITLE,
    FAVICON_SERVICE_URL,
    GENERIC_DESCRIPTION,
    LINK_TYPE,
)

_WORD_START = re.compile(r"\b\w")

_DESCRIPTIONS: dict[str, str] = {
    LINK_TYPE.REPOSITORY: "Source code repository with documentation and examples",
    LINK_TYPE.PROFILE: "Professional profile and work experience",
    LINK_TYPE.VIDEO: "Video content and tutorials",
    LINK_TYPE.DEMO: "Live demonstration of the project in action",
    LINK_TYPE.SANDBOX: "Interactive code playground and examples",
    LINK_TYPE.WEBSITE: "External website with additional information",
}


def parse_hostname(url: str) -> str:
    """Hostname of an absolute URL; ValueError when there is none."""
    parsed = urlsplit(url)
    if not parsed.scheme or not parsed.hostname:
        raise ValueError(f"not an absolute URL: {url!r}")
    return parsed.hostname


def strip_www(hostname: str) -> str:
    return hostname[4:] if hostname.startswith("www.") else hostname


def favicon_url(hostname: str) -> str:
    return FAVICON_SERVICE_URL.format(domain=hostname)


def extract_title_from_url(url: str) -> str:
    """Last path segment as Title Words, else the bare hostname.

    "https://example.com/my-cool_project" -> "My Cool Project".
    """
    try:
        hostname = parse_hostname(url)
        path = urlsplit(url).path
    except ValueError:
        return EXTERNAL_LINK_TITLE

    segments = [segment for segment in path.split("/") if segment]
    if segments:
        words = re.sub(r"[-_]", " ", segments[-1])
        return _WORD_START.sub(lambda match: match.group(0).upper(), words)

    return strip_www(hostname)


def description_for_type(link_type: str | None) -> str:
    if link_type is None:
        return GENERIC_DESCRIPTION
    return _DESCRIPTIONS.get(link_type, GENERIC_DESCRIPTION)
