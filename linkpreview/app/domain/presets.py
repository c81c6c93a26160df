"""Canned metadata for well-known hosting domains.

Lookup is an exact match on the hostname: "www.github.com" does not match
"github.com".
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from linkpreview.app.constants import LINK_TYPE

SITE_PRESETS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "github.com": {
            "site_name": "GitHub",
            "favicon": "https://github.com/favicon.ico",
            "type": LINK_TYPE.REPOSITORY,
        },
        "linkedin.com": {
            "site_name": "LinkedIn",
            "favicon": "https://static.licdn.com/favicon.ico",
            "type": LINK_TYPE.PROFILE,
        },
        "youtube.com": {
            "site_name": "YouTube",
            "favicon": "https://youtube.com/favicon.ico",
            "type": LINK_TYPE.VIDEO,
        },
        "vercel.app": {
            "site_name": "Vercel",
            "favicon": "https://vercel.com/favicon.ico",
            "type": LINK_TYPE.DEMO,
        },
        "netlify.app": {
            "site_name": "Netlify",
            "favicon": "https://netlify.com/favicon.ico",
            "type": LINK_TYPE.DEMO,
        },
        "herokuapp.com": {
            "site_name": "Heroku",
            "favicon": "https://heroku.com/favicon.ico",
            "type": LINK_TYPE.DEMO,
        },
        "codesandbox.io": {
            "site_name": "CodeSandbox",
            "favicon": "https://codesandbox.io/favicon.ico",
            "type": LINK_TYPE.SANDBOX,
        },
        "codepen.io": {
            "site_name": "CodePen",
            "favicon": "https://codepen.io/favicon.ico",
            "type": LINK_TYPE.DEMO,
        },
    }
)


class PresetTable:
    """Read-only hostname -> partial record lookup."""

    def __init__(self, presets: Mapping[str, Mapping[str, str]] = SITE_PRESETS) -> None:
        self._presets = presets

    def lookup(self, hostname: str) -> dict[str, str]:
        """Return a copy of the preset fragment for hostname, or {} when unknown."""
        return dict(self._presets.get(hostname, {}))

    def __contains__(self, hostname: object) -> bool:
        return hostname in self._presets
