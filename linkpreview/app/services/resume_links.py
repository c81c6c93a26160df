"""Collect the outbound links a resume config renders.

The config is the site's JSON document (site, personal, experience, projects,
links, ...). Only absolute http(s) URLs are returned; placeholders such as "#"
and relative asset paths are skipped.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator, Mapping

SITE_LINK_FIELDS = ("website", "linkedin", "github")
PROJECT_LINK_FIELDS = ("link", "demo")


class ResumeConfigError(Exception):
    """Raised when a resume config cannot be read as a JSON object."""


def load_resume_config(path: str | Path) -> dict[str, Any]:
    config_path = Path(path)
    if not config_path.is_file():
        raise ResumeConfigError(f"config not found: {config_path}")
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ResumeConfigError(f"cannot parse {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ResumeConfigError(f"{config_path}: top-level value must be an object")
    return data


def _is_outbound(value: Any) -> bool:
    return isinstance(value, str) and value.startswith(("http://", "https://"))


def _items(section: Any) -> Iterator[Mapping[str, Any]]:
    if isinstance(section, list):
        for item in section:
            if isinstance(item, Mapping):
                yield item


def _candidates(config: Mapping[str, Any]) -> Iterator[Any]:
    site = config.get("site")
    if isinstance(site, Mapping):
        for field in SITE_LINK_FIELDS:
            yield site.get(field)

    for project in _items(config.get("projects")):
        for field in PROJECT_LINK_FIELDS:
            yield project.get(field)

    for job in _items(config.get("experience")):
        for link in _items(job.get("links")):
            yield link.get("url")
        for skill in _items(job.get("skills")):
            yield skill.get("href")

    for link in _items(config.get("links")):
        yield link.get("url")


def collect_resume_links(config: Mapping[str, Any]) -> list[str]:
    """Ordered, de-duplicated outbound URLs found in config."""
    seen: dict[str, None] = {}
    for value in _candidates(config):
        if _is_outbound(value):
            seen.setdefault(value.strip(), None)
    return list(seen)
