"""Unit tests for collecting outbound links from a resume config."""
from __future__ import annotations

import json

import pytest

from linkpreview.app.services.resume_links import (
    ResumeConfigError,
    collect_resume_links,
    load_resume_config,
)

RESUME_CONFIG = {
    "site": {
        "title": "Jane Doe",
        "description": "Portfolio",
        "author": "Jane Doe",
        "website": "https://janedoe.dev",
        "linkedin": "https://linkedin.com/in/janedoe",
        "github": "https://github.com/janedoe",
        "email": "jane@example.com",
    },
    "personal": {"name": "Jane Doe", "title": "Engineer", "avatar": "avatar.png"},
    "experience": [
        {
            "company": "Acme",
            "position": "Dev",
            "duration": "2020-2022",
            "links": [{"label": "Product", "url": "https://acme.example.com/product"}],
            "skills": [
                {"title": "Python", "href": "https://python.org"},
                {"title": "Go"},
            ],
        }
    ],
    "projects": [
        {
            "name": "Tracker",
            "description": "Habit tracker",
            "link": "https://github.com/janedoe/tracker",
            "demo": "https://tracker.vercel.app",
        },
        {"name": "Draft", "description": "Not yet", "link": "#", "image": "projects/default.jpg"},
        {"name": "Dup", "description": "Same repo", "link": "https://github.com/janedoe/tracker"},
    ],
    "links": [
        {"label": "Blog", "url": "https://blog.janedoe.dev", "icon": "rss"},
        {"label": "Mail", "url": "mailto:jane@example.com", "icon": "mail"},
    ],
}


def test_collects_links_in_document_order_without_duplicates():
    assert collect_resume_links(RESUME_CONFIG) == [
        "https://janedoe.dev",
        "https://linkedin.com/in/janedoe",
        "https://github.com/janedoe",
        "https://github.com/janedoe/tracker",
        "https://tracker.vercel.app",
        "https://acme.example.com/product",
        "https://python.org",
        "https://blog.janedoe.dev",
    ]


def test_missing_or_malformed_sections_are_ignored():
    config = {"site": "nope", "projects": {"not": "a list"}, "experience": [None, 3], "links": None}
    assert collect_resume_links(config) == []


def test_load_resume_config_reads_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(RESUME_CONFIG), encoding="utf-8")

    assert load_resume_config(path)["personal"]["name"] == "Jane Doe"


def test_load_resume_config_missing_file(tmp_path):
    with pytest.raises(ResumeConfigError, match="config not found"):
        load_resume_config(tmp_path / "absent.json")


def test_load_resume_config_invalid_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{ not json", encoding="utf-8")
    with pytest.raises(ResumeConfigError, match="cannot parse"):
        load_resume_config(path)


def test_load_resume_config_requires_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ResumeConfigError, match="must be an object"):
        load_resume_config(path)
