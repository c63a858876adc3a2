"""Shared fixtures: a small Batman corpus."""

import json

import pytest


@pytest.fixture
def sample_records() -> list[dict]:
    return [
        {
            "id": "batman",
            "type": "character",
            "name": "Batman",
            "description": "A vigilante who protects Gotham City.",
            "aliases": ["The Dark Knight", "Bruce Wayne"],
            "tags": ["batman", "hero"],
            "relationships": [{"type": "appears-in", "target": "dark-knight"}],
            "content": [
                {"title": "Origin", "body": "Orphaned as a child."},
                {"title": "Methods", "body": "Relies on detective work."},
            ],
        },
        {
            "id": "joker",
            "type": "character",
            "name": "The Joker",
            "tags": ["joker", "villain"],
            "relationships": [{"type": "appears-in", "target": "dark-knight"}],
            "facets": {"morality": "villainous"},
        },
        {
            "id": "dark-knight",
            "type": "movie",
            "name": "The Dark Knight",
            "tags": ["crime", "gritty"],
            "relationships": [{"type": "directed-by", "target": "nolan"}],
            "facets": {"genre": ["crime", "thriller"], "morality": "grey", "sequel": True},
        },
        {
            "id": "nolan",
            "type": "person",
            "name": "Christopher Nolan",
            "tags": ["director"],
        },
        {
            "id": "gotham",
            "type": "location",
            "name": "Gotham City",
            "tags": ["gotham", "urban"],
            "relationships": [{"type": "home-of", "target": "batman"}],
        },
    ]


@pytest.fixture
def content_dir(tmp_path, sample_records):
    """Write each sample record to its own JSON file."""
    directory = tmp_path / "entities"
    directory.mkdir()
    for record in sample_records:
        (directory / f"{record['id']}.json").write_text(json.dumps(record), encoding="utf-8")
    return directory
