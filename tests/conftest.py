"""Shared test fixtures."""

import json

import pytest

SAMPLE = {
    "id": "dash-1",
    "type": "dashboard",
    "attributes": {
        "title": "Overview",
        "panels": [{"id": "p1"}, {"id": "p2"}],
        "meta": {"search": {"query": "status:200", "size": 10}},
        "description": None,
    },
}


@pytest.fixture
def sample():
    return json.loads(json.dumps(SAMPLE))


@pytest.fixture
def sample_text():
    return json.dumps(SAMPLE)
