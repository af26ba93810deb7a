"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_payload() -> dict:
    """A full workflow response with two chunks and two interfaces."""
    return json.loads((FIXTURES / "sample_payload.json").read_text(encoding="utf-8"))


@pytest.fixture
def sample_ism(sample_payload) -> dict:
    return sample_payload["ism"]
