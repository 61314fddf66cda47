"""Shared pytest fixtures for greencaddie tests."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Dict

import pytest
from fastapi.testclient import TestClient

from greencaddie.app import app
from greencaddie.config import reset_settings_cache
from greencaddie.courses.schemas import Hole

FROZEN_AT = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)


def _valid_hole_payload(number: int) -> Dict[str, Any]:
    return {
        "number": number,
        "par": 4,
        "strokeIndex": number,
        "lengthYards": 380,
        "tee": {"lat": 37.0, "lng": -8.0},
        "green": {
            "front": {"lat": 37.001, "lng": -8.0},
            "middle": {"lat": 37.0011, "lng": -8.0},
            "back": {"lat": 37.0012, "lng": -8.0},
        },
        "areas": {
            "fairway": [
                {"lat": 37.0, "lng": -8.0002},
                {"lat": 37.0012, "lng": -8.0001},
                {"lat": 37.0012, "lng": -7.9999},
                {"lat": 37.0, "lng": -7.9998},
            ],
            "green": [
                {"lat": 37.0010, "lng": -8.00005},
                {"lat": 37.00115, "lng": -8.0},
                {"lat": 37.0010, "lng": -7.99995},
            ],
            "hazards": [],
        },
    }


@pytest.fixture
def hole_payload() -> Callable[..., Dict[str, Any]]:
    """Build the JSON payload of a hole that passes every QA check."""

    def build(number: int = 1, **overrides: Any) -> Dict[str, Any]:
        payload = _valid_hole_payload(number)
        payload.update(overrides)
        return payload

    return build


@pytest.fixture
def make_hole(hole_payload) -> Callable[..., Hole]:
    def build(number: int = 1, **overrides: Any) -> Hole:
        return Hole.model_validate(hole_payload(number, **overrides))

    return build


@pytest.fixture
def frozen_clock() -> Callable[[], datetime]:
    return lambda: FROZEN_AT


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
