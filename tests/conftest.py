"""Shared fixtures and sample Photon responses."""

from __future__ import annotations

import copy
import json
from collections.abc import Callable, Iterator
from typing import Any
from unittest.mock import MagicMock

import pytest

from photon_geocoder.config import get_settings

SAMPLE_FEATURE: dict[str, Any] = {
    "type": "Feature",
    "geometry": {"type": "Point", "coordinates": [13.3777, 52.5163]},
    "properties": {
        "osm_id": 518071791,
        "osm_type": "W",
        "osm_key": "tourism",
        "osm_value": "attraction",
        "type": "house",
        "name": "Brandenburger Tor",
        "street": "Pariser Platz",
        "housenumber": "1",
        "postcode": "10117",
        "city": "Berlin",
        "district": "Mitte",
        "state": "Berlin",
        "country": "Deutschland",
        "countrycode": "DE",
        "extent": [13.3772, 52.5165, 13.3782, 52.5161],
    },
}

SAMPLE_CITY_FEATURE: dict[str, Any] = {
    "type": "Feature",
    "geometry": {"type": "Point", "coordinates": [13.3888599, 52.5170365]},
    "properties": {
        "osm_id": 240109189,
        "osm_type": "N",
        "osm_key": "place",
        "osm_value": "city",
        "type": "city",
        "name": "Berlin",
        "country": "Deutschland",
        "countrycode": "DE",
    },
}

SAMPLE_RESPONSE: dict[str, Any] = {
    "type": "FeatureCollection",
    "features": [SAMPLE_FEATURE, SAMPLE_CITY_FEATURE],
}


def _fake_response(status_code: int, body: dict[str, Any] | str) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = body if isinstance(body, str) else json.dumps(body)
    return resp


@pytest.fixture
def make_response() -> Callable[[int, dict[str, Any] | str], MagicMock]:
    """Factory for fake ``requests.Response`` objects."""
    return _fake_response


@pytest.fixture
def sample_feature() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_FEATURE)


@pytest.fixture
def sample_response() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_RESPONSE)


@pytest.fixture
def mock_session() -> MagicMock:
    """Session whose ``get`` returns the two-feature sample response."""
    session = MagicMock()
    session.get.return_value = _fake_response(200, SAMPLE_RESPONSE)
    return session


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
