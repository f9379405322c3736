"""
Domain models for the Photon geocoder.

Pydantic models for request parameters and for the GeoJSON features the
Photon API returns. Feature models accept unknown keys so nothing the server
sends is dropped.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Request parameters
# =============================================================================


class Layer(StrEnum):
    """Result categories Photon can filter on."""

    HOUSE = "house"
    STREET = "street"
    LOCALITY = "locality"
    DISTRICT = "district"
    CITY = "city"
    COUNTY = "county"
    STATE = "state"
    COUNTRY = "country"
    OTHER = "other"


class BoundingBox(BaseModel):
    """Geographic bounding box used to restrict forward search results."""

    model_config = ConfigDict(frozen=True)

    min_lon: float = Field(..., ge=-180, le=180)
    min_lat: float = Field(..., ge=-90, le=90)
    max_lon: float = Field(..., ge=-180, le=180)
    max_lat: float = Field(..., ge=-90, le=90)

    def to_request_string(self) -> str:
        """Wire form: ``min_lon,min_lat,max_lon,max_lat``."""
        return f"{self.min_lon},{self.min_lat},{self.max_lon},{self.max_lat}"

    @classmethod
    def from_string(cls, value: str) -> BoundingBox:
        """Parse the comma separated wire form back into a box."""
        parts = [p.strip() for p in value.split(",")]
        if len(parts) != 4:
            msg = f"Expected 4 comma separated values, got {len(parts)}: {value!r}"
            raise ValueError(msg)
        min_lon, min_lat, max_lon, max_lat = (float(p) for p in parts)
        return cls(min_lon=min_lon, min_lat=min_lat, max_lon=max_lon, max_lat=max_lat)


# =============================================================================
# Features
# =============================================================================


class Geometry(BaseModel):
    """GeoJSON point geometry. Coordinates are ``[lon, lat]``."""

    model_config = ConfigDict(extra="allow")

    type: str = "Point"
    coordinates: list[float] = Field(default_factory=list)


class FeatureProperties(BaseModel):
    """Address and OSM attributes of a single result."""

    model_config = ConfigDict(extra="allow")

    name: str | None = None
    street: str | None = None
    # some OSM data carries these as bare numbers
    housenumber: str | int | None = None
    postcode: str | int | None = None
    city: str | None = None
    district: str | None = None
    locality: str | None = None
    county: str | None = None
    state: str | None = None
    country: str | None = None
    countrycode: str | None = None
    osm_id: int | str | None = None
    osm_type: str | None = None
    osm_key: str | None = None
    osm_value: str | None = None
    type: str | None = None
    # [min_lon, max_lat, max_lon, min_lat], only sent for areas
    extent: list[float] | None = None


class Feature(BaseModel):
    """A single geocoding result."""

    model_config = ConfigDict(extra="allow")

    type: str = "Feature"
    geometry: Geometry | None = None
    properties: FeatureProperties = Field(default_factory=FeatureProperties)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Feature:
        """Build a feature from one element of the ``features`` array."""
        return cls.model_validate(data)

    def to_json(self) -> dict[str, Any]:
        """Dump back to the JSON shape the server sent."""
        return self.model_dump(mode="json", exclude_unset=True)

    @property
    def longitude(self) -> float | None:
        coords = self.geometry.coordinates if self.geometry is not None else []
        return coords[0] if len(coords) >= 2 else None

    @property
    def latitude(self) -> float | None:
        coords = self.geometry.coordinates if self.geometry is not None else []
        return coords[1] if len(coords) >= 2 else None

    @property
    def display_name(self) -> str:
        """Human-friendly one-line label built from the address parts."""
        p = self.properties
        street = " ".join(str(part) for part in (p.street, p.housenumber) if part)
        place = " ".join(str(part) for part in (p.postcode, p.city) if part)
        parts = [p.name, street, place, p.country]
        seen: list[str] = []
        for part in parts:
            if part and part not in seen:
                seen.append(part)
        return ", ".join(seen) or "Unnamed"
