"""Photon Geocoder - client for the Photon geocoding API.

Architecture::

    api.py         PhotonApi client, query-parameter builder, response handler
    schemas.py     Pydantic models (BoundingBox, Layer, Feature)
    exceptions.py  PhotonError raised on non-200 responses
    config.py      Settings from PHOTON_* environment variables
    services/      Shared utilities (HTTP session with default timeout)
    cli.py         ``photon-geocoder`` command line tool

Data flow: arguments → query params → GET <base>/api | <base>/reverse → features
"""

__version__ = "0.1.0"

from photon_geocoder.api import PhotonApi
from photon_geocoder.config import Settings
from photon_geocoder.exceptions import PhotonError
from photon_geocoder.schemas import BoundingBox, Feature, Layer

__all__ = [
    "BoundingBox",
    "Feature",
    "Layer",
    "PhotonApi",
    "PhotonError",
    "Settings",
    "__version__",
]
