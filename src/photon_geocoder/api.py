"""
Photon API client.

Forward (text) and reverse (coordinate) geocoding against a Photon server.
Each call sends one GET request and returns the parsed features.

API docs: https://github.com/komoot/photon#search-api

Example::

    from photon_geocoder.api import PhotonApi

    api = PhotonApi()
    for feature in api.forward_search("berlin", limit=3, lang_code="DE"):
        print(feature.display_name, feature.latitude, feature.longitude)
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit, urlunsplit

from photon_geocoder.config import DEFAULT_BASE_URL
from photon_geocoder.exceptions import PhotonError
from photon_geocoder.schemas import Feature
from photon_geocoder.services import http

if TYPE_CHECKING:
    import requests

    from photon_geocoder.config import Settings
    from photon_geocoder.schemas import BoundingBox, Layer

logger = logging.getLogger(__name__)

FORWARD_ENDPOINT = "/api"
REVERSE_ENDPOINT = "/reverse"

# Languages the public instance supports; others are sent as-is
SUPPORTED_LANGUAGES = frozenset({"en", "de", "fr", "it"})


# =============================================================================
# Request / response helpers
# =============================================================================


def build_query_params(
    init: dict[str, str] | None = None,
    *,
    limit: int | None = None,
    latitude: float | None = None,
    longitude: float | None = None,
    lang_code: str | None = None,
    layer: Layer | None = None,
) -> dict[str, str]:
    """
    Extend ``init`` with the optional parameters that are set.

    ``lat`` and ``lon`` are only added when both are given. ``lang`` is
    lower-cased and ``layer`` is sent by its string value.

    Returns:
        The same mapping passed as ``init`` (or a new one), completed.
    """
    params = init if init is not None else {}
    if limit is not None:
        params["limit"] = str(limit)
    if latitude is not None and longitude is not None:
        params["lat"] = str(latitude)
        params["lon"] = str(longitude)
    if lang_code is not None:
        params["lang"] = lang_code.lower()
    if layer is not None:
        params["layer"] = str(layer)
    return params


def handle_response(status_code: int, body: str) -> list[Feature]:
    """
    Turn a raw API response into features.

    Args:
        status_code: HTTP status of the response.
        body: Response body text.

    Returns:
        Features in the order the server sent them.

    Raises:
        PhotonError: If ``status_code`` is not 200.
        json.JSONDecodeError: If the body is not valid JSON.
        pydantic.ValidationError: If a feature has a field of an unexpected type.
    """
    data: dict[str, Any] = json.loads(body)
    if status_code != 200:
        message = data.get("message")
        logger.warning("Photon API returned %s: %s", status_code, message)
        raise PhotonError(message if message is not None else "", status_code=status_code)

    features: list[dict[str, Any]] = data["features"]
    return [Feature.from_json(f) for f in features]


# =============================================================================
# Client
# =============================================================================


class PhotonApi:
    """Client for a Photon geocoding server."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url[:-1] if base_url.endswith("/") else base_url
        self._base = urlsplit(self._base_url)
        self._session = session
        self._owns_session = False

    @classmethod
    def from_settings(cls, settings: Settings) -> PhotonApi:
        """Build a client with its own session from application settings.

        Use it as a context manager (or call ``close()``) to release the session.
        """
        api = cls(settings.base_url, session=http.create_session(timeout=settings.timeout))
        api._owns_session = True
        return api

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def session(self) -> requests.Session:
        return self._session if self._session is not None else http.session

    def __repr__(self) -> str:
        return f"PhotonApi(base_url={self._base_url!r})"

    def __enter__(self) -> PhotonApi:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the session if this client created it.

        Sessions passed in by the caller and the shared module session are left open.
        """
        if self._owns_session and self._session is not None:
            self._session.close()

    def build_url(self, endpoint: str, secure: bool = True) -> str:
        """Full URL for ``endpoint`` on this server, over HTTPS unless ``secure`` is False."""
        scheme = "https" if secure else "http"
        return urlunsplit((scheme, self._base.netloc, self._base.path + endpoint, "", ""))

    def forward_search(
        self,
        text: str,
        *,
        limit: int | None = None,
        latitude: float | None = None,
        longitude: float | None = None,
        lang_code: str | None = None,
        bounding_box: BoundingBox | None = None,
        layer: Layer | None = None,
        secure: bool = True,
    ) -> list[Feature]:
        """
        Search for places matching ``text``.

        Results can be prioritized around ``latitude``/``longitude`` or
        restricted to ``bounding_box``. Without ``lang_code`` the server
        answers in the main language at each result's location.

        Raises:
            PhotonError: If the API responds with a status other than 200.
        """
        init = {"q": text}
        if bounding_box is not None:
            init["bbox"] = bounding_box.to_request_string()
        params = build_query_params(
            init,
            limit=limit,
            latitude=latitude,
            longitude=longitude,
            lang_code=self._check_lang(lang_code),
            layer=layer,
        )
        return self._get(FORWARD_ENDPOINT, params, secure)

    def reverse_search(
        self,
        latitude: float,
        longitude: float,
        *,
        limit: int | None = None,
        lang_code: str | None = None,
        radius: int | None = None,
        layer: Layer | None = None,
        secure: bool = True,
    ) -> list[Feature]:
        """
        Find places near ``latitude``/``longitude``.

        Returns an empty list when nothing is near the location; a larger
        ``radius`` (meters) gives a better chance of a usable result.

        Raises:
            PhotonError: If the API responds with a status other than 200.
        """
        params = build_query_params(
            {"radius": str(radius)} if radius is not None else {},
            limit=limit,
            latitude=latitude,
            longitude=longitude,
            lang_code=self._check_lang(lang_code),
            layer=layer,
        )
        return self._get(REVERSE_ENDPOINT, params, secure)

    def _get(self, endpoint: str, params: dict[str, str], secure: bool) -> list[Feature]:
        url = self.build_url(endpoint, secure)
        logger.debug("GET %s params=%s", url, params)
        resp = self.session.get(url, params=params)
        features = handle_response(resp.status_code, resp.text)
        logger.debug("Got %d features from %s", len(features), url)
        return features

    @staticmethod
    def _check_lang(lang_code: str | None) -> str | None:
        if lang_code is not None and lang_code.lower() not in SUPPORTED_LANGUAGES:
            logger.warning("Language %r may not be supported by the server", lang_code)
        return lang_code
