"""
Shared HTTP client.

Provides a pre-configured ``requests.Session`` that identifies the library via
its User-Agent and applies a default timeout to every request. Requests are
sent once: failures surface immediately to the caller.

Usage::

    from photon_geocoder.services.http import session

    resp = session.get("https://photon.komoot.io/api", params={"q": "berlin"})
"""

from __future__ import annotations

import requests

from photon_geocoder import __version__

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"photon-geocoder/{__version__}"


def create_session(timeout: float = DEFAULT_TIMEOUT) -> requests.Session:
    """
    Build a ``requests.Session`` with the library's defaults.

    Args:
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    s.headers["User-Agent"] = USER_AGENT
    s.headers["Accept"] = "application/json"

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session — import and use directly.
session: requests.Session = create_session()
