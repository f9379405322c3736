"""Tests for the shared HTTP session."""

from __future__ import annotations

from unittest.mock import patch

import requests

from photon_geocoder import __version__
from photon_geocoder.services.http import DEFAULT_TIMEOUT, USER_AGENT, create_session, session


class TestCreateSession:
    """Verify session factory."""

    def test_returns_session(self) -> None:
        s = create_session()
        assert isinstance(s, requests.Session)

    def test_user_agent_header(self) -> None:
        s = create_session()
        assert s.headers["User-Agent"] == f"photon-geocoder/{__version__}"

    def test_accepts_json(self) -> None:
        s = create_session()
        assert s.headers["Accept"] == "application/json"

    def test_default_timeout_injected(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_explicit_timeout_not_overridden(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep, timeout=99)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 99

    def test_sessions_are_independent(self) -> None:
        assert create_session() is not create_session()


class TestModuleSession:
    """Verify the module-level singleton."""

    def test_session_is_configured(self) -> None:
        assert session.headers["User-Agent"] == USER_AGENT

    def test_default_timeout(self) -> None:
        assert DEFAULT_TIMEOUT == 30
