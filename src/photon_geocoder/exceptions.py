"""Errors raised by the Photon API client."""

from __future__ import annotations


class PhotonError(Exception):
    """Raised when the Photon API answers with a status code other than 200.

    ``message`` is the ``message`` field of the error body, or an empty string
    when the server did not send one.
    """

    def __init__(self, message: str = "", status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"PhotonError(message={self.message!r}, status_code={self.status_code!r})"
