"""Errors raised by the Chamber client and surfaced by the tool facade."""


class CamaraApiError(Exception):
    """Non-2xx answer from the Chamber open-data API."""

    def __init__(self, status_code: int, url: str = "") -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"HTTP Error: {status_code}")


class ToolError(Exception):
    """A facade operation failed; the message is shown to the caller as-is."""
