"""Errors raised while setting up a live stream."""

from typing import Iterable, Optional


class StreamSetupError(Exception):
    """Base class for failures that halt the startup sequence."""


class TransportError(StreamSetupError):
    """Network failure or timeout while talking to the proxy or vendor."""

    def __init__(self, message: str, url: Optional[str] = None, timed_out: bool = False):
        super().__init__(message)
        self.url = url
        self.timed_out = timed_out


class UpstreamStatusError(StreamSetupError):
    """Non-success HTTP status."""

    def __init__(self, status_code: int, url: str, body: str = ""):
        super().__init__(f"HTTP {status_code} from {url}")
        self.status_code = status_code
        self.url = url
        self.body = body


class MalformedResponseError(StreamSetupError):
    """Response body is not JSON or lacks the expected shape."""


class MissingConfigurationError(StreamSetupError):
    """A required configuration value is unset or still a placeholder."""

    def __init__(self, fields: Iterable[str]):
        self.fields = list(fields)
        super().__init__(
            "Required configuration missing: " + ", ".join(self.fields)
        )
