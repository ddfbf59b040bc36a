"""
Custom exceptions for the Flickr client library.
"""


class FlickrClientError(Exception):
    """Base exception for Flickr client errors."""
    pass


class ConfigurationError(FlickrClientError):
    """Raised when client configuration is invalid."""
    pass


class ValidationError(FlickrClientError):
    """Raised when request arguments are rejected before anything is sent."""
    pass


class TransportError(FlickrClientError):
    """Raised when the HTTP request cannot be issued or the connection fails."""

    def __init__(self, method: str, cause: Exception):
        super().__init__(f"{method} failed: {cause}")
        self.method = method
        self.cause = cause


class ProtocolError(FlickrClientError):
    """Raised when a response is not a well-formed API envelope."""
    pass


class ApiError(FlickrClientError):
    """Raised when the remote service reports a failure."""

    def __init__(self, code: int, message: str):
        super().__init__(f"code {code}: {message}")
        self.code = code
        self.message = message

    def __eq__(self, other):
        if not isinstance(other, ApiError):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    def __hash__(self):
        return hash((self.code, self.message))
