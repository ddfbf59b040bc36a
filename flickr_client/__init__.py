"""
Flickr Client Library

A Python client library that builds signed requests for the Flickr API,
sends them over an injectable HTTP session and decodes the XML responses.

Example usage:
    from flickr_client import FlickrClient

    client = FlickrClient("your-api-key", "your-secret")
    frob = client.get_frob()
    print(client.auth_url("write", frob))
    client.auth_token = client.get_token(frob)
    ticket = client.upload("kitten.jpg", data, {"title": "kitten"})
"""

from .client import FlickrClient
from .exceptions import (
    FlickrClientError,
    ConfigurationError,
    ValidationError,
    TransportError,
    ProtocolError,
    ApiError
)
from .constants import (
    READ_PERM,
    WRITE_PERM,
    DELETE_PERM,
    SIZE_SQUARE,
    SIZE_THUMBNAIL,
    SIZE_SMALL_240,
    SIZE_MEDIUM_500,
    SIZE_LARGE_1024,
    DEFAULT_CONFIG
)
from .signing import sign
from .types import Auth, Photo, SearchResult, User

__version__ = "1.0.0"
__all__ = [
    "FlickrClient",
    "FlickrClientError",
    "ConfigurationError",
    "ValidationError",
    "TransportError",
    "ProtocolError",
    "ApiError",
    "READ_PERM",
    "WRITE_PERM",
    "DELETE_PERM",
    "SIZE_SQUARE",
    "SIZE_THUMBNAIL",
    "SIZE_SMALL_240",
    "SIZE_MEDIUM_500",
    "SIZE_LARGE_1024",
    "DEFAULT_CONFIG",
    "sign",
    "Auth",
    "Photo",
    "SearchResult",
    "User"
]
