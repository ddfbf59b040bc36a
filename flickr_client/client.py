"""
Flickr API client.

This module ties request signing, transport and response decoding together
behind a small client object holding the API credentials.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Mapping, Optional

import requests

from .constants import DEFAULT_CONFIG, PERMS, SIZE_MEDIUM_500
from .exceptions import ConfigurationError, ValidationError
from .request import (
    fetch,
    get_token_url,
    post,
    rest_url,
    search_url,
    signed_url,
    upload_request,
)
from .response import (
    decode,
    decode_auth,
    decode_frob,
    decode_search,
    decode_ticket,
)
from .types import Auth, Photo, SearchResult

log = logging.getLogger(__name__)


class FlickrClient:
    """
    Client for making signed requests to the Flickr API.

    The HTTP session is injected so callers can share one between clients or
    substitute a test double; it only needs a ``send(prepared_request,
    **kwargs)`` method compatible with :class:`requests.Session`.
    """

    def __init__(self, api_key: str, secret: str,
                 session: Optional[requests.Session] = None,
                 auth_token: Optional[str] = None, **config):
        """
        Initialize Flickr client.

        Args:
            api_key: Public application key sent with every request
            secret: Shared secret used only to sign requests
            session: HTTP session; a new one is created when omitted
            auth_token: Previously issued user authorization token
            **config: Configuration options (api_host, upload_url, static_host)
        """
        self._api_key = api_key
        self._secret = secret
        self.auth_token = auth_token

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def secret(self) -> str:
        return self._secret

    def _validate_config(self):
        """Validate client configuration."""
        if not self._api_key:
            raise ConfigurationError("api_key cannot be empty")

        if not self._secret:
            raise ConfigurationError("secret cannot be empty")

        for name in DEFAULT_CONFIG:
            if not self.config[name]:
                raise ConfigurationError(f"{name} cannot be empty")

    def call(self, api_method: str, **args) -> ET.Element:
        """
        Make a signed REST GET request and return the ``rsp`` element.

        Raises:
            TransportError: If the request could not be sent
            ApiError: If the service reported a failure
            ProtocolError: If the response could not be decoded
        """
        return decode(fetch(self, rest_url(self, api_method, args)))

    def get_frob(self) -> str:
        """Request a frob to start the web authorization flow."""
        return decode_frob(fetch(self, rest_url(self, 'flickr.auth.getFrob', {})))

    def auth_url(self, perms: str, frob: Optional[str] = None) -> str:
        """
        Build the URL a user visits to grant this application access.

        Args:
            perms: One of ``read``, ``write`` or ``delete``
            frob: Frob from :meth:`get_frob`, for desktop applications

        Raises:
            ValidationError: If perms is not a known permission level
        """
        if perms not in PERMS:
            raise ValidationError(f"invalid perms value: {perms!r}")
        args = {'perms': perms}
        if frob:
            args['frob'] = frob
        return signed_url(self.secret, self.api_key, 'auth', args,
                          host=self.config['api_host'])

    def get_auth(self, frob: str) -> Auth:
        """Exchange an authorized frob for a token and its user details."""
        return decode_auth(fetch(self, get_token_url(self, frob)))

    def get_token(self, frob: str) -> str:
        """
        Exchange an authorized frob for an auth token.

        The token is returned, not stored; assign it to ``auth_token`` to make
        subsequent requests on the user's behalf.
        """
        return self.get_auth(frob).token

    def search(self, args: Mapping[str, str]) -> SearchResult:
        """Run ``flickr.photos.search`` with the given arguments."""
        return decode_search(fetch(self, search_url(self, args)))

    def upload(self, filename: str, data: bytes, args: Mapping[str, str]) -> str:
        """
        Upload a photo asynchronously.

        Args:
            filename: File name; its extension determines the content type
            data: Photo bytes
            args: Upload arguments such as ``title``, ``description``, ``tags``

        Returns:
            Ticket id for checking the upload status

        Raises:
            ValidationError: If the content type cannot be inferred
            TransportError: If the request could not be sent
            ApiError: If the service rejected the upload
            ProtocolError: If the response could not be decoded
        """
        request = upload_request(self, filename, data, args)
        ticket = decode_ticket(post(self, request))
        log.info("Uploaded %s, ticket %s", filename, ticket)
        return ticket

    def photo_url(self, photo: Photo, size: str = SIZE_MEDIUM_500) -> str:
        """Return the static URL of a photo using the configured static host."""
        return photo.url(size, static_host=self.config['static_host'])

    def close(self):
        """Close the HTTP session if this client created it."""
        if self._owns_session and self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
