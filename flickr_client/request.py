"""
Signed request construction and transport.

URLs and upload bodies are both signed with :func:`flickr_client.signing.sign`
over the exact string values that are later encoded onto the wire.
"""

import logging
import mimetypes
import os
from typing import IO, Mapping
from urllib.parse import urlencode

import requests
import urllib3

from .constants import DEFAULT_CONFIG, PHOTO_FIELD
from .exceptions import TransportError, ValidationError
from .signing import sign

log = logging.getLogger(__name__)

# Ask for an unencoded body so the raw stream can be handed to the XML parser.
_REQUEST_HEADERS = {'Accept-Encoding': 'identity'}


def signed_url(secret: str, key: str, method: str, args: Mapping[str, str],
               host: str = DEFAULT_CONFIG['api_host']) -> str:
    """
    Build a fully qualified, signed URL for a service endpoint.

    Args:
        secret: Shared secret used as signing key material
        key: API key, added to the arguments as ``api_key``
        method: Service path component, e.g. ``rest`` or ``auth``
        args: Request arguments; not modified
        host: API host name

    Returns:
        ``http://<host>/services/<method>/?<query>`` with ``api_sig`` included
    """
    query = dict(args)
    query.pop('api_sig', None)
    query['api_key'] = key
    query['api_sig'] = sign(secret, query)
    return f"http://{host}/services/{method}/?" + urlencode(sorted(query.items()))


def rest_url(client, api_method: str, args: Mapping[str, str]) -> str:
    """Build a signed REST URL, adding the client's auth token when it has one."""
    query = dict(args)
    query['method'] = api_method
    if client.auth_token:
        query['auth_token'] = client.auth_token
    log.debug("Built REST URL for %s", api_method)
    return signed_url(client.secret, client.api_key, 'rest', query,
                      host=client.config['api_host'])


def get_token_url(client, frob: str) -> str:
    return rest_url(client, 'flickr.auth.getToken', {'frob': frob})


def search_url(client, args: Mapping[str, str]) -> str:
    return rest_url(client, 'flickr.photos.search', args)


def guess_content_type(filename: str) -> str:
    """
    Infer a MIME type from the filename extension alone.

    The extension is everything from the last dot of the base name, so a
    name like ``.jpg`` counts as a JPEG.

    Raises:
        ValidationError: If there is no extension or it maps to no known type
    """
    name = os.path.basename(filename)
    dot = name.rfind('.')
    if dot < 0:
        raise ValidationError(f"cannot infer content type of {filename!r}: no extension")
    ext = name[dot:]
    content_type, _ = mimetypes.guess_type('upload' + ext.lower())
    if content_type is None:
        raise ValidationError(f"unknown content type for extension {ext!r}")
    return content_type


def upload_request(client, filename: str, data: bytes,
                   args: Mapping[str, str]) -> requests.PreparedRequest:
    """
    Build a signed multipart/form-data upload request.

    The form carries every caller argument plus ``api_key``, ``auth_token``
    (only when the client holds one), ``async`` and ``api_sig``, and a single
    file part named ``photo``.

    Args:
        client: Client holding the key, secret, token and configuration
        filename: Name sent with the photo; its extension picks the content type
        data: Raw photo bytes
        args: Extra upload arguments such as ``title`` or ``description``

    Returns:
        Prepared POST request ready to be sent

    Raises:
        ValidationError: If the content type cannot be inferred from filename
    """
    content_type = guess_content_type(filename)

    fields = dict(args)
    fields.pop('api_sig', None)
    fields['api_key'] = client.api_key
    if client.auth_token:
        fields['auth_token'] = client.auth_token
    fields['async'] = '1'
    fields['api_sig'] = sign(client.secret, fields)

    log.debug("Built upload request for %s (%s, %d bytes)",
              filename, content_type, len(data))
    request = requests.Request(
        'POST',
        client.config['upload_url'],
        headers=dict(_REQUEST_HEADERS),
        data=sorted(fields.items()),
        files={PHOTO_FIELD: (filename, data, content_type)},
    )
    return _prepare(client, request)


def _prepare(client, request: requests.Request) -> requests.PreparedRequest:
    # Sessions merge in their own headers, cookies and auth; plain doubles may not.
    prepare_request = getattr(client.session, 'prepare_request', None)
    if prepare_request is None:
        return request.prepare()
    return prepare_request(request)


class _ResponseStream:
    """Body stream reporting connection failures during reads as TransportError."""

    def __init__(self, method: str, raw: IO[bytes]):
        self._method = method
        self._raw = raw

    def read(self, amt=None) -> bytes:
        try:
            return self._raw.read(amt)
        except (requests.RequestException, urllib3.exceptions.HTTPError, OSError) as e:
            raise TransportError(self._method, e) from e

    @property
    def closed(self) -> bool:
        return self._raw.closed

    def close(self):
        self._raw.close()


def _send(client, method: str, request: requests.PreparedRequest) -> IO[bytes]:
    try:
        response = client.session.send(request, stream=True)
    except requests.RequestException as e:
        raise TransportError(method, e) from e
    return _ResponseStream(method, response.raw)


def fetch(client, url: str) -> IO[bytes]:
    """
    Issue a GET and return the response body stream.

    Raises:
        TransportError: If the request cannot be issued or the connection fails
    """
    request = requests.Request('GET', url, headers=dict(_REQUEST_HEADERS))
    return _send(client, 'GET', _prepare(client, request))


def post(client, request: requests.PreparedRequest) -> IO[bytes]:
    """
    Send a prebuilt POST request and return the response body stream.

    Raises:
        TransportError: If the request cannot be issued or the connection fails
    """
    return _send(client, 'POST', request)
