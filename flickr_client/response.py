"""
Decoding of API response envelopes.

Every response is an ``rsp`` element whose ``stat`` attribute is ``ok`` or
``fail``. Failures carry a single ``err`` child with ``code`` and ``msg``.
"""

import logging
import xml.etree.ElementTree as ET
from typing import IO

from .exceptions import ApiError, ProtocolError
from .types import Auth, Photo, SearchResult, User

log = logging.getLogger(__name__)


def decode(stream: IO[bytes]) -> ET.Element:
    """
    Parse a response stream and return the ``rsp`` element of a success.

    The stream is read to the end and closed.

    Raises:
        ApiError: If the service reported ``stat="fail"``
        ProtocolError: If the body is not a recognisable envelope
    """
    try:
        root = ET.parse(stream).getroot()
    except ET.ParseError as e:
        raise ProtocolError(f"malformed response: {e}") from e
    finally:
        stream.close()

    if root.tag != 'rsp':
        raise ProtocolError(f"unexpected root element <{root.tag}>")

    stat = root.get('stat')
    if stat == 'ok':
        return root
    if stat == 'fail':
        raise _api_error(root)
    raise ProtocolError(f"unexpected response status {stat!r}")


def _api_error(root: ET.Element) -> ApiError:
    err = root.find('err')
    if err is None:
        raise ProtocolError("failure response without <err> element")
    try:
        code = int(err.get('code'))
    except (TypeError, ValueError) as e:
        raise ProtocolError(f"invalid error code {err.get('code')!r}") from e
    error = ApiError(code, err.get('msg', ''))
    log.warning("API call failed: %s", error)
    return error


def _require(parent: ET.Element, path: str) -> ET.Element:
    node = parent.find(path)
    if node is None:
        raise ProtocolError(f"response has no <{path}> element")
    return node


def _flag(value) -> bool:
    return value == '1'


def decode_frob(stream: IO[bytes]) -> str:
    return (_require(decode(stream), 'frob').text or '').strip()


def decode_ticket(stream: IO[bytes]) -> str:
    """Return the ticket id of an asynchronous upload."""
    return (_require(decode(stream), 'ticketid').text or '').strip()


def decode_auth(stream: IO[bytes]) -> Auth:
    """Decode an ``auth`` payload from a token exchange."""
    auth = _require(decode(stream), 'auth')
    token = (_require(auth, 'token').text or '').strip()
    perms = (auth.findtext('perms') or '').strip()

    user = None
    node = auth.find('user')
    if node is not None:
        user = User(
            nsid=node.get('nsid', ''),
            username=node.get('username', ''),
            fullname=node.get('fullname', ''),
        )
    return Auth(token=token, perms=perms, user=user)


def decode_search(stream: IO[bytes]) -> SearchResult:
    """Decode a ``photos`` payload; photos keep document order."""
    photos = _require(decode(stream), 'photos')
    result = SearchResult(
        page=photos.get('page', ''),
        pages=photos.get('pages', ''),
        per_page=photos.get('perpage', ''),
        total=photos.get('total', ''),
    )
    for node in photos.findall('photo'):
        result.photos.append(Photo(
            id=node.get('id', ''),
            owner=node.get('owner', ''),
            secret=node.get('secret', ''),
            server=node.get('server', ''),
            farm=node.get('farm', ''),
            title=node.get('title', ''),
            is_public=_flag(node.get('ispublic')),
            is_friend=_flag(node.get('isfriend')),
            is_family=_flag(node.get('isfamily')),
        ))
    return result
