"""
Request signing for the Flickr API.

The service recomputes the signature on its side, so the algorithm must
match it exactly: MD5 over the shared secret followed by every argument
name and value, with names in ascending order and no separators.
"""

import hashlib
from typing import Mapping


def sign(secret: str, args: Mapping[str, str]) -> str:
    """
    Compute the ``api_sig`` value for a set of arguments.

    Args:
        secret: Shared secret issued with the API key
        args: Argument names mapped to their raw (unencoded) values

    Returns:
        32-character lowercase hex digest
    """
    md5 = hashlib.md5(secret.encode('utf-8'))
    for name in sorted(args):
        md5.update(name.encode('utf-8'))
        md5.update(args[name].encode('utf-8'))
    return md5.hexdigest()
