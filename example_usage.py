#!/usr/bin/env python3
"""
Basic usage examples for the Flickr client library.

This script walks through the desktop authorization flow, a photo search and
an optional upload against the live Flickr API.

Usage:
    FLICKR_API_KEY=... FLICKR_SECRET=... python example_usage.py [photo.jpg]
"""

import logging
import os
import sys

from flickr_client import FlickrClient, FlickrClientError, SIZE_THUMBNAIL, WRITE_PERM


def main():
    """Run basic usage examples."""
    logging.basicConfig(level=logging.DEBUG if os.environ.get("DEBUG") else logging.INFO)

    api_key = os.environ.get("FLICKR_API_KEY")
    secret = os.environ.get("FLICKR_SECRET")
    if not api_key or not secret:
        print("Set FLICKR_API_KEY and FLICKR_SECRET to run the examples.")
        return 1

    print("=== Flickr Python Client Basic Usage Examples ===\n")

    with FlickrClient(api_key, secret, auth_token=os.environ.get("FLICKR_AUTH_TOKEN")) as client:
        print(f"1. Client created for key: {api_key[:8]}...\n")

        try:
            if not client.auth_token:
                print("2. Requesting authorization...")
                frob = client.get_frob()
                print(f"   Open this URL and grant access:\n   {client.auth_url(WRITE_PERM, frob)}")
                input("   Press <Return> when you've finished authorizing.")
                auth = client.get_auth(frob)
                client.auth_token = auth.token
                print(f"   ✓ Authorized as {auth.user.username if auth.user else 'unknown'}"
                      f" with '{auth.perms}' permission")
                print(f"   Token: {auth.token}\n")

            print("3. Searching your photos...")
            result = client.search({"user_id": "me", "per_page": "5"})
            print(f"   Page {result.page} of {result.pages}, {result.total} photos in total")
            for photo in result.photos:
                print(f"   - {photo.title or '(untitled)'}: {photo.url(SIZE_THUMBNAIL)}")
            print()

            if len(sys.argv) > 1:
                path = sys.argv[1]
                print(f"4. Uploading {path}...")
                with open(path, "rb") as f:
                    data = f.read()
                ticket = client.upload(os.path.basename(path), data,
                                       {"title": os.path.basename(path), "is_public": "0"})
                print(f"   ✓ Upload queued, ticket {ticket}\n")

        except FlickrClientError as e:
            print(f"   ✗ {type(e).__name__}: {e}")
            return 1

    print("=== Examples completed ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
