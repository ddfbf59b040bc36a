"""
Shared test doubles for the Flickr client tests.
"""

import io

import pytest


class FailingStream(io.BytesIO):
    """Body stream whose connection drops on the first read."""

    def __init__(self, error: Exception):
        super().__init__()
        self.error = error

    def read(self, *args):
        raise self.error


class FakeResponse:
    """Response whose body is a fresh single-pass stream."""

    def __init__(self, body: bytes, read_error: Exception = None):
        self.raw = io.BytesIO(body) if read_error is None else FailingStream(read_error)


class FakeSession:
    """Session double recording every request it is asked to send."""

    def __init__(self, body: bytes = b"", error: Exception = None,
                 read_error: Exception = None):
        self.body = body
        self.error = error
        self.read_error = read_error
        self.requests = []
        self.responses = []
        self.closed = False

    def send(self, request, **kwargs):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        response = FakeResponse(self.body, self.read_error)
        self.responses.append(response)
        return response

    def close(self):
        self.closed = True


@pytest.fixture
def fake_session():
    """Factory for independent fake sessions."""
    return FakeSession
