"""Shared fixtures: an in-memory transport standing in for requests.Session."""

import json

import pytest
import requests

from checkout import CheckoutClient


def make_response(status_code: int, body=b"") -> requests.Response:
    if not isinstance(body, (bytes, str)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = body
    return resp


class FakeSession:
    """Records requests and answers with a canned response or exception."""

    def __init__(self, response=None, error: Exception = None):
        self.response = response if response is not None else make_response(200)
        self.error = error
        self.requests = []
        self.closed = False

    def request(self, method, url, data=None, headers=None, timeout=None):
        self.requests.append(
            {"method": method, "url": url, "data": data, "headers": headers or {}, "timeout": timeout}
        )
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True

    @property
    def last(self) -> dict:
        return self.requests[-1]


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session):
    return CheckoutClient(secret_key="secret_key", session=session)
