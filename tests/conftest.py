import json
from unittest.mock import MagicMock

import pytest
import requests
from requests import Response

from horace_payments import HoraceClient

TOKEN = "merchant-token"
BASE_URL = "https://api.example.test/api/"


def _create_response(status_code: int, content: bytes) -> Response:
    """Create a requests Response carrying ``content``."""
    response = Response()
    response.status_code = status_code
    response._content = content
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    return response


@pytest.fixture(scope="function")
def session():
    """A requests.Session whose ``post`` never touches the network."""
    fake = MagicMock(spec=requests.Session)
    fake.post.return_value = _create_response(200, b'{"response": {"msg": null}}')
    return fake


@pytest.fixture(scope="function")
def respond(session):
    """Set the next response returned by the fake session."""

    def _respond(payload=None, *, status_code: int = 200, raw: bytes = None):
        content = raw if raw is not None else json.dumps(payload).encode("utf-8")
        session.post.return_value = _create_response(status_code, content)
        return session.post.return_value

    return _respond


@pytest.fixture(scope="function")
def client(session):
    return HoraceClient(TOKEN, base_url=BASE_URL, session=session)
