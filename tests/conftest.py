"""
Shared fixtures for the nocodb-mcp tests.

No test here touches the network: urllib.request.urlopen is patched and
fed canned responses or errors.
"""

import io
import json
import urllib.error
from unittest.mock import patch

import pytest

from core.config import NocoDBSettings


BASE_URL = "http://52.18.93.49:8080"
TABLE_ID = "m3jxshm3jce0b2v"
RECORDS_URL = f"{BASE_URL}/api/v2/tables/{TABLE_ID}/records"


class FakeResponse:
    """Minimal stand-in for the object urlopen() returns."""

    def __init__(self, body, status=200, reason="OK"):
        if not isinstance(body, (str, bytes)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        self._body = body
        self.status = status
        self.reason = reason

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def http_error(code, reason, body=b""):
    """Build the HTTPError urlopen() raises for a non-2xx status."""
    return urllib.error.HTTPError(RECORDS_URL, code, reason, None, io.BytesIO(body))


@pytest.fixture
def settings():
    return NocoDBSettings(token="env-token")


@pytest.fixture
def settings_without_token():
    return NocoDBSettings(token=None)


@pytest.fixture
def mock_urlopen():
    """Patch urlopen; tests set .return_value or .side_effect."""
    with patch("urllib.request.urlopen") as mocked:
        yield mocked


def sent_request(mock_urlopen):
    """The urllib.request.Request passed to the (single) urlopen call."""
    assert mock_urlopen.call_count == 1
    return mock_urlopen.call_args.args[0]
