"""Shared test fixtures for SkuVault SDK tests."""

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from skuvault_sdk.request_builder import Credentials
from skuvault_sdk.skuvault_client import SkuVaultClient

from tests.fixtures.common import TENANT_TOKEN, USER_TOKEN


@pytest.fixture
def credentials():
    return Credentials(tenant_token=TENANT_TOKEN, user_token=USER_TOKEN)


@pytest.fixture
def mock_response():
    """Factory for creating mock HTTP responses.

    Usage:
        resp = mock_response(200, {"key": "value"})
        resp = mock_response(401, text="Unauthorized")
    """
    def _make(status_code=200, json_data=None, text=None, headers=None):
        response = MagicMock()
        response.status_code = status_code
        if json_data is not None:
            response.json.return_value = json_data
            response.text = text or str(json_data)
        else:
            response.json.side_effect = ValueError("No JSON")
            response.text = text or ""
        response.headers = headers or {}
        return response
    return _make


@pytest.fixture
def mock_client(mock_response):
    """Create a SkuVaultClient with mocked _request method."""
    with patch.dict("os.environ", {
        "SKUVAULT_TENANT_TOKEN": TENANT_TOKEN,
        "SKUVAULT_USER_TOKEN": USER_TOKEN,
    }):
        client = SkuVaultClient.from_env()
        client._request = AsyncMock(return_value=mock_response(200, {"Status": "OK"}))
        return client


@pytest.fixture
def recording_transport():
    """MockTransport that records every request and answers with a queued response.

    Usage:
        transport, sent = recording_transport(httpx.Response(200, json={...}))
    """
    def _make(response=None, handler=None):
        sent = []

        def _handle(request):
            sent.append(request)
            if handler is not None:
                return handler(request)
            return response if response is not None else httpx.Response(200, json={"Status": "OK"})

        return httpx.MockTransport(_handle), sent
    return _make


@pytest.fixture
def wire_client(credentials, recording_transport):
    """Factory for a SkuVaultClient backed by an httpx.MockTransport.

    Returns (client, sent_requests).
    """
    def _make(response=None, handler=None, **kwargs):
        transport, sent = recording_transport(response, handler)
        http_client = httpx.AsyncClient(transport=transport)
        client = SkuVaultClient(credentials=credentials, http_client=http_client, **kwargs)
        return client, sent

    return _make


@pytest.fixture
def csv_file(tmp_path):
    """Factory writing rows (or raw text) to a CSV file and returning its path."""
    def _make(rows=None, text=None, name="export.csv", encoding="utf-8"):
        path = tmp_path / name
        if text is None:
            text = "".join(",".join(row) + "\n" for row in rows or [])
        path.write_bytes(text.encode(encoding))
        return path
    return _make
