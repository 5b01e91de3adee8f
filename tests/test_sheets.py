"""Tests for the published sheet client"""

from unittest.mock import patch

import pytest
import requests

from pgbee.api.sheets import SheetClient
from pgbee.config import Config
from tests.conftest import make_response


def test_defaults_come_from_config(monkeypatch):
    monkeypatch.setattr(Config, "SHEET_URL", "https://example.test/pub?output=csv")
    monkeypatch.setattr(Config, "API_TIMEOUT", 12)
    client = SheetClient()
    assert client.url == "https://example.test/pub?output=csv"
    assert client.timeout == 12


def test_blank_url_is_not_configured():
    assert not SheetClient(url="").is_configured
    assert not SheetClient(url="   ").is_configured
    assert SheetClient(url="https://example.test/sheet.csv").is_configured


def test_fetch_csv_returns_body():
    client = SheetClient(url="https://example.test/sheet.csv", timeout=5)
    with patch("pgbee.api.sheets.requests.get", return_value=make_response("a,b\n")) as get:
        assert client.fetch_csv() == "a,b\n"
    get.assert_called_once_with("https://example.test/sheet.csv", timeout=5)


def test_fetch_csv_raises_on_non_success_status():
    client = SheetClient(url="https://example.test/sheet.csv")
    with patch("pgbee.api.sheets.requests.get", return_value=make_response("gone", status_code=404)):
        with pytest.raises(requests.HTTPError):
            client.fetch_csv()


def test_fetch_csv_propagates_transport_errors():
    client = SheetClient(url="https://example.test/sheet.csv")
    with patch("pgbee.api.sheets.requests.get", side_effect=requests.ConnectionError("down")):
        with pytest.raises(requests.ConnectionError):
            client.fetch_csv()


def test_fetch_csv_propagates_timeouts():
    client = SheetClient(url="https://example.test/sheet.csv")
    with patch("pgbee.api.sheets.requests.get", side_effect=requests.Timeout()):
        with pytest.raises(requests.Timeout):
            client.fetch_csv()
