"""Shared fixtures for leaderboard tests"""

import logging

import pytest
import requests

SAMPLE_CSV = (
    "Name,Wk1,Wk2\n"
    ",12/01,12/08\n"
    "Alice,10,5\n"
    "Bob,7,\n"
    "Carol,abc,20\n"
)


def make_response(text: str = "", status_code: int = 200, url: str = "https://example.test/sheet.csv"):
    """Build a real requests.Response without touching the network"""
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    resp.url = url
    return resp


class FakeSheetClient:
    """Stands in for SheetClient; replays queued results"""

    def __init__(self, results=None, configured: bool = True):
        self.results = list(results or [])
        self.configured = configured
        self.calls = 0

    @property
    def is_configured(self) -> bool:
        return self.configured

    def fetch_csv(self) -> str:
        self.calls += 1
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def sample_csv():
    return SAMPLE_CSV


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Drop handlers installed by setup_logging() between tests"""
    yield
    logger = logging.getLogger("pgbee")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
