import httpx
import pytest

from clubhouse_sdk import ClientConfig, ClubhouseClient
from clubhouse_sdk._internal.ratelimit import UnlimitedLimiter

BASE = "https://api.test/api/v2"


@pytest.fixture
def client():
    config = ClientConfig(auth_token="test-token", root_url="https://api.test/api/")
    with httpx.Client() as http_client:
        yield ClubhouseClient(config, http_client=http_client, limiter=UnlimitedLimiter())


@pytest.fixture
def test_mode_client():
    config = ClientConfig(
        auth_token="test-token", root_url="https://api.test/api/", test_mode=True
    )
    with httpx.Client() as http_client:
        yield ClubhouseClient(config, http_client=http_client, limiter=UnlimitedLimiter())
