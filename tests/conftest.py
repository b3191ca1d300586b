from typing import Dict
from unittest.mock import MagicMock

import pytest
from freezegun import freeze_time

DEFAULT_ENV = {
    "AWS_ACCESS_KEY_ID": "test-access-key",
    "AWS_SECRET_ACCESS_KEY": "test-secret-key",
    "AWS_SESSION_TOKEN": "test-session",
    "AWS_DEFAULT_REGION": "us-east-1",
    "SHOPIFY_API_KEY": "test-key",
    "SHOPIFY_API_PASSWORD": "test-password",
    "SHOPIFY_DOMAIN": "test-store",
    "LOW_STOCK_TOPIC_ARN": "arn:aws:sns:us-east-1:123456789012:LowStock",
}


@pytest.fixture(autouse=True)
def _test_env(monkeypatch):
    for key, value in DEFAULT_ENV.items():
        monkeypatch.setenv(key, value)
    for key in ("LOW_STOCK_THRESHOLD", "SHOPIFY_REQUEST_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture(autouse=True)
def stubbed_boto3_session(monkeypatch):
    """
    Prevent real AWS calls by replacing boto3.Session with a lightweight stub.
    """
    import boto3

    class _StubSession:
        def __init__(self):
            self.clients: Dict[str, MagicMock] = {}

        def client(self, service_name: str, region_name: str | None = None):
            client = self.clients.get(service_name)
            if not client:
                client = MagicMock(name=f"{service_name}_client")
                self.clients[service_name] = client
            return client

    session = _StubSession()
    monkeypatch.setattr(boto3, "Session", lambda **_: session)
    monkeypatch.setattr("stocknotifier.util.aws.boto3_session", session)
    monkeypatch.setattr("stocknotifier.facade.sns.sns_facade.boto3_session",
                        session)
    monkeypatch.setattr("stocknotifier.util.logging.boto3_session", session)
    return session


@pytest.fixture
def freezer():
    """
    Provide a FrozenDateTimeFactory so tests can adjust time deterministically.
    """
    with freeze_time("2020-01-01T00:00:00Z") as frozen_datetime:
        yield frozen_datetime


@pytest.fixture
def notifier_config():
    from stocknotifier.util.config import NotifierConfig

    return NotifierConfig(
        shopify_api_key="test-key",
        shopify_api_password="test-password",
        shopify_domain="test-store",
        topic_arn=DEFAULT_ENV["LOW_STOCK_TOPIC_ARN"],
    )
