"""Shared pytest fixtures for EventMatch packages."""

import pytest
from eventmatch.conversions.config import EngineConfig
from eventmatch.conversions.schema import ConversionEvent


@pytest.fixture
def engine_config():
    """Engine config with default thresholds, independent of the environment."""
    return EngineConfig()


@pytest.fixture
def complete_user_data():
    """user_data with every recognized identity signal populated."""
    return {
        "em": ["7b17fb0bd173f625b58636fb796407c22b3d16fc78302d79f0fd30c2fc2fc068"],
        "ph": ["254aa248acb47dd654ca3ea53f48c2c26d641d23d7e2e93a1ec56258df7674c4"],
        "fn": ["96d9632f363564cc3032521409cf22a852f2032eec099ed5967c0d000cec607a"],
        "ln": ["799ef92a11af918e3fb741df42934f3b568ed2d93ac1df74f1b8d41a27932a6f"],
        "ct": ["9b03ac5ca7bf8a2eee3e2d3b2b9ce7d5b5f0c2ad8e1a7f2d6a4e1d9c7b3f0a12"],
        "st": ["6959097001d10501ac7d54c0bdb8db61420f658f2922cc26e46d536119a31126"],
        "zp": ["a9b0c2b6b7e4f1d3e8a7c6b5d4e3f2a1b0c9d8e7f6a5b4c3d2e1f0a9b8c7d6e5"],
        "country": ["79adb2a2fce5c6ba215fe5f27f532d4e7edbac4b6a5e09e1ef3a08084a904621"],
        "ge": ["62c66a7a5dd70c3146618063c344e531e6d4b59e379808443ce962b3abd63c5a"],
        "db": ["e1f0a9b8c7d6e5f4a3b2c1d0e9f8a7b6c5d4e3f2a1b0c9d8e7f6a5b4c3d2e1f0"],
        "client_ip_address": "203.0.113.42",
        "client_user_agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64)",
        "click_id": "IwAR2F4-dbP0l7Mn1IawQQGCINEz7PYXQvwjNwB_qa2ofrHyiLjcbCRxTDMgk",
        "fbc": "fb.1.1736937000000.IwAR2F4-dbP0l7Mn1IawQQGCINEz7PYXQvwjNwB_qa2ofrHyiLjcbCRxTDMgk",
        "fbp": "fb.1.1736936000000.1098115397",
        "external_id": "CUST-001",
    }


@pytest.fixture
def make_event():
    """Factory building a ConversionEvent with valid scalar fields."""

    def _make(user_data=None, **overrides):
        fields = {
            "event_name": "Purchase",
            "event_time": 1736937000,
            "action_source": "website",
            "event_id": "order-123",
            "user_data": {"em": ["hash_email"]} if user_data is None else user_data,
        }
        fields.update(overrides)
        return ConversionEvent(**fields)

    return _make


@pytest.fixture
def sample_event_data():
    """Sample tracking-hook event in camelCase, as received from the client."""
    return {
        "eventName": "Lead",
        "eventTime": 1736937000,
        "actionSource": "website",
        "eventId": "Lead-1736937000-k3j9x8a2b",
        "userData": {
            "em": ["hash_email"],
            "client_user_agent": "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X)",
            "fbp": "fb.1.1736936000000.1098115397",
        },
        "customData": {"content_name": "Sleep Quiz"},
    }
