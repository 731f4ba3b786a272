#!/usr/bin/env python3
"""
Shared test configuration and fixtures for the mail forwarder.
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def _no_network(monkeypatch):
    """Mock all boto3 clients to prevent actual AWS calls during testing."""

    def mock_boto3_client(*args, **kwargs):
        mock_client = MagicMock()
        mock_client.send_raw_email.return_value = {"MessageId": "mock-message-id"}
        return mock_client

    monkeypatch.setattr("boto3.client", mock_boto3_client)


@pytest.fixture(autouse=True)
def _clean_forwarder_env(monkeypatch):
    """Remove forwarder settings inherited from the shell."""
    for name in list(os.environ):
        if name.startswith("FORWARD_RULE_") or name in (
            "SENDER_ADDRESS",
            "DEFAULT_RECIPIENT",
            "EMAIL_BUCKET",
            "EMAIL_KEY_PREFIX",
        ):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def forwarder_env(monkeypatch):
    """Environment used by the forwarding scenarios."""
    monkeypatch.setenv("SENDER_ADDRESS", "relay@svc.com")
    monkeypatch.setenv("DEFAULT_RECIPIENT", "catchall@new.com")
    monkeypatch.setenv("FORWARD_RULE_1", "alice@old.com;alice@new.com")
    return monkeypatch
