from unittest.mock import MagicMock

import pytest

from enskit.config import settings
from enskit.contracts import CONTRACT_SETTINGS

TEST_PRIVATE_KEY = '0x' + '11' * 32


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
  """Ignore whatever the developer's .env holds."""
  for key in CONTRACT_SETTINGS.values():
    monkeypatch.setattr(settings, key, '')
  monkeypatch.setattr(settings, 'ENS_RPC_URL', '')
  monkeypatch.setattr(settings, 'ENS_CHAIN_ID', 1)
  monkeypatch.setattr(settings, 'ENS_PRIVATE_KEY', '')


@pytest.fixture
def mock_w3(monkeypatch):
  """Replace the provider with a MagicMock; returns the mock."""
  w3 = MagicMock()
  monkeypatch.setattr('enskit.utils.web3_utils.get_w3', lambda chain_id=None: w3)
  return w3


@pytest.fixture
def wallet(monkeypatch):
  monkeypatch.setattr(settings, 'ENS_PRIVATE_KEY', TEST_PRIVATE_KEY)
  return TEST_PRIVATE_KEY
