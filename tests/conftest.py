"""
Pytest configuration for the feedblock test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Clean FEEDBLOCK_* environment and config for every test
- Log capture and cluster XML fixtures
"""

import os

import pytest
from loguru import logger

from feedblock.logging_config import setup_logging
from feedblock.limits import reset_limits_config
from feedblock.cli.config import CLIConfig


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Configure pytest for quiet operation."""
    os.environ.setdefault("FEEDBLOCK_MACHINE_MODE", "1")


# ============================================================================
# LOGGING FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, enable_file_logging=False, force=True)


@pytest.fixture
def log_messages():
    """
    Collect warning and error messages emitted through loguru.

    Usage:
        def test_something(log_messages):
            do_something_that_warns()
            assert any("proton" in m for m in log_messages)
    """
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)


# ============================================================================
# CONFIG FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def clean_limits_env(monkeypatch):
    """Remove FEEDBLOCK_* limit settings and reset cached config before each test."""
    for key in list(os.environ.keys()):
        if key.startswith("FEEDBLOCK_RESOURCE_LIMIT") or key in ("FEEDBLOCK_HOSTED", "FEEDBLOCK_HUMAN_MODE"):
            monkeypatch.delenv(key, raising=False)
    reset_limits_config()
    CLIConfig.reset()
    yield
    reset_limits_config()
    CLIConfig.reset()


# ============================================================================
# CLUSTER XML FIXTURES
# ============================================================================

CLUSTER_XML_WITH_LIMITS = """
<content id="music">
  <tuning>
    <resource-limits>
      <disk>0.4</disk>
      <memory>0.7</memory>
    </resource-limits>
  </tuning>
  <engine>
    <proton>
      <resource-limits>
        <address-space>0.93</address-space>
      </resource-limits>
    </proton>
  </engine>
</content>
"""


@pytest.fixture
def cluster_xml_file(tmp_path):
    """Write a content cluster XML file with explicit limits and return its path."""
    path = tmp_path / "content.xml"
    path.write_text(CLUSTER_XML_WITH_LIMITS)
    return path
