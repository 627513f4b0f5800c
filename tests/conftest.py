"""
Root test configuration and fixtures for fieldcheck.

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fieldcheck.lookup import MappingFieldLookup  # noqa: E402
from fieldcheck.settings import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_settings_and_logging(monkeypatch):
    """Give every test fresh settings and an unconfigured fieldcheck logger.

    configure_logging() stops propagation to the root logger, which would
    hide records from caplog in later tests.
    """
    for name in ("LOG_LEVEL", "LOG_SOURCE", "STRICT_RULES", "CONFIRM_EMAIL_SELECTOR"):
        monkeypatch.delenv(f"FIELDCHECK_{name}", raising=False)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
    package_logger = logging.getLogger("fieldcheck")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def signup_form():
    """Submitted signup form data."""
    return {
        "name": "Testy McTest",
        "email": "testy@camp.local",
        "website": "https://camp.local/testy",
    }


@pytest.fixture
def signup_lookup(signup_form):
    """Field lookup over the submitted signup form."""
    return MappingFieldLookup(signup_form)
