"""Pytest configuration for tests.

No sys.path hacks - tests should import from the installed jsworkspace package.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def _debug_logging(caplog):
    """Capture jsworkspace debug records so failing tests show the search trail."""
    caplog.set_level(logging.DEBUG, logger="jsworkspace")
