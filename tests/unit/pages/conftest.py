# -*- coding: utf-8 -*-
"""Location: ./tests/unit/pages/conftest.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Fixtures for exercising page objects without a browser.
"""

# Standard
from unittest.mock import MagicMock, patch

# Third-Party
import pytest


@pytest.fixture
def mock_page():
    """A Playwright Page stand-in; every locator chain resolves to a MagicMock."""
    return MagicMock(name="page")


@pytest.fixture
def mock_expect():
    """Replace Playwright's ``expect`` used by the page objects' waits."""
    with patch("tests.playwright.pages.base_page.expect") as expect:
        yield expect
