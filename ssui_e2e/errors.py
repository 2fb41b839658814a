# -*- coding: utf-8 -*-
"""Location: ./ssui_e2e/errors.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Failure taxonomy for scenario runs.

Every error is scenario-fatal. They derive from ``AssertionError`` so pytest
reports them as test failures rather than errors in the harness.

Examples:
    >>> err = WaitTimeoutError("snackbar", "visible", 5000)
    >>> print(err)
    Timed out after 5000 ms waiting for snackbar to be visible
    >>> isinstance(err, AssertionError)
    True
"""

# Standard
from typing import Any, Optional


class ScenarioError(AssertionError):
    """Base class for all scenario failures."""


class WaitTimeoutError(ScenarioError):
    """An element never reached the required state within the allotted time."""

    def __init__(self, description: str, state: str, timeout_ms: Optional[int] = None):
        self.description = description
        self.state = state
        self.timeout_ms = timeout_ms
        if timeout_ms is None:
            message = f"Timed out waiting for {description} to be {state}"
        else:
            message = f"Timed out after {timeout_ms} ms waiting for {description} to be {state}"
        super().__init__(message)


class UnexpectedStateError(ScenarioError):
    """A point-in-time assertion did not hold."""

    def __init__(self, description: str, expected: Any, actual: Any):
        self.description = description
        self.expected = expected
        self.actual = actual
        super().__init__(f"{description}: expected {expected!r}, got {actual!r}")


class DuplicateEndpointError(ScenarioError):
    """An endpoint with the same method and path is already tracked for the service."""

    def __init__(self, method: str, path: str):
        self.method = method
        self.path = path
        super().__init__(f"Endpoint {method} {path} already exists")


class ConfigurationError(ValueError):
    """Settings could not be interpreted."""
