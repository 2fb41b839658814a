# -*- coding: utf-8 -*-
"""Location: ./tests/conftest.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Suite-wide pytest hooks.

Browser scenarios need a live Security Server console and only run when
explicitly enabled with ``--run-e2e`` or ``SSUI_E2E_RUN_E2E=1``. Classes
marked ``incremental`` stop at the first failing step: every later step is
reported as xfail instead of running against a half-built fixture state.
"""

# Standard
import os
import sys

# Third-Party
import pytest

E2E_OPT_IN_ENV = "SSUI_E2E_RUN_E2E"
E2E_OPT_IN_FLAGS = {"--run-e2e"}
_TRUTHY_ENV_VALUES = {"1", "true", "yes", "on"}


def _is_e2e_opted_in(config=None) -> bool:
    """Return True when browser scenarios are explicitly enabled."""
    env_opt_in = os.getenv(E2E_OPT_IN_ENV, "").strip().lower() in _TRUTHY_ENV_VALUES
    if config is not None:
        cli_opt_in = bool(config.getoption("--run-e2e"))
    else:
        cli_opt_in = any(flag in sys.argv for flag in E2E_OPT_IN_FLAGS)
    return env_opt_in or cli_opt_in


def pytest_addoption(parser):
    """Add the explicit opt-in flag for browser scenarios."""
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help=f"Run browser scenarios against a live console (same as setting {E2E_OPT_IN_ENV}=1).",
    )


def pytest_collection_modifyitems(config, items):
    """Skip e2e items unless opted in."""
    if _is_e2e_opted_in(config):
        return
    skip_e2e = pytest.mark.skip(reason=f"browser scenario; pass --run-e2e or set {E2E_OPT_IN_ENV}=1")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


def pytest_runtest_makereport(item, call):
    """Remember the first failing step of an incremental class."""
    if "incremental" in item.keywords and call.excinfo is not None and not call.excinfo.errisinstance(pytest.skip.Exception):
        item.parent._previousfailed = item


def pytest_runtest_setup(item):
    """Short-circuit the remaining steps of an incremental class after a failure."""
    if "incremental" in item.keywords:
        previousfailed = getattr(item.parent, "_previousfailed", None)
        if previousfailed is not None:
            pytest.xfail(f"previous step failed ({previousfailed.name})")
