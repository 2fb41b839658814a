# -*- coding: utf-8 -*-
"""Location: ./tests/playwright/pages/components/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Page components package.
"""

from .snackbar_component import SnackbarComponent
from .tabs_component import TabsComponent

__all__ = ["SnackbarComponent", "TabsComponent"]
