# -*- coding: utf-8 -*-
"""Location: ./ssui_e2e/utils/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Utility helpers shared by page objects and scenarios.
"""
