# -*- coding: utf-8 -*-
"""Location: ./ssui_e2e/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Security Server UI E2E - browser tests for client REST and OpenAPI service management.
"""

__copyright__ = "Copyright 2025"
__license__ = "Apache 2.0"
__version__ = "1.0.0"
__description__ = "End-to-end browser tests for Security Server client services"
__packages__ = ["ssui_e2e"]
