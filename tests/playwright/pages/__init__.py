# -*- coding: utf-8 -*-
"""Location: ./tests/playwright/pages/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Page objects for Playwright tests.
"""

from .access_rights_page import AddSubjectsPopup
from .base_page import BasePage
from .base_section import BaseSection
from .client_services_page import ClientServicesSection
from .clients_page import ClientInfoSection, ClientsTabSection
from .dialogs import ConfirmationDialog, RemoveAccessRightDialog, RemoveAllAccessRightsDialog
from .endpoints_page import AddEndpointPopup, EditEndpointPopup, RestServiceEndpointsSection
from .login_page import LoginPage
from .main_page import MainPage
from .operation_details_page import RestOperationDetailsSection
from .service_details_page import OpenApiServiceDetailsSection, RestServiceDetailsSection

__all__ = [
    "AddEndpointPopup",
    "AddSubjectsPopup",
    "BasePage",
    "BaseSection",
    "ClientInfoSection",
    "ClientServicesSection",
    "ClientsTabSection",
    "ConfirmationDialog",
    "EditEndpointPopup",
    "LoginPage",
    "MainPage",
    "OpenApiServiceDetailsSection",
    "RemoveAccessRightDialog",
    "RemoveAllAccessRightsDialog",
    "RestOperationDetailsSection",
    "RestServiceDetailsSection",
    "RestServiceEndpointsSection",
]
