# -*- coding: utf-8 -*-
"""Location: ./ssui_e2e/constants.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

User-visible texts asserted by the scenarios.

Snackbar notifications, inline field validation messages, dialog titles and
tooltips as rendered by the Security Server admin console.
"""

# ==================== Snackbar Notifications ====================

REST_SERVICE_ADDED = "REST service added"
OPENAPI_SERVICE_ADDED = "OpenApi3 service added"
OPENAPI_PARSING_FAILED = "Parsing OpenApi3 description failed"
VALIDATION_FAILURE = "Validation failure"
SERVICE_SAVED = "Service saved"
DESCRIPTION_SAVED = "Description saved"
SERVICE_ENABLED = "Service description enabled"
SERVICE_DISABLED = "Service description disabled"
SERVICE_DELETED = "Service description deleted"
ACCESS_RIGHTS_ADDED = "Access rights added successfully"
ACCESS_RIGHTS_REMOVED = "Access rights removed successfully"
ENDPOINT_CREATED = "New endpoint created successfully"
ENDPOINT_SAVED = "Changes to endpoint saved successfully"
ENDPOINT_REMOVED = "Endpoint removed successfully"
ENDPOINT_DUPLICATE = "Endpoint with equivalent service code, method and path already exists for this client"

# ==================== Inline Validation Messages ====================

URL_REQUIRED = "The URL field is required"
REST_URL_INVALID = "REST URL is not valid"
SERVICE_CODE_REQUIRED = "The Service Code field is required"
PATH_REQUIRED = "The path field is required"
# The edit dialogs reuse the WSDL validator and an untranslated field key.
EDIT_URL_INVALID = "WSDL URL is not valid"
EDIT_CODE_REQUIRED = "The fields.code_field field is required"

# ==================== Dialog Titles ====================

DISABLE_DIALOG_TITLE = "Disable?"
DELETE_ENDPOINT_DIALOG_TITLE = "Delete endpoint"

# ==================== Tooltips ====================

TOOLTIP_URL = "The URL where requests targeted at the service are directed"
TOOLTIP_TIMEOUT = "The maximum duration of a request to the service, in seconds"
TOOLTIP_VERIFY_CERT = "Verify TLS certificate when a secure connection is established"

# ==================== Defaults ====================

DEFAULT_ENDPOINT_PATH = "/"
DEFAULT_OPERATION_TIMEOUT = "60"
