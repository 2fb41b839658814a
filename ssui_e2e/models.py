# -*- coding: utf-8 -*-
"""Location: ./ssui_e2e/models.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Models of the entities the scenarios create and inspect.

The suite does not own these entities; the models describe what the console
is expected to render so scenarios can compute expected labels, validation
outcomes and endpoint row positions instead of hard-coding them.

Examples:
    >>> table = EndpointTable()
    >>> table.add(Endpoint(method=HttpMethod.POST, path="/testreq2"))
    1
    >>> table.add(Endpoint(method=HttpMethod.POST, path="/testreq1"))
    2
    >>> table.reload()
    >>> table.position_of(Endpoint(method=HttpMethod.POST, path="/testreq2"))
    2
"""

# Standard
from enum import Enum
from typing import Iterable, List, Tuple
from urllib.parse import urlparse

# Third-Party
from pydantic import BaseModel, ConfigDict, Field

# First-Party
from ssui_e2e import constants
from ssui_e2e.errors import DuplicateEndpointError


class HttpMethod(str, Enum):
    """HTTP methods offered by the endpoint dialog, in menu order."""

    ALL = "ALL"
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"
    TRACE = "TRACE"


class ServiceType(str, Enum):
    """Kinds of REST service descriptions."""

    REST = "REST"
    OPENAPI3 = "OPENAPI3"

    @property
    def type_label(self) -> str:
        """Type shown in the service description details dialog."""
        return "REST API Base Path" if self is ServiceType.REST else "OpenAPI 3 Description"

    @property
    def added_message(self) -> str:
        """Snackbar text shown after a successful add."""
        return constants.REST_SERVICE_ADDED if self is ServiceType.REST else constants.OPENAPI_SERVICE_ADDED


class SubjectType(str, Enum):
    """Access right subject types listed by the add-subjects search."""

    SUBSYSTEM = "SUBSYSTEM"
    GLOBALGROUP = "GLOBALGROUP"
    LOCALGROUP = "LOCALGROUP"


class Endpoint(BaseModel):
    """A (method, path) rule under a REST service."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod = HttpMethod.ALL
    path: str = constants.DEFAULT_ENDPOINT_PATH

    @property
    def sort_key(self) -> Tuple[str, str]:
        """Rows sort by path, then by method name."""
        return (self.path, self.method.value)


class EndpointTable:
    """Expected contents and ordering of a service's endpoint table.

    The console sorts the table when it loads it. Endpoints added while the
    table stays open are appended below the loaded rows until the next load,
    so ``add`` returns the last position and ``reload`` restores the sorted
    order.
    """

    def __init__(self, endpoints: Iterable[Endpoint] = ()):
        self._endpoints: List[Endpoint] = []
        for endpoint in endpoints:
            self.add(endpoint)
        self.reload()

    def __len__(self) -> int:
        return len(self._endpoints)

    def __contains__(self, endpoint: Endpoint) -> bool:
        return endpoint in self._endpoints

    def rows(self) -> List[Endpoint]:
        """Endpoints in rendered order."""
        return list(self._endpoints)

    def reload(self) -> None:
        """Order the rows as a freshly loaded table shows them."""
        self._endpoints.sort(key=lambda e: e.sort_key)

    def position_of(self, endpoint: Endpoint) -> int:
        """Return the 1-based row index of an endpoint.

        Raises:
            KeyError: If the endpoint is not tracked.
        """
        try:
            return self._endpoints.index(endpoint) + 1
        except ValueError:
            raise KeyError(f"{endpoint.method.value} {endpoint.path}") from None

    def add(self, endpoint: Endpoint) -> int:
        """Append a new endpoint and return its row index.

        Raises:
            DuplicateEndpointError: If the (method, path) pair is already tracked.
        """
        if endpoint in self._endpoints:
            raise DuplicateEndpointError(endpoint.method.value, endpoint.path)
        self._endpoints.append(endpoint)
        return len(self._endpoints)

    def replace(self, old: Endpoint, new: Endpoint) -> int:
        """Swap an edited endpoint for its new values and return its row index.

        Saving an edit returns to a reloaded table, so the rows are re-sorted.
        """
        if new != old and new in self._endpoints:
            raise DuplicateEndpointError(new.method.value, new.path)
        self.remove(old)
        self._endpoints.append(new)
        self.reload()
        return self.position_of(new)

    def remove(self, endpoint: Endpoint) -> None:
        """Stop tracking an endpoint."""
        try:
            self._endpoints.remove(endpoint)
        except ValueError:
            raise KeyError(f"{endpoint.method.value} {endpoint.path}") from None


class ServiceDescription(BaseModel):
    """A client-owned REST or OpenAPI 3 service description."""

    service_type: ServiceType = ServiceType.REST
    url: str
    code: str = Field(min_length=1)
    enabled: bool = False

    @property
    def description_label(self) -> str:
        """Header text of the description row, e.g. ``REST (https://host/api/)``."""
        return f"{self.service_type.value} ({self.url})"

    @property
    def is_valid(self) -> bool:
        """Whether the console's syntax checks accept the code and URL."""
        return is_valid_service_code(self.code) and is_valid_rest_url(self.url)

    @property
    def add_outcome(self) -> str:
        """Snackbar text expected after submitting this description in the add dialog."""
        return self.service_type.added_message if self.is_valid else constants.VALIDATION_FAILURE

    @property
    def save_outcome(self) -> str:
        """Snackbar text expected after saving this description in the details dialog."""
        return constants.DESCRIPTION_SAVED if self.is_valid else constants.VALIDATION_FAILURE


def is_valid_service_code(code: str) -> bool:
    """Return whether the console accepts a service code.

    Examples:
        >>> is_valid_service_code("s1c1")
        True
        >>> is_valid_service_code("/")
        False
        >>> is_valid_service_code("")
        False
    """
    return bool(code) and "/" not in code


def is_valid_rest_url(url: str) -> bool:
    """Return whether a string passes the console's REST URL syntax check.

    Examples:
        >>> is_valid_rest_url("https://niis.org/nosuch/api/v1/test/")
        True
        >>> is_valid_rest_url("foobar")
        False
    """
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class ServiceState(BaseModel):
    """Expected console state of the service under test, handed along a scenario chain."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    description: ServiceDescription
    endpoints: EndpointTable = Field(default_factory=EndpointTable)
