"""Exception types raised across truss-dashboard.

Document errors are recovered inside the catalog service and never reach
widget code; missing fields inside a readable document are not errors at all.
"""


class DashboardError(Exception):
    """Base class for all truss-dashboard errors."""


class DocumentUnavailableError(DashboardError):
    """The OpenAPI document could not be read."""


class DocumentNotFoundError(DocumentUnavailableError):
    """The OpenAPI document does not exist."""


class MalformedDocumentError(DashboardError):
    """The OpenAPI document is not valid JSON/YAML or has no mapping root."""


class VendorApiError(DashboardError):
    """A request to the vendor design API failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class WidgetConfigError(DashboardError):
    """A widget configuration cannot be applied to the dashboard."""
