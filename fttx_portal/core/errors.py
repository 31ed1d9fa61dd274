"""Error Hierarchy — typed, categorized exceptions for all portal failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Startup errors are fatal: the process exits, nothing retries
    - TemplateRenderError is the only per-request error class

Design Decisions:
    - Single hierarchy with PortalError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: observability data without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    STARTUP = "startup"
    DATASET = "dataset"
    RENDERING = "rendering"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    template_name: str | None = None


class PortalError(Exception):
    """Base exception for all portal errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status


# ─── Startup Errors (fatal) ─────────────────────────────────────

class TemplateAssetsError(PortalError):
    """Template directory or a required template is missing or unparseable."""
    def __init__(self, message: str, template_name: str | None = None):
        super().__init__(
            message, "TEMPLATE_ASSETS_UNAVAILABLE", ErrorCategory.STARTUP,
            ErrorSeverity.CRITICAL, ErrorContext(template_name=template_name), 500,
        )


class DuplicateMunicipalityError(PortalError):
    """Two records in the dataset share an id."""
    def __init__(self, municipality_id: int):
        super().__init__(
            f"Duplicate municipality id {municipality_id} in dataset",
            "DUPLICATE_MUNICIPALITY_ID", ErrorCategory.DATASET,
            ErrorSeverity.CRITICAL, None, 500,
        )
        self.municipality_id = municipality_id


# ─── Request Errors ─────────────────────────────────────────────

class TemplateRenderError(PortalError):
    """Template execution failed while rendering a page."""
    def __init__(self, message: str, template_name: str, path: str | None = None):
        super().__init__(
            message, "TEMPLATE_RENDER_FAILED", ErrorCategory.RENDERING,
            ErrorSeverity.ERROR,
            ErrorContext(path=path, template_name=template_name), 500,
        )
