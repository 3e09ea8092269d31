"""ThemeHelper data models — typed contracts for registrations and pagination."""

from themehelper.models.plugin import TemplatePlugin
from themehelper.models.pagination import (
    ELIDED,
    PaginationRequest,
    PaginationResult,
)

__all__ = [
    "TemplatePlugin",
    "ELIDED",
    "PaginationRequest",
    "PaginationResult",
]
