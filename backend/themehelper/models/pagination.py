"""
ThemeHelper — Pagination request/result contracts.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from themehelper.core.config import settings
from themehelper.errors import InvalidArgumentError

ELIDED = -1  # marker for a skipped run of pages


class PaginationRequest(BaseModel):
    per_page: int
    total: int
    start: int
    max_pages: int = Field(default_factory=lambda: settings.max_pages)

    @classmethod
    def from_params(cls, **values: Any) -> "PaginationRequest":
        """Coerce raw template values ("10", 10.0, ...) into a request."""
        values = {k: v for k, v in values.items() if v is not None}
        try:
            return cls(**values)
        except PydanticValidationError as exc:
            first = exc.errors()[0]
            field = str(first["loc"][0]) if first.get("loc") else "pagination"
            raise InvalidArgumentError(field, values.get(field), first["msg"]) from exc


class PaginationResult(BaseModel):
    current_page: int
    last_page: int
    pages: list[int] = Field(default_factory=list)

    @property
    def is_truncated(self) -> bool:
        return ELIDED in self.pages
