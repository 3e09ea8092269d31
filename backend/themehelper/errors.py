"""
ThemeHelper — Structured error catalog.

Every error has a code, human message, and suggested fix.
Errors surface to the theme developer through the template engine.
"""

from __future__ import annotations

from typing import Any


class ThemeHelperError(Exception):
    """Base error with structured code + suggestion."""

    def __init__(self, code: str, message: str, suggestion: str = "", detail: Any = None):
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.detail = detail
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "error_code": self.code,
            "message": self.message,
        }
        if self.suggestion:
            d["suggestion"] = self.suggestion
        if self.detail:
            d["detail"] = self.detail
        return d


class MissingParameterError(ThemeHelperError):
    def __init__(self, function: str, missing_param: str, required_params: list[str] | None = None):
        self.function = function
        self.missing_param = missing_param
        self.required_params = list(required_params or [])
        example_params = " ".join(f'{param}="..."' for param in self.required_params)
        usage = f"{{{function} {example_params}}}" if example_params else f"{{{function}}}"
        super().__init__(
            code="MISSING_PARAMETER",
            message=(
                f"Call to {{{function}}} without the required `{missing_param}` parameter. "
                f"Usage: {usage}"
            ),
            suggestion=f"Pass a non-empty `{missing_param}` parameter to {{{function}}}.",
            detail=self.required_params,
        )


class InvalidArgumentError(ThemeHelperError):
    def __init__(self, argument: str, value: Any, reason: str):
        self.argument = argument
        self.value = value
        super().__init__(
            code="INVALID_ARGUMENT",
            message=f"Invalid value for `{argument}`: {value!r} ({reason})",
            suggestion=f"Check the `{argument}` value passed from the template.",
        )


class PluginAlreadyRegisteredError(ThemeHelperError):
    def __init__(self, plugin_type: str, name: str):
        super().__init__(
            code="PLUGIN_ALREADY_REGISTERED",
            message=f"Plugin '{name}' of type '{plugin_type}' is already registered",
            suggestion="Register through ThemeHelper, or set override=True to replace it.",
        )


class PluginNotFoundError(ThemeHelperError):
    def __init__(self, plugin_type: str, name: str):
        super().__init__(
            code="PLUGIN_NOT_FOUND",
            message=f"No plugin '{name}' of type '{plugin_type}' is registered",
            suggestion="Check the plugin name, or make sure the display hook has run.",
        )
