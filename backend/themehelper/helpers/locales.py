"""Locale listing for language switchers."""

from __future__ import annotations

from themehelper.interfaces import RequestProtocol


def supported_locale_names(request: RequestProtocol) -> dict[str, str]:
    """Locales of the current context, or of the site when no context is active."""
    context = request.get_context()
    if context is not None:
        return context.get_supported_locale_names()
    return request.get_site().get_supported_locale_names()
