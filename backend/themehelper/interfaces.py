"""
ThemeHelper — Interfaces of the host platform objects the helpers consume.

The template manager, request and galley objects belong to the host
application; only the methods used here are described.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Protocol, runtime_checkable


@runtime_checkable
class TemplateManagerProtocol(Protocol):
    registered_plugins: dict[str, dict[str, Callable[..., Any]]]

    def register_plugin(self, plugin_type: str, name: str, callback: Callable[..., Any]) -> None: ...

    def unregister_plugin(self, plugin_type: str, name: str) -> None: ...

    def assign(self, name: str | Mapping[str, Any], value: Any = None) -> None: ...

    def get_template_vars(self, name: str | None = None) -> Any: ...


class SiteProtocol(Protocol):
    def get_supported_locale_names(self) -> dict[str, str]: ...


class ContextProtocol(SiteProtocol, Protocol):
    """A journal, press or preprint server."""

    def get_data(self, key: str) -> Any: ...


class RequestProtocol(Protocol):
    def get_context(self) -> ContextProtocol | None: ...

    def get_site(self) -> SiteProtocol: ...


class SubmissionFileProtocol(Protocol):
    def get_genre_id(self) -> int | None: ...


class GalleyProtocol(Protocol):
    def get_remote_url(self) -> str | None: ...

    def get_file(self) -> SubmissionFileProtocol | None: ...


HookCallback = Callable[[str, list], bool]
GalleyList = Iterable[GalleyProtocol]
