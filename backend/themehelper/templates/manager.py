"""
ThemeHelper — In-memory template manager.

Implements the plugin registry and variable store of a template engine,
without rendering. Useful for wiring a theme outside the host platform
and for tests.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from themehelper.errors import PluginAlreadyRegisteredError, PluginNotFoundError
from themehelper.hooks import DISPLAY_HOOK, HookRegistry


class TemplateManager:
    """Plugin registry + assigned template variables."""

    def __init__(self, hooks: HookRegistry | None = None):
        self.hooks = hooks or HookRegistry()
        self.registered_plugins: dict[str, dict[str, Callable[..., Any]]] = {}
        self._vars: dict[str, Any] = {}

    def register_plugin(self, plugin_type: str, name: str, callback: Callable[..., Any]) -> None:
        plugins = self.registered_plugins.setdefault(plugin_type, {})
        if name in plugins:
            raise PluginAlreadyRegisteredError(plugin_type, name)
        plugins[name] = callback

    def unregister_plugin(self, plugin_type: str, name: str) -> None:
        self.registered_plugins.get(plugin_type, {}).pop(name, None)

    def assign(self, name: str | Mapping[str, Any], value: Any = None) -> None:
        if isinstance(name, Mapping):
            self._vars.update(name)
        else:
            self._vars[name] = value

    def get_template_vars(self, name: str | None = None) -> Any:
        if name is None:
            return dict(self._vars)
        return self._vars.get(name)

    def call_plugin(self, plugin_type: str, name: str, params: dict[str, Any] | None = None) -> Any:
        """Invoke a registered plugin the way the engine would from a template tag."""
        try:
            callback = self.registered_plugins[plugin_type][name]
        except KeyError:
            raise PluginNotFoundError(plugin_type, name) from None
        return callback(params or {}, self)

    def display(self, template: str) -> dict[str, Any]:
        """Fire the display hook for `template` and return the template variables."""
        self.hooks.call(DISPLAY_HOOK, self, template)
        return self.get_template_vars()
