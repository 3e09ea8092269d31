"""
ThemeHelper — Safe template plugin registration.

Registering a name the engine already knows is a fatal error in the
engine. Registration here checks first: an existing plugin is kept,
unless the new one asks to override it.
"""

from __future__ import annotations

from themehelper.interfaces import TemplateManagerProtocol
from themehelper.models.plugin import TemplatePlugin
from themehelper.utils.logging import logger


def is_registered(template_mgr: TemplateManagerProtocol, plugin_type: str, name: str) -> bool:
    return name in template_mgr.registered_plugins.get(plugin_type, {})


def safe_register_template_plugin(template_mgr: TemplateManagerProtocol, plugin: TemplatePlugin) -> bool:
    """
    Register `plugin` unless the name is taken.

    Returns True when the plugin was (re-)registered, False when an
    existing registration was kept. Keeping it is not an error: two theme
    components may ship the same helper.
    """
    registered = is_registered(template_mgr, plugin.type, plugin.name)
    if registered and plugin.override:
        template_mgr.unregister_plugin(plugin.type, plugin.name)
        template_mgr.register_plugin(plugin.type, plugin.name, plugin.callback)
        logger.debug("Overrode %s plugin '%s'", plugin.type, plugin.name)
        return True
    if not registered:
        template_mgr.register_plugin(plugin.type, plugin.name, plugin.callback)
        logger.debug("Registered %s plugin '%s'", plugin.type, plugin.name)
        return True
    logger.debug("%s plugin '%s' already registered, keeping it", plugin.type, plugin.name)
    return False
