"""In-process hook registry for lifecycle events such as template display."""

from __future__ import annotations

from themehelper.interfaces import HookCallback
from themehelper.utils.logging import logger

DISPLAY_HOOK = "TemplateManager::display"


class HookRegistry:
    def __init__(self):
        self.hooks: dict[str, list[HookCallback]] = {}

    def register(self, hook_name: str, callback: HookCallback):
        self.hooks.setdefault(hook_name, []).append(callback)

    def call(self, hook_name: str, *args) -> bool:
        """Run callbacks in registration order; a True return stops the chain."""
        for callback in self.hooks.get(hook_name, []):
            if callback(hook_name, list(args)):
                logger.debug("Hook %s handled by %r", hook_name, callback)
                return True
        return False
