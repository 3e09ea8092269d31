"""ThemeHelper — template functions and safe plugin registration for publishing-platform themes."""

from themehelper.errors import (
    InvalidArgumentError,
    MissingParameterError,
    ThemeHelperError,
)
from themehelper.helper import ThemeHelper
from themehelper.hooks import HookRegistry
from themehelper.models import ELIDED, TemplatePlugin
from themehelper.pagination.calculator import compute_pages
from themehelper.templates.manager import TemplateManager
from themehelper.templates.registry import safe_register_template_plugin
from themehelper.utils.validate import is_effectively_empty, require_params

__all__ = [
    "ThemeHelper",
    "HookRegistry",
    "TemplateManager",
    "TemplatePlugin",
    "ELIDED",
    "compute_pages",
    "safe_register_template_plugin",
    "require_params",
    "is_effectively_empty",
    "ThemeHelperError",
    "MissingParameterError",
    "InvalidArgumentError",
]
