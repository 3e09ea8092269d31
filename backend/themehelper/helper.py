"""
ThemeHelper — Template function registration for publishing-platform themes.

Collects template plugins and registers them with the template manager
when a template is displayed, after the platform has registered its own
plugins. This lets a theme override core plugins by name.

Template functions:
  {th_locales assign="languages"}
  {th_filter_galleys assign="galleys" galleys=$galleys genreIds=$ids remotes=true}
  {th_pagination assignPages="pages" assignCurrent="current" perPage=25 total=$total start=$showingStart}
"""

from __future__ import annotations

import logging
from typing import Any

from themehelper.core.config import settings
from themehelper.helpers.galleys import filter_galleys
from themehelper.helpers.locales import supported_locale_names
from themehelper.hooks import DISPLAY_HOOK, HookRegistry
from themehelper.interfaces import RequestProtocol, TemplateManagerProtocol
from themehelper.models.pagination import PaginationRequest
from themehelper.models.plugin import TemplatePlugin
from themehelper.pagination.calculator import paginate
from themehelper.templates.registry import safe_register_template_plugin
from themehelper.utils.logging import logger, step_timer
from themehelper.utils.validate import is_effectively_empty, require_params, require_present

PAGINATED_TEMPLATES = [
    "frontend/pages/issueArchive.tpl",
    "frontend/pages/catalog.tpl",
    "frontend/pages/catalogSeries.tpl",
    "frontend/pages/catalogCategory.tpl",
]

PAGINATION_PARAMS = ["assignPages", "assignCurrent", "perPage", "total", "start"]


class ThemeHelper:
    """
    Registers theme template plugins on the display hook.

    Plugins are applied in the order they were added. A name that is
    already registered is kept unless the plugin sets override=True.
    """

    def __init__(
        self,
        template_mgr: TemplateManagerProtocol,
        request: RequestProtocol,
        hooks: HookRegistry,
    ):
        self.template_mgr = template_mgr
        self.request = request
        self.hooks = hooks
        self.template_plugins: list[TemplatePlugin] = []
        hooks.register(DISPLAY_HOOK, self.register_template_plugins)

    def add_common_template_plugins(self) -> None:
        """Queue th_locales, th_filter_galleys and th_pagination."""
        self.add_template_plugin(TemplatePlugin(type="function", name="th_locales", callback=self.set_locales))
        self.add_template_plugin(
            TemplatePlugin(type="function", name="th_filter_galleys", callback=self.filter_galleys)
        )
        self.add_template_plugin(TemplatePlugin(type="function", name="th_pagination", callback=self.pagination))

    def add_template_plugin(self, plugin: TemplatePlugin) -> None:
        self.template_plugins.append(plugin)

    def register_template_plugins(self, hook_name: str, args: list) -> bool:
        """Display hook callback. Never stops the hook chain."""
        registered = 0
        with step_timer(f"{hook_name} plugin registration", level=logging.DEBUG):
            for plugin in self.template_plugins:
                registered += safe_register_template_plugin(self.template_mgr, plugin)
        if registered:
            logger.info("Registered %d template plugin(s)", registered)
        return False

    # ── Template functions ───────────────────────────────

    def set_locales(self, params: dict[str, Any], smarty: TemplateManagerProtocol) -> None:
        require_params(params, ["assign"], "th_locales")
        smarty.assign(params["assign"], supported_locale_names(self.request))

    def filter_galleys(self, params: dict[str, Any], smarty: TemplateManagerProtocol) -> None:
        require_params(params, ["assign", "galleys"], "th_filter_galleys")
        galleys = filter_galleys(
            params["galleys"],
            genre_ids=params.get("genreIds"),
            remotes=not is_effectively_empty(params.get("remotes")),
        )
        smarty.assign(params["assign"], galleys)

    def pagination(self, params: dict[str, Any], smarty: TemplateManagerProtocol) -> None:
        require_params(params, ["assignPages", "assignCurrent", "perPage"], "th_pagination", PAGINATION_PARAMS)
        require_present(params, ["total", "start"], "th_pagination", PAGINATION_PARAMS)
        request = PaginationRequest.from_params(
            per_page=params["perPage"],
            total=params["total"],
            start=params["start"],
            max_pages=params.get("maxPages"),
        )
        result = paginate(request)
        smarty.assign(params["assignPages"], result.pages)
        smarty.assign(params["assignCurrent"], result.current_page)

    # ── Pagination template data ─────────────────────────

    def items_per_page(self) -> int:
        context = self.request.get_context()
        per_page = context.get_data("itemsPerPage") if context is not None else None
        return int(per_page) if per_page else settings.items_per_page

    def add_pagination_data(self, templates: list[str] | None = None) -> None:
        """
        Add {$currentPage} and {$lastPage} to paginated templates.

        The templates must have `total` and `showingStart` assigned.
        Defaults to the core archive and catalog templates.
        """
        templates = list(templates) if templates else list(PAGINATED_TEMPLATES)

        def _assign_pagination(hook_name: str, args: list) -> bool:
            template = args[1] if len(args) > 1 else None
            if template not in templates:
                return False
            total = self.template_mgr.get_template_vars("total")
            if total is None:
                logger.debug("%s has no `total` variable, skipping pagination data", template)
                return False
            showing_start = self.template_mgr.get_template_vars("showingStart") or 0
            request = PaginationRequest.from_params(
                per_page=self.items_per_page(), total=total, start=showing_start,
            )
            result = paginate(request)
            self.template_mgr.assign({
                "currentPage": result.current_page,
                "lastPage": result.last_page,
            })
            return False

        self.hooks.register(DISPLAY_HOOK, _assign_pagination)
