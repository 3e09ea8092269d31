"""
ThemeHelper — Template plugin registration model.
"""

from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field


class TemplatePlugin(BaseModel):
    """
    A named callback to register with the template engine.

    `type` is the engine's plugin category ("function", "modifier", ...).
    With `override` set, an existing registration under the same
    type + name is replaced instead of kept.
    """

    model_config = ConfigDict(frozen=True)

    type: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=1, max_length=200)
    callback: Callable[..., Any]
    override: bool = False
