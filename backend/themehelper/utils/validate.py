"""
ThemeHelper — Parameter validation for template function calls.

Template functions receive a flat {key: value} map from the engine.
Required keys must be present and non-empty.
"""

from collections.abc import Mapping, Sequence, Set
from typing import Any

from themehelper.errors import MissingParameterError


def is_effectively_empty(value: Any) -> bool:
    """
    Loose emptiness: None, False, numeric zero, "", "0" and empty collections.
    """
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, str):
        return value == "" or value == "0"
    if isinstance(value, (Sequence, Mapping, Set)):
        return len(value) == 0
    return False


def require_params(params: Mapping[str, Any], required: Sequence[str], function: str,
                   usage: Sequence[str] | None = None) -> bool:
    """
    Raise MissingParameterError for the first required key that is absent
    or empty. Returns True when every key is set.

    `usage` lists every key of the function for the error's usage hint;
    defaults to `required`.
    """
    for key in required:
        if key not in params or is_effectively_empty(params[key]):
            raise MissingParameterError(function, key, list(usage or required))
    return True


def require_present(params: Mapping[str, Any], keys: Sequence[str], function: str,
                    required: Sequence[str]) -> bool:
    """Like require_params, but zero and empty strings count as supplied."""
    for key in keys:
        if params.get(key) is None:
            raise MissingParameterError(function, key, list(required))
    return True
