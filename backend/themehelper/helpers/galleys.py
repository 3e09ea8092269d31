"""
ThemeHelper — Galley filtering.

Selects the galleys a theme should link to, e.g. only the primary
(article text) genres, with or without remote links.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from themehelper.interfaces import GalleyList, GalleyProtocol


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return [value]
    return list(value)


def filter_galleys(
    galleys: GalleyList,
    genre_ids: Iterable[int | str] | None = None,
    remotes: bool = False,
) -> list[GalleyProtocol]:
    """
    Keep galleys with a remote URL when `remotes` is set, and galleys whose
    file genre is in `genre_ids` (any genre when `genre_ids` is empty).
    Galleys without a file are dropped. Order is preserved.
    """
    # template values may arrive as strings
    genre_ids = {str(genre_id) for genre_id in _as_list(genre_ids)}
    filtered: list[GalleyProtocol] = []

    for galley in _as_list(galleys):
        if remotes and galley.get_remote_url():
            filtered.append(galley)
            continue
        file = galley.get_file()
        if not file:
            continue
        if not genre_ids or str(file.get_genre_id()) in genre_ids:
            filtered.append(galley)

    return filtered
