"""Search pages by title and normalize the results."""

from __future__ import annotations

import logging
from typing import Any

from notion2md.gateway import ContentGateway
from notion2md.schemas import PageRef, first_run_text

logger = logging.getLogger(__name__)

_TITLE_PROPERTY_NAMES = ("title", "Name")


def list_pages(query: str, gateway: ContentGateway) -> list[PageRef]:
    """Return title-bearing pages matching ``query`` in result order.

    Results without a resolvable title are dropped, and an id seen twice
    keeps its first occurrence.
    """
    refs: list[PageRef] = []
    seen: set[str] = set()
    for result in gateway.search_pages(query):
        object_id = result.get("id") or ""
        title = resolve_title(result)
        if not object_id or not title:
            logger.debug("Dropping search result without title", extra={"block_id": object_id})
            continue
        if object_id in seen:
            continue
        seen.add(object_id)
        refs.append(PageRef(id=object_id, title=title))
    return refs


def resolve_title(result: dict[str, Any]) -> str:
    """Title of a search result, by object kind; empty if none."""
    object_kind = result.get("object")
    if object_kind == "page":
        properties = result.get("properties") or {}
        for name in _TITLE_PROPERTY_NAMES:
            prop = properties.get(name)
            if isinstance(prop, dict) and prop.get("type") == "title":
                return first_run_text(prop.get("title"))
        return ""
    if object_kind == "database":
        return first_run_text(result.get("title"))
    if object_kind == "block":
        for key in ("child_page", "child_database"):
            title = (result.get(key) or {}).get("title")
            if title:
                return title
    return ""
