"""Assemble rendered pages from page references."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from notion2md.exceptions import Notion2mdError, PageContentError
from notion2md.gateway import ContentGateway
from notion2md.schemas import Page, PageRef
from notion2md.walker import render_tree

logger = logging.getLogger(__name__)


def get_page_content(ref: PageRef, gateway: ContentGateway) -> Page:
    """Render a single page, keeping the title from ``ref``."""
    content = render_tree(ref.id, gateway)
    return Page(id=ref.id, title=ref.title, content=content)


def get_pages_content(refs: Iterable[PageRef], gateway: ContentGateway) -> list[Page]:
    """Render pages in order; the first failing page fails the whole batch.

    Raises:
        PageContentError: Naming the page that failed, chained to the cause.
    """
    pages: list[Page] = []
    for ref in refs:
        try:
            pages.append(get_page_content(ref, gateway))
        except Notion2mdError as exc:
            logger.error("get page error: %s", exc, extra={"page_id": ref.id})
            raise PageContentError(ref.id, exc) from exc
    logger.info("Rendered %d pages", len(pages))
    return pages


def get_pages(refs: Iterable[PageRef], gateway: ContentGateway) -> list[dict[str, Any]]:
    """Fetch the raw page objects for ``refs``; errors propagate unchanged."""
    return [gateway.get_page(ref.id) for ref in refs]
