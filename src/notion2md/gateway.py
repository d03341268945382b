"""Interface to the remote content service."""

from __future__ import annotations

from typing import Any, Iterator, Protocol

from notion2md.schemas import Block, ImageResource


class ContentGateway(Protocol):
    """Operations the renderer needs from the content service.

    Implementations raise :class:`notion2md.exceptions.GatewayError` (or a
    subclass) for transport, HTTP and decode failures.
    """

    def search_pages(self, query: str) -> list[dict[str, Any]]:
        ...

    def get_page(self, page_id: str) -> dict[str, Any]:
        ...

    def get_block(self, block_id: str) -> Block:
        ...

    def get_children(
        self, block_id: str, cursor: str | None = None
    ) -> tuple[list[Block], str | None]:
        ...

    def get_image_resource(self, block_id: str) -> ImageResource:
        ...


def iter_children(gateway: ContentGateway, block_id: str) -> Iterator[Block]:
    """Yield every child of ``block_id``, following continuation cursors."""
    cursor: str | None = None
    while True:
        children, cursor = gateway.get_children(block_id, cursor)
        yield from children
        if not cursor:
            return


def drain_children(gateway: ContentGateway, block_id: str) -> list[Block]:
    """Return the complete, ordered child list of ``block_id``."""
    return list(iter_children(gateway, block_id))
