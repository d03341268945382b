"""In-memory content gateway used by the tests."""

from __future__ import annotations

from typing import Any

from notion2md.exceptions import GatewayError, NotFoundError
from notion2md.schemas import Block, ImageResource


def make_block(
    block_id: str,
    block_type: str,
    text: str | None = None,
    *,
    parent_id: str | None = None,
    has_children: bool = False,
    **payload: Any,
) -> Block:
    if text is not None:
        payload["rich_text"] = [{"type": "text", "plain_text": text}]
    return Block(
        id=block_id,
        type=block_type,
        has_children=has_children,
        parent_id=parent_id,
        payload=payload,
    )


def image_resource(url: str) -> ImageResource:
    return ImageResource.model_validate({"image": {"type": "file", "file": {"url": url}}})


class FakeGateway:
    """Serves blocks and paginated children from dictionaries.

    Children listings are split into pages of ``page_size`` items; the
    cursor is the stringified start offset of the next page.
    """

    def __init__(self, page_size: int = 100) -> None:
        self.page_size = page_size
        self.blocks: dict[str, Block] = {}
        self.children: dict[str, list[Block]] = {}
        self.broken_listings: set[str] = set()
        self.images: dict[str, ImageResource | Exception] = {}
        self.pages: dict[str, dict[str, Any]] = {}
        self.search_results: list[dict[str, Any]] = []
        self.calls: list[tuple[Any, ...]] = []

    def add(self, block: Block, *children: Block) -> Block:
        """Register ``block`` and, if given, its children (also registered)."""
        self.blocks[block.id] = block
        if children:
            self.children[block.id] = list(children)
            for child in children:
                self.blocks.setdefault(child.id, child)
        return block

    def search_pages(self, query: str) -> list[dict[str, Any]]:
        self.calls.append(("search_pages", query))
        return list(self.search_results)

    def get_page(self, page_id: str) -> dict[str, Any]:
        self.calls.append(("get_page", page_id))
        if page_id not in self.pages:
            raise NotFoundError("get page", page_id, "HTTP 404")
        return self.pages[page_id]

    def get_block(self, block_id: str) -> Block:
        self.calls.append(("get_block", block_id))
        if block_id not in self.blocks:
            raise NotFoundError("get block", block_id, "HTTP 404 object_not_found")
        return self.blocks[block_id]

    def get_children(
        self, block_id: str, cursor: str | None = None
    ) -> tuple[list[Block], str | None]:
        self.calls.append(("get_children", block_id, cursor))
        if block_id in self.broken_listings:
            raise GatewayError("get block's children", block_id, "HTTP 502")
        items = self.children.get(block_id, [])
        start = int(cursor or 0)
        end = start + self.page_size
        next_cursor = str(end) if end < len(items) else None
        return items[start:end], next_cursor

    def get_image_resource(self, block_id: str) -> ImageResource:
        self.calls.append(("get_image_resource", block_id))
        resource = self.images.get(block_id)
        if resource is None:
            raise NotFoundError("get image", block_id, "HTTP 404")
        if isinstance(resource, Exception):
            raise resource
        return resource

    def count(self, name: str, target_id: str) -> int:
        return sum(1 for call in self.calls if call[0] == name and call[1] == target_id)
