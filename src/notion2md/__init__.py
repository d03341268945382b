"""notion2md: render Notion pages into Markdown."""

from notion2md.exceptions import (
    BlockFetchError,
    ChildrenFetchError,
    GatewayError,
    Notion2mdError,
    NotFoundError,
    PageContentError,
    RateLimitError,
)
from notion2md.gateway import ContentGateway, drain_children
from notion2md.notion_client import NotionClient
from notion2md.pages import get_page_content, get_pages, get_pages_content
from notion2md.renderer import RenderContext, render_block
from notion2md.schemas import Block, BlockKind, ImageResource, Page, PageRef
from notion2md.search import list_pages
from notion2md.walker import render_tree

__all__ = [
    "Block",
    "BlockFetchError",
    "BlockKind",
    "ChildrenFetchError",
    "ContentGateway",
    "GatewayError",
    "ImageResource",
    "NotFoundError",
    "Notion2mdError",
    "NotionClient",
    "Page",
    "PageContentError",
    "PageRef",
    "RateLimitError",
    "RenderContext",
    "drain_children",
    "get_page_content",
    "get_pages",
    "get_pages_content",
    "list_pages",
    "render_block",
    "render_tree",
]
