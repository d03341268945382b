"""Shared schemas for notion2md."""

from notion2md.schemas.blocks import (
    Block,
    BlockKind,
    ImageResource,
    first_run_text,
    rich_text_to_plain,
)
from notion2md.schemas.pages import Page, PageRef

__all__ = [
    "Block",
    "BlockKind",
    "ImageResource",
    "Page",
    "PageRef",
    "first_run_text",
    "rich_text_to_plain",
]
