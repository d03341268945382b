"""Block models decoded from the content service."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field


class BlockKind(str, Enum):
    """Block kinds the renderer knows about.

    ``UNSUPPORTED`` is the tag the service itself uses for blocks it cannot
    expose through the API; ``OTHER`` covers every type string not listed
    here (``child_page``, ``column_list``, ...).
    """

    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    PARAGRAPH = "paragraph"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    NUMBERED_LIST_ITEM = "numbered_list_item"
    TOGGLE = "toggle"
    QUOTE = "quote"
    CODE = "code"
    TABLE = "table"
    TABLE_ROW = "table_row"
    DIVIDER = "divider"
    VIDEO = "video"
    EMBED = "embed"
    CALLOUT = "callout"
    TO_DO = "to_do"
    IMAGE = "image"
    UNSUPPORTED = "unsupported"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str | None) -> "BlockKind":
        """Map a raw type string to a kind, never failing."""
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


def rich_text_to_plain(runs: Iterable[dict[str, Any]] | None) -> str:
    """Concatenate the plain text of rich text runs."""
    parts: list[str] = []
    for run in runs or []:
        plain = run.get("plain_text")
        if plain is None:
            plain = (run.get("text") or {}).get("content", "")
        parts.append(plain)
    return "".join(parts)


def first_run_text(runs: list[dict[str, Any]] | None) -> str:
    """Plain text of the first rich text run, or an empty string."""
    if not runs:
        return ""
    return rich_text_to_plain(runs[:1])


class Block(BaseModel):
    """A single node of a page's block tree."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: str
    has_children: bool = False
    parent_id: str | None = None
    payload: dict[str, Any] = Field(default_factory=dict)

    @property
    def kind(self) -> BlockKind:
        return BlockKind.parse(self.type)

    @property
    def rich_text(self) -> list[dict[str, Any]]:
        return self.payload.get("rich_text") or self.payload.get("text") or []

    @property
    def text(self) -> str:
        """Plain text of the block's rich text runs."""
        return rich_text_to_plain(self.rich_text)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Block":
        """Build a block from the raw API object."""
        block_type = data.get("type") or BlockKind.UNSUPPORTED.value
        parent = data.get("parent") or {}
        return cls(
            id=data["id"],
            type=block_type,
            has_children=bool(data.get("has_children", False)),
            parent_id=parent.get("block_id") or parent.get("page_id"),
            payload=data.get(block_type) or {},
        )


class _FileRef(BaseModel):
    url: str = ""


class _ImagePayload(BaseModel):
    type: str | None = None
    file: _FileRef | None = None
    external: _FileRef | None = None


class ImageResource(BaseModel):
    """Decoded response of the dedicated image lookup.

    Only the nested ``{image: {file: {url}}}`` part of the block object is
    kept; signed file URLs expire, so the value should be used right away.
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    image: _ImagePayload

    @property
    def url(self) -> str:
        if self.image.file is not None:
            return self.image.file.url
        if self.image.external is not None:
            return self.image.external.url
        return ""
