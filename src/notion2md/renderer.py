"""Render single blocks into markdown fragments."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from notion2md.exceptions import Notion2mdError
from notion2md.gateway import ContentGateway, drain_children
from notion2md.schemas import Block, BlockKind, first_run_text

logger = logging.getLogger(__name__)

ChildrenLookup = Callable[[str], Sequence[Block]]

CALLOUT_PREFIX = "⚠️ "
VIDEO_WIDTH = 300
VIDEO_HEIGHT = 200

# Kinds whose handler fetches and renders the children itself.
SELF_RENDERING_KINDS = frozenset({BlockKind.TABLE})


@dataclass(frozen=True)
class RenderContext:
    """What a handler may reach besides the block itself.

    Attributes:
        gateway: Content service, used for image and table row lookups.
        children: Optional accessor returning the ordered children of a
            block id. Falls back to draining the gateway's listing.
    """

    gateway: ContentGateway
    children: ChildrenLookup | None = None

    def children_of(self, block_id: str) -> Sequence[Block]:
        if self.children is not None:
            return self.children(block_id)
        return drain_children(self.gateway, block_id)

    def with_known_children(self, block_id: str, children: Sequence[Block]) -> "RenderContext":
        """Return a context that answers ``block_id`` from an already fetched list."""
        known = tuple(children)
        fallback = self.children_of

        def lookup(requested_id: str) -> Sequence[Block]:
            if requested_id == block_id:
                return known
            return fallback(requested_id)

        return RenderContext(gateway=self.gateway, children=lookup)


def render_block(block: Block, context: RenderContext) -> str:
    """Render one block (without its children) to markdown.

    Kinds without a handler render as an empty string.
    """
    handler = _HANDLERS.get(block.kind)
    if handler is None:
        logger.debug(
            "No markdown rendering for block type %s",
            block.type,
            extra={"block_id": block.id, "block_type": block.type},
        )
        return ""
    return handler(block, context)


def compose(block: Block, fragment: str, children: str) -> str:
    """Combine a block's own fragment with its rendered children."""
    if block.kind is BlockKind.TOGGLE and children:
        return f"::: toggle\n{block.text}\n{children}:::\n"
    return fragment + children


def renders_own_children(block: Block) -> bool:
    return block.kind in SELF_RENDERING_KINDS


def numbered_list_ordinal(block: Block, children: ChildrenLookup) -> int:
    """1-based position of ``block`` among the numbered items under its parent.

    Every numbered sibling before the block counts, whether or not the run
    is contiguous. Falls back to 1 when the parent's children are unknown.
    """
    if not block.parent_id:
        return 1
    try:
        siblings = children(block.parent_id)
    except Notion2mdError as exc:
        logger.warning(
            "Could not list siblings of numbered item, defaulting to 1: %s",
            exc,
            extra={"block_id": block.id},
        )
        return 1

    count = 0
    for sibling in siblings:
        if sibling.id == block.id:
            return count + 1
        if sibling.kind is BlockKind.NUMBERED_LIST_ITEM:
            count += 1
    return count or 1


def _heading(prefix: str) -> Callable[[Block, RenderContext], str]:
    def render(block: Block, context: RenderContext) -> str:
        return f"{prefix} {block.text}\n"

    return render


def _render_paragraph(block: Block, context: RenderContext) -> str:
    return f"{block.text}\n"


def _render_bulleted(block: Block, context: RenderContext) -> str:
    return f"- {block.text}\n"


def _render_numbered(block: Block, context: RenderContext) -> str:
    ordinal = numbered_list_ordinal(block, context.children_of)
    return f"{ordinal}. {block.text}\n"


def _render_toggle(block: Block, context: RenderContext) -> str:
    return f"::: toggle\n{block.text}\n:::\n"


def _render_quote(block: Block, context: RenderContext) -> str:
    return f"> {block.text}\n"


def _render_code(block: Block, context: RenderContext) -> str:
    return f"```\n{block.text}\n```\n"


def _render_table_row(block: Block, context: RenderContext) -> str:
    cells = block.payload.get("cells") or []
    return "| " + " | ".join(first_run_text(cell) for cell in cells) + " |\n"


def _render_table(block: Block, context: RenderContext) -> str:
    try:
        rows = context.children_of(block.id)
    except Notion2mdError as exc:
        logger.warning("Could not fetch table rows: %s", exc, extra={"block_id": block.id})
        return str(exc)

    # Notion marks a first-row header with has_column_header; has_row_header
    # marks the first column and does not produce a separator.
    has_header = bool(block.payload.get("has_column_header"))
    parts: list[str] = []
    for index, row in enumerate(rows):
        parts.append(render_block(row, context))
        if index == 0 and has_header:
            columns = len(row.payload.get("cells") or [])
            parts.append("| ---" * (columns + 1) + "|\n")
    return "".join(parts)


def _render_divider(block: Block, context: RenderContext) -> str:
    return "---\n"


def _media_url(payload: dict) -> str:
    for key in ("external", "file"):
        url = (payload.get(key) or {}).get("url")
        if url:
            return url
    return ""


def _render_video(block: Block, context: RenderContext) -> str:
    url = _media_url(block.payload)
    return (
        f'<iframe src="{url}" width="{VIDEO_WIDTH}" height="{VIDEO_HEIGHT}" '
        'frameborder="0" allowfullscreen></iframe>'
    )


def _render_embed(block: Block, context: RenderContext) -> str:
    return "{" + block.payload.get("url", "") + "}"


def _render_callout(block: Block, context: RenderContext) -> str:
    return f"{CALLOUT_PREFIX}{block.text}\n"


def _render_to_do(block: Block, context: RenderContext) -> str:
    box = "[x]" if block.payload.get("checked") else "[ ]"
    return f"- {box} {block.text}\n"


def _render_image(block: Block, context: RenderContext) -> str:
    try:
        resource = context.gateway.get_image_resource(block.id)
    except Notion2mdError as exc:
        logger.warning("Could not resolve image URL: %s", exc, extra={"block_id": block.id})
        return str(exc)
    return f"![]({resource.url})\n"


_HANDLERS: dict[BlockKind, Callable[[Block, RenderContext], str]] = {
    BlockKind.HEADING_1: _heading("#"),
    BlockKind.HEADING_2: _heading("##"),
    BlockKind.HEADING_3: _heading("###"),
    BlockKind.PARAGRAPH: _render_paragraph,
    BlockKind.BULLETED_LIST_ITEM: _render_bulleted,
    BlockKind.NUMBERED_LIST_ITEM: _render_numbered,
    BlockKind.TOGGLE: _render_toggle,
    BlockKind.QUOTE: _render_quote,
    BlockKind.CODE: _render_code,
    BlockKind.TABLE: _render_table,
    BlockKind.TABLE_ROW: _render_table_row,
    BlockKind.DIVIDER: _render_divider,
    BlockKind.VIDEO: _render_video,
    BlockKind.EMBED: _render_embed,
    BlockKind.CALLOUT: _render_callout,
    BlockKind.TO_DO: _render_to_do,
    BlockKind.IMAGE: _render_image,
}
