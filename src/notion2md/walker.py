"""Recursive traversal of a block tree into markdown."""

from __future__ import annotations

import logging

from notion2md.exceptions import BlockFetchError, ChildrenFetchError, GatewayError, Notion2mdError
from notion2md.gateway import ContentGateway, drain_children
from notion2md.renderer import RenderContext, compose, render_block, renders_own_children
from notion2md.schemas import BlockKind

logger = logging.getLogger(__name__)


def render_tree(block_id: str, gateway: ContentGateway) -> str:
    """Render a block and its whole subtree, depth first, in document order.

    Args:
        block_id: Id of the subtree's root (a page id works too).
        gateway: Content service to fetch blocks and children from.

    Returns:
        The markdown for the block followed by (or wrapping) its descendants.

    Raises:
        BlockFetchError: If the root block itself cannot be fetched.
        ChildrenFetchError: If the root's children listing fails.
    """
    return _render_subtree(block_id, RenderContext(gateway=gateway))


def _render_subtree(block_id: str, context: RenderContext) -> str:
    try:
        block = context.gateway.get_block(block_id)
    except GatewayError as exc:
        logger.error("get block error: %s", exc, extra={"block_id": block_id})
        raise BlockFetchError(block_id, exc.cause) from exc

    if block.kind is BlockKind.UNSUPPORTED:
        logger.warning(
            "Skipping unsupported block",
            extra={"block_id": block_id, "block_type": block.type},
        )
        return ""
    logger.debug("block", extra={"block_id": block_id, "block_type": block.type})

    fragment = render_block(block, context)
    if not block.has_children or renders_own_children(block):
        return fragment

    try:
        children = drain_children(context.gateway, block_id)
    except GatewayError as exc:
        logger.error("get block's children error: %s", exc, extra={"block_id": block_id})
        raise ChildrenFetchError(block_id, exc.cause) from exc

    child_context = context.with_known_children(block_id, children)
    parts: list[str] = []
    for child in children:
        try:
            parts.append(_render_subtree(child.id, child_context))
        except Notion2mdError as exc:
            logger.error("get block child error: %s", exc, extra={"block_id": child.id})
    return compose(block, fragment, "".join(parts))
