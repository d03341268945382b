"""Custom exceptions for notion2md."""

from __future__ import annotations


class Notion2mdError(Exception):
    """Base exception for notion2md operations."""


class GatewayError(Notion2mdError):
    """Error talking to the content service.

    Carries the failed operation and the id it targeted so callers can
    report which call went wrong without parsing the message.
    """

    def __init__(self, operation: str, target_id: str, cause: object) -> None:
        self.operation = operation
        self.target_id = target_id
        self.cause = cause
        super().__init__(f"{operation} {target_id} error: {cause}")


class NotFoundError(GatewayError):
    """The requested page or block does not exist (or is not shared)."""


class RateLimitError(GatewayError):
    """Rate limited by the content service."""


class BlockFetchError(Notion2mdError):
    """The root block of a subtree could not be fetched."""

    def __init__(self, block_id: str, cause: object) -> None:
        self.block_id = block_id
        super().__init__(f"get block {block_id} error: {cause}")


class ChildrenFetchError(Notion2mdError):
    """The children listing of a block could not be drained."""

    def __init__(self, block_id: str, cause: object) -> None:
        self.block_id = block_id
        super().__init__(f"get block's children {block_id} error: {cause}")


class PageContentError(Notion2mdError):
    """A page of a batch could not be rendered."""

    def __init__(self, page_id: str, cause: object) -> None:
        self.page_id = page_id
        super().__init__(f"get page {page_id} error: {cause}")
