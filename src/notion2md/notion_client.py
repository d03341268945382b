"""HTTP implementation of the content gateway for the Notion API."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from notion2md.config import (
    NOTION2MD_API_BASE_URL,
    NOTION2MD_API_VERSION,
    NOTION2MD_FETCH_TIMEOUT_S,
    NOTION2MD_IMAGE_API_VERSION,
    NOTION2MD_PAGE_SIZE,
    NOTION2MD_TOKEN,
    NOTION2MD_USER_AGENT,
)
from notion2md.exceptions import GatewayError
from notion2md.http_utils import request_json
from notion2md.schemas import Block, ImageResource

logger = logging.getLogger(__name__)


class NotionClient:
    """Synchronous Notion API client implementing ``ContentGateway``.

    One ``httpx.Client`` is kept for the lifetime of the object; use it as a
    context manager or call :meth:`close` when done.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        base_url: str = NOTION2MD_API_BASE_URL,
        api_version: str = NOTION2MD_API_VERSION,
        image_api_version: str = NOTION2MD_IMAGE_API_VERSION,
        page_size: int = NOTION2MD_PAGE_SIZE,
        http_client: httpx.Client | None = None,
    ) -> None:
        token = token or NOTION2MD_TOKEN
        if not token:
            raise ValueError("A Notion integration token is required (set NOTION2MD_TOKEN)")
        self.image_api_version = image_api_version
        self.page_size = page_size
        headers = {
            "Authorization": f"Bearer {token}",
            "Notion-Version": api_version,
            "Content-Type": "application/json",
            "User-Agent": NOTION2MD_USER_AGENT,
        }
        if http_client is None:
            http_client = httpx.Client(
                base_url=base_url,
                headers=headers,
                timeout=httpx.Timeout(NOTION2MD_FETCH_TIMEOUT_S),
            )
        else:
            http_client.headers.update(headers)
            if not http_client.base_url.host:
                http_client.base_url = base_url
        self._http = http_client

    def __enter__(self) -> "NotionClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def search_pages(self, query: str) -> list[dict[str, Any]]:
        """Search pages whose title contains ``query``, draining all result pages."""
        results: list[dict[str, Any]] = []
        cursor: str | None = None
        while True:
            body: dict[str, Any] = {
                "query": query,
                "filter": {"property": "object", "value": "page"},
                "page_size": self.page_size,
            }
            if cursor:
                body["start_cursor"] = cursor
            data = request_json(
                self._http, "POST", "/search", operation="search pages", target_id=query, json=body
            )
            results.extend(data.get("results") or [])
            cursor = data.get("next_cursor") if data.get("has_more") else None
            if not cursor:
                break
        logger.debug("search returned %d results", len(results), extra={"query": query})
        return results

    def get_page(self, page_id: str) -> dict[str, Any]:
        return request_json(
            self._http, "GET", f"/pages/{page_id}", operation="get page", target_id=page_id
        )

    def get_block(self, block_id: str) -> Block:
        data = request_json(
            self._http, "GET", f"/blocks/{block_id}", operation="get block", target_id=block_id
        )
        return _decode_block(data, operation="get block", target_id=block_id)

    def get_children(
        self, block_id: str, cursor: str | None = None
    ) -> tuple[list[Block], str | None]:
        """Fetch one page of children; the second item is the next cursor, if any."""
        params: dict[str, Any] = {"page_size": self.page_size}
        if cursor:
            params["start_cursor"] = cursor
        data = request_json(
            self._http,
            "GET",
            f"/blocks/{block_id}/children",
            operation="get block's children",
            target_id=block_id,
            params=params,
        )
        children = [
            _decode_block(item, operation="get block's children", target_id=block_id)
            for item in data.get("results") or []
        ]
        next_cursor = data.get("next_cursor") if data.get("has_more") else None
        return children, next_cursor

    def get_image_resource(self, block_id: str) -> ImageResource:
        """Fetch an image block's resolved, time-limited file URL.

        Goes through the raw block endpoint pinned to the image API version
        rather than :meth:`get_block`, whose payload does not reliably carry
        the signed URL.
        """
        data = request_json(
            self._http,
            "GET",
            f"/blocks/{block_id}",
            operation="get image",
            target_id=block_id,
            headers={"Notion-Version": self.image_api_version},
        )
        try:
            return ImageResource.model_validate(data)
        except ValidationError as exc:
            raise GatewayError("get image", block_id, exc) from exc


def _decode_block(data: dict[str, Any], *, operation: str, target_id: str) -> Block:
    try:
        return Block.from_api(data)
    except (AttributeError, KeyError, TypeError, ValidationError) as exc:
        raise GatewayError(operation, target_id, f"malformed block object: {exc}") from exc
