"""HTTP utilities for calling the content service API."""

from __future__ import annotations

import time
from typing import Any, Final

import httpx

from notion2md.config import NOTION2MD_FETCH_BACKOFF_S, NOTION2MD_FETCH_MAX_RETRIES
from notion2md.exceptions import GatewayError, NotFoundError, RateLimitError

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})


def request_json(
    client: httpx.Client,
    method: str,
    url: str,
    *,
    operation: str,
    target_id: str,
    **kwargs: Any,
) -> dict[str, Any]:
    """Send a request and decode its JSON body.

    Transient statuses are retried ``NOTION2MD_FETCH_MAX_RETRIES`` times
    with exponential backoff (no retries by default).

    Args:
        client: Client carrying base URL, auth and version headers.
        method: HTTP method.
        url: URL or path relative to the client's base URL.
        operation: Name of the gateway operation, used in error messages.
        target_id: Id of the page or block the call is about.
        **kwargs: Passed through to ``httpx.Client.request``.

    Returns:
        The decoded JSON object.

    Raises:
        NotFoundError: On 404.
        RateLimitError: If still rate limited after all retries.
        GatewayError: For any other transport, HTTP or decode failure.
    """
    last_exc: object = None
    last_status: int | None = None

    for attempt in range(NOTION2MD_FETCH_MAX_RETRIES + 1):
        try:
            response = client.request(method, url, **kwargs)
        except httpx.RequestError as exc:
            last_exc = exc
            last_status = None
        else:
            if response.status_code == 404:
                raise NotFoundError(operation, target_id, describe_error(response))

            if response.status_code in RETRY_STATUS_CODES:
                last_exc = describe_error(response)
                last_status = response.status_code
            else:
                try:
                    response.raise_for_status()
                except httpx.HTTPStatusError as exc:
                    raise GatewayError(operation, target_id, describe_error(response)) from exc
                return decode_json(response, operation=operation, target_id=target_id)

        if attempt < NOTION2MD_FETCH_MAX_RETRIES:
            backoff = NOTION2MD_FETCH_BACKOFF_S * (2**attempt)
            time.sleep(backoff)

    if last_status == 429:
        raise RateLimitError(operation, target_id, last_exc)
    raise GatewayError(operation, target_id, last_exc)


def decode_json(response: httpx.Response, *, operation: str, target_id: str) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError as exc:
        raise GatewayError(operation, target_id, f"invalid JSON response: {exc}") from exc
    if not isinstance(data, dict):
        raise GatewayError(operation, target_id, "expected a JSON object")
    return data


def describe_error(response: httpx.Response) -> str:
    """Short description of an error response, using the API's error body if any."""
    message = f"HTTP {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        return message
    if isinstance(body, dict) and body.get("message"):
        code = body.get("code")
        return f"{message} {code}: {body['message']}" if code else f"{message}: {body['message']}"
    return message
