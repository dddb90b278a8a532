"""httpx helpers shared by the proxy and vendor clients."""

import logging
from typing import Any, Dict, Optional

import httpx

from ..core.exceptions import MalformedResponseError, TransportError, UpstreamStatusError

logger = logging.getLogger(__name__)


async def post_json(
    client: httpx.AsyncClient,
    url: str,
    payload: Dict[str, Any],
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """
    POST a JSON body and return the decoded JSON object.

    Raises:
        TransportError: connection failure or timeout
        UpstreamStatusError: non-2xx response
        MalformedResponseError: body is not a JSON object
    """
    try:
        response = await client.post(url, json=payload, headers=headers)
    except httpx.TimeoutException as e:
        raise TransportError(f"Timed out calling {url}", url=url, timed_out=True) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise TransportError(f"Request to {url} failed: {e}", url=url) from e

    if not response.is_success:
        logger.debug(f"Non-success status {response.status_code} from {url}")
        raise UpstreamStatusError(response.status_code, url, body=response.text[:500])

    try:
        body = response.json()
    except ValueError as e:
        raise MalformedResponseError(f"Response from {url} is not JSON") from e

    if not isinstance(body, dict):
        raise MalformedResponseError(
            f"Response from {url} is {type(body).__name__}, expected object"
        )
    return body
