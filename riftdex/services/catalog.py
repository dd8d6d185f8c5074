"""
Remote card catalog client.

Fetches pages from the API TCG card catalog. One request per call, no
retries; callers decide what a failure means.
"""

from typing import Any

import httpx

API_KEY_HEADER = "x-api-key"
USER_AGENT = "Riftdex/1.0"


def build_catalog_client(api_key: str, timeout: float = 30.0) -> httpx.AsyncClient:
    """Create an HTTP client that authenticates against the catalog."""
    return httpx.AsyncClient(
        headers={API_KEY_HEADER: api_key, "User-Agent": USER_AGENT},
        follow_redirects=True,
        timeout=timeout,
    )


async def fetch_catalog_page(client: httpx.AsyncClient, url: str, page: int) -> dict[str, Any]:
    """
    Fetch one page of catalog cards.

    Args:
        client: Client from build_catalog_client
        url: Catalog cards endpoint
        page: 1-based page number

    Returns:
        Decoded JSON body with ``data`` and ``totalPages``

    Raises:
        httpx.HTTPError: If the request fails or returns an error status
        ValueError: If the body is not a JSON object
    """
    response = await client.get(url, params={"page": page})
    response.raise_for_status()
    payload = response.json()
    if not isinstance(payload, dict):
        raise ValueError(f"Unexpected catalog response for page {page}")
    return payload
