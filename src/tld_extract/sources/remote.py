"""
Download the Public Suffix List over HTTP.
"""

import logging
from typing import Optional

import requests

from ..config import DEFAULT_PSL_URL
from ..errors import PSLFetchError

logger = logging.getLogger(__name__)


def fetch_psl(
    url: str = DEFAULT_PSL_URL,
    timeout: float = 10.0,
    session: Optional[requests.Session] = None,
) -> bytes:
    """
    Fetch raw PSL bytes.

    Args:
        url: PSL URL
        timeout: Request timeout in seconds
        session: Optional requests session (connection reuse, proxies, tests)

    Returns:
        Response body as bytes

    Raises:
        PSLFetchError: On connection errors, timeouts, non-2xx responses or
            an empty body
    """
    logger.info(f"Fetching Public Suffix List from {url}")
    http = session or requests.Session()

    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise PSLFetchError(f"Failed to fetch PSL from {url}: {e}") from e
    finally:
        if session is None:
            http.close()

    data = response.content
    if not data:
        raise PSLFetchError(f"Empty PSL response from {url}")

    logger.info(f"Fetched {len(data):,} bytes of PSL data")
    return data
