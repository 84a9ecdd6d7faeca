# manages the http client for the remote lesson store
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from utils.logger import get_logger

_logger = get_logger(__name__)

API_BASE_URL = os.getenv("LESSONS_API_URL", "http://localhost:3000")
REQUEST_TIMEOUT = float(os.getenv("LESSONS_API_TIMEOUT", "10"))

# swapped out by tests for an httpx.MockTransport
TRANSPORT: Optional[httpx.AsyncBaseTransport] = None


class RemoteStoreError(Exception):
    """
    Raised for any failed call to the remote store: transport errors,
    timeouts, non-success responses and bodies that are not valid JSON.
    """

    def __init__(
        self, endpoint: str, reason: str, status_code: Optional[int] = None
    ) -> None:
        super().__init__(f"{endpoint}: {reason}")
        self.endpoint = endpoint
        self.reason = reason
        self.status_code = status_code


@asynccontextmanager
async def connect() -> AsyncIterator[httpx.AsyncClient]:
    """Async context manager yielding an httpx client bound to the store.

    Every request made through the client is bounded by REQUEST_TIMEOUT.
    """
    client = httpx.AsyncClient(
        base_url=API_BASE_URL,
        timeout=REQUEST_TIMEOUT,
        transport=TRANSPORT,
        headers={"Accept": "application/json"},
    )
    _logger.debug(f"Opened client for {API_BASE_URL}")
    try:
        yield client
    finally:
        await client.aclose()
