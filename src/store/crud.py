# src/store/crud.py
from __future__ import annotations

from typing import Any, Dict, List

import httpx

from store import models
from store.connection import RemoteStoreError, connect


async def _request(method: str, url: str, **kwargs) -> httpx.Response:
    """Send one request, turning every failure mode into RemoteStoreError."""
    endpoint = f"{method} {url}"
    try:
        async with connect() as client:
            response = await client.request(method, url, **kwargs)
    except httpx.HTTPError as exc:
        raise RemoteStoreError(endpoint, f"transport error: {exc!r}") from exc

    if not response.is_success:
        raise RemoteStoreError(
            endpoint,
            f"unexpected status {response.status_code}",
            status_code=response.status_code,
        )
    return response


def _json(response: httpx.Response, endpoint: str) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise RemoteStoreError(
            endpoint, "response body is not valid JSON", response.status_code
        ) from exc


# ---------------------------
# Lessons
# ---------------------------


async def fetch_lessons() -> List[Dict[str, Any]]:
    """
    Return the raw lesson records as served by the store.
    Field names are not normalized here.
    """
    response = await _request("GET", "/lessons")
    data = _json(response, "GET /lessons")
    if not isinstance(data, list):
        raise RemoteStoreError("GET /lessons", "expected a JSON array of lessons")
    return data


async def update_lesson_spaces(lesson_id: models.LessonId, spaces: int) -> None:
    """Overwrite the remaining seat count of one lesson."""
    await _request("PUT", f"/lessons/{lesson_id}", json={"space": spaces})


# ---------------------------
# Orders
# ---------------------------


async def create_order(order: models.Order) -> Any:
    """
    Persist an order and return whatever the store answered with
    (usually the inserted id).
    """
    response = await _request("POST", "/orders", json=order.to_payload())
    return _json(response, "POST /orders")
