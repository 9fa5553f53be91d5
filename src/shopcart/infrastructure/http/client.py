"""Shared httpx client for the shop's REST API."""

from __future__ import annotations

from typing import Any

import httpx

from shopcart.domain.exceptions import CollaboratorError


def create_client(base_url: str, timeout: float) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout,
        headers={"Accept": "application/json"},
    )


async def get_json(client: httpx.AsyncClient, path: str) -> Any:
    """GET *path* and decode the JSON body.

    Transport errors, non-2xx statuses and undecodable bodies are all
    raised as CollaboratorError.
    """
    try:
        response = await client.get(path)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPStatusError as exc:
        raise CollaboratorError(
            f"GET {path} returned {exc.response.status_code}"
        ) from exc
    except httpx.HTTPError as exc:
        raise CollaboratorError(f"GET {path} failed: {exc}") from exc
    except ValueError as exc:
        raise CollaboratorError(f"GET {path} returned invalid JSON") from exc
