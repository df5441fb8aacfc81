"""Upstash REST persistence adapter."""

from __future__ import annotations

from typing import Any, cast
from urllib.parse import quote


class UpstashAdapter:
    """Sync adapter for the Upstash Redis REST API."""

    def __init__(
        self,
        url: str,
        token: str,
        *,
        timeout: float = 30.0,
    ) -> None:
        import httpx

        self._client = httpx.Client(
            base_url=url.rstrip("/"),
            headers={"Authorization": f"Bearer {token}"},
            timeout=timeout,
        )

    def _request(
        self, method: str, path: str, content: str | None = None
    ) -> dict[str, Any]:
        """Make a request to the REST API."""
        response = self._client.request(method, path, content=content)
        if not response.is_success:
            try:
                error = response.json().get("error", "Request failed")
            except Exception:
                error = f"HTTP {response.status_code}"
            raise RuntimeError(error)
        return cast(dict[str, Any], response.json())

    def get(self, key: str) -> str | None:
        """Get the snapshot stored under key."""
        data = self._request("GET", f"/get/{quote(key, safe='')}")
        result = data.get("result")
        if result is None:
            return None
        return str(result)

    def set(self, key: str, value: str) -> None:
        """Store a snapshot under key."""
        self._request("POST", f"/set/{quote(key, safe='')}", content=value)

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()
