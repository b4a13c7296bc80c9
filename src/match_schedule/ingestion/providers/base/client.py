from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from .errors import ProviderRateLimited, ProviderRequestError

Json = dict[str, Any]


@dataclass
class BaseHttpClient:
    """
    Thin wrapper over a single httpx.Client.

    - One pooled client is shared by all league fetches; httpx.Client is safe to use
      from the fan-out worker threads.
    - Read and connect timeouts bound every upstream request so one slow league
      cannot stall the whole aggregation.
    - Every failure surfaces as a ProviderRequestError subclass.
    """

    base_url: str
    timeout_s: float = 10.0
    connect_timeout_s: float = 5.0
    headers: Mapping[str, str] = field(default_factory=dict)

    transport: httpx.BaseTransport | None = None

    def __post_init__(self) -> None:
        self._client = httpx.Client(
            base_url=self.base_url.rstrip("/") + "/",
            timeout=httpx.Timeout(self.timeout_s, connect=self.connect_timeout_s),
            headers=dict(self.headers),
            transport=self.transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> BaseHttpClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get_json(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
    ) -> Json:
        """GET `path` and return the decoded JSON object."""
        try:
            resp = self._client.get(path.lstrip("/"), params=params)
        except httpx.TimeoutException as e:
            raise ProviderRequestError(f"Timed out requesting {path}: {e}") from e
        except httpx.TransportError as e:
            raise ProviderRequestError(str(e)) from e

        if resp.status_code == 429:
            raise ProviderRateLimited("Upstream rate limited the request (HTTP 429).")

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderRequestError(f"HTTP {resp.status_code} for GET {resp.request.url}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise ProviderRequestError("Response was not valid JSON.") from e

        if not isinstance(data, dict):
            raise ProviderRequestError(f"Expected JSON object, got {type(data).__name__}")

        return data
