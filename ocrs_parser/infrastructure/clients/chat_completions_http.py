"""Async HTTP client for OpenAI-compatible chat completions.

Transport only: builds the request, maps network and HTTP failures to
``ProviderError`` and returns the decoded response body.
"""

from __future__ import annotations

from typing import Any

import httpx

from ocrs_parser.core.const import ERROR_BODY_MAX_CHARS
from ocrs_parser.core.exceptions import ProviderError


class ChatCompletionsClient:
    def __init__(
        self,
        base_url: str | None,
        *,
        api_key: str = "",
        timeout_seconds: float = 60.0,
        verify_ssl: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds
        self._verify_ssl = verify_ssl
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        if not self._base_url:
            raise ProviderError("LLM base_url is not configured", error_type="unavailable")
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers=headers,
            timeout=self._timeout_seconds,
            verify=self._verify_ssl,
            transport=self._transport,
        )

    async def create(self, payload: dict[str, Any]) -> dict[str, Any]:
        """POST ``payload`` to ``/chat/completions`` and return the JSON body.

        Raises:
            ProviderError: On timeout, connection failure, non-2xx status, any
                other request failure, or a body that cannot be decoded as JSON.
        """
        async with self._client() as client:
            try:
                resp = await client.post("/chat/completions", json=payload)
                resp.raise_for_status()
            except httpx.TimeoutException as exc:
                raise ProviderError(
                    f"LLM request timed out after {self._timeout_seconds}s", error_type="timeout"
                ) from exc
            except httpx.HTTPStatusError as exc:
                status = exc.response.status_code
                raise ProviderError(
                    f"LLM request failed with HTTP {status}",
                    error_type="http_error",
                    details={"http_code": status, "body": exc.response.text[:ERROR_BODY_MAX_CHARS]},
                ) from exc
            except httpx.TransportError as exc:
                raise ProviderError(
                    f"LLM service unavailable: {exc}", error_type="unavailable"
                ) from exc
            except httpx.DecodingError as exc:
                raise ProviderError(
                    f"LLM response body could not be decoded: {exc}",
                    error_type="malformed_response",
                ) from exc
            except httpx.HTTPError as exc:
                # Redirect loops and any other request failure
                raise ProviderError(
                    f"LLM request failed: {exc}", error_type="unavailable"
                ) from exc

        try:
            data = resp.json()
        except ValueError as exc:
            raise ProviderError(
                "LLM response body is not JSON", error_type="malformed_response"
            ) from exc
        if not isinstance(data, dict):
            raise ProviderError("LLM response body is not a JSON object", error_type="malformed_response")
        return data
