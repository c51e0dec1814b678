"""Transporte HTTP compartilhado pelos conectores (httpx).

Um único `httpx.AsyncClient` por conector, aberto sob demanda e fechado
em `aclose()`. Retry só quando configurado (`max_retries > 0`): 429
respeita o header Retry-After do Slack; 5xx e falhas de conexão usam
backoff exponencial.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

RETRY_AFTER_HEADER = "retry-after"


@dataclass
class HttpClientConfig:
    """Parâmetros de transporte de um conector."""

    timeout_seconds: float = 10.0
    max_retries: int = 0
    backoff_base_seconds: float = 1.0
    backoff_max_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Falha de transporte ou status não-sucesso (sem payload nem headers)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
        retry_after_seconds: float | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable
        self.retry_after_seconds = retry_after_seconds


class HttpClient:
    """Base dos clientes outbound: POST JSON com retry opcional."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._config.transport,
                timeout=self._config.timeout_seconds,
                headers=self._config.default_headers,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        attempts = self._config.max_retries + 1
        for attempt in range(attempts):
            last_attempt = attempt == attempts - 1
            try:
                response = await self._get_client().post(url, json=json, headers=headers)
                _raise_for_retryable_status(response)
                return response
            except HttpError as exc:
                if not exc.is_retryable or last_attempt:
                    raise
                if exc.retry_after_seconds is None:
                    delay = self._backoff_seconds(attempt)
                else:
                    delay = min(exc.retry_after_seconds, self._config.backoff_max_seconds)
            except (httpx.TimeoutException, httpx.ConnectError) as exc:
                if last_attempt:
                    raise HttpError("http_connection_error", is_retryable=True) from exc
                delay = self._backoff_seconds(attempt)

            logger.info(
                "http_retry_scheduled",
                extra={"attempt": attempt + 1, "backoff_seconds": delay},
            )
            await asyncio.sleep(delay)

        raise HttpError("http_retry_exhausted", is_retryable=True)

    def _backoff_seconds(self, attempt: int) -> float:
        return min((2**attempt) * self._config.backoff_base_seconds, self._config.backoff_max_seconds)


def _raise_for_retryable_status(response: httpx.Response) -> None:
    if response.status_code == 429:
        raise HttpError(
            "http_rate_limited",
            status_code=429,
            is_retryable=True,
            retry_after_seconds=_parse_retry_after(response),
        )
    if response.status_code >= 500:
        raise HttpError(
            "http_server_error",
            status_code=response.status_code,
            is_retryable=True,
        )


def _parse_retry_after(response: httpx.Response) -> float | None:
    raw = response.headers.get(RETRY_AFTER_HEADER)
    if raw is None:
        return None
    try:
        return max(float(raw), 0.0)
    except ValueError:
        return None
