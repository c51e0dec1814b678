"""Cliente HTTP para a Web API do Slack (chat.postMessage / chat.update).

O Slack responde 200 mesmo em falhas de negócio, com envelope
`{"ok": false, "error": "..."}`; esse envelope vira SlackApiError.
Tokens nunca são logados.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from utils.errors import DownstreamError

if TYPE_CHECKING:
    import httpx

    from config.settings import SlackSettings

logger = logging.getLogger(__name__)


class SlackApiError(DownstreamError):
    """Erro retornado pela Web API do Slack."""

    def __init__(self, method: str, error: str, status_code: int | None = None) -> None:
        super().__init__(f"Slack API error: {method} ({error})")
        self.method = method
        self.error = error
        self.status_code = status_code


class SlackApiClient(HttpClient):
    """Cliente de mensagens outbound usado pelos processadores downstream."""

    def __init__(
        self,
        bot_token: str,
        api_base_url: str = "https://slack.com/api",
        config: HttpClientConfig | None = None,
    ) -> None:
        super().__init__(config)
        self._bot_token = bot_token
        self._api_base_url = api_base_url.rstrip("/")

    async def post_message(
        self,
        channel: str,
        text: str,
        thread_ts: str | None = None,
    ) -> dict[str, Any]:
        """Publica mensagem em um canal (opcionalmente em thread)."""
        payload: dict[str, Any] = {"channel": channel, "text": text}
        if thread_ts:
            payload["thread_ts"] = thread_ts
        return await self._call("chat.postMessage", payload)

    async def update_message(self, channel: str, ts: str, text: str) -> dict[str, Any]:
        """Atualiza o texto de uma mensagem existente."""
        return await self._call("chat.update", {"channel": channel, "ts": ts, "text": text})

    async def _call(self, method: str, payload: dict[str, Any]) -> dict[str, Any]:
        if not self._bot_token or not self._bot_token.strip():
            raise SlackApiError(method, "missing_bot_token")

        headers = {
            "Content-Type": "application/json; charset=utf-8",
            "Authorization": f"Bearer {self._bot_token}",
        }
        try:
            response = await self.post(f"{self._api_base_url}/{method}", json=payload, headers=headers)
        except HttpError as exc:
            raise SlackApiError(method, str(exc), status_code=exc.status_code) from exc
        return self._process_response(method, response)

    def _process_response(self, method: str, response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except json.JSONDecodeError as exc:
            raise SlackApiError(method, "invalid_json_response", response.status_code) from exc

        if not isinstance(data, dict) or not data.get("ok"):
            error = data.get("error", "unknown_error") if isinstance(data, dict) else "unknown_error"
            logger.warning(
                "slack_api_error",
                extra={"method": method, "error": error, "status_code": response.status_code},
            )
            raise SlackApiError(method, str(error), response.status_code)

        logger.debug(
            "slack_api_success",
            extra={"method": method, "status_code": response.status_code},
        )
        return data


def create_slack_api_client(settings: SlackSettings) -> SlackApiClient:
    """Factory do cliente Slack a partir das settings."""
    config = HttpClientConfig(
        timeout_seconds=settings.request_timeout_seconds,
        max_retries=settings.max_retries,
    )
    return SlackApiClient(
        bot_token=settings.bot_token,
        api_base_url=settings.api_base_url,
        config=config,
    )
