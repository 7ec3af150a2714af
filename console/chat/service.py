"""AI chat — OpenAI-compatible chat completion client.

Not part of the backend adapter: it talks to a third-party endpoint with its
own API key and never sees the console session.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

import httpx

from console.chat.schemas import ChatMessage, ChatReply
from console.common.exceptions import ChatConfigurationError, ChatUpstreamError

logger = logging.getLogger(__name__)


class ChatService:
    """Send a message plus recent history, return the assistant's reply."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        *,
        api_key: str,
        base_url: str,
        model: str,
        history_limit: int = 10,
    ) -> None:
        self.http = http
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.history_limit = history_limit

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def build_messages(self, message: str, history: Sequence[ChatMessage]) -> List[Dict[str, str]]:
        """Keep the last ``history_limit`` turns, then append the new user message."""
        recent = list(history)[-self.history_limit:] if self.history_limit > 0 else []
        messages = [{"role": m.role, "content": m.content} for m in recent]
        messages.append({"role": "user", "content": message})
        return messages

    async def complete(self, message: str, history: Sequence[ChatMessage] = ()) -> ChatReply:
        if not self.configured:
            raise ChatConfigurationError()

        payload = {
            "model": self.model,
            "messages": self.build_messages(message, history),
            "stream": False,
        }
        try:
            response = await self.http.post(
                f"{self.base_url}/v1/chat/completions",
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
            )
        except httpx.TransportError as e:
            logger.error("Chat endpoint unreachable: %s", e)
            raise ChatUpstreamError(f"Chat endpoint unreachable: {e}") from e

        if response.is_error:
            detail = self._error_message(response)
            logger.error("Chat completion failed (%s): %s", response.status_code, detail)
            raise ChatUpstreamError(detail)

        content = self._reply_content(response)
        if not content:
            raise ChatUpstreamError("Malformed chat response: no reply content found")
        return ChatReply(content=content, model=self.model)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body: Any = response.json()
        except ValueError:
            body = {}
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        return f"API request failed: {response.status_code} {response.reason_phrase}"

    @staticmethod
    def _reply_content(response: httpx.Response) -> str:
        try:
            data = response.json()
            return data["choices"][0]["message"]["content"] or ""
        except (ValueError, KeyError, IndexError, TypeError):
            return ""
