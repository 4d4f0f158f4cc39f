from __future__ import annotations

import logging
from typing import Any, Sequence

from ocrs_parser.application.llm.parsers import extract_message_content, parse_record, parse_usage
from ocrs_parser.application.llm.prompts import build_messages
from ocrs_parser.core.const import SCHEMA_NAME
from ocrs_parser.domain.models import FormatTier, ParseResult
from ocrs_parser.domain.pipeline.schema_strict import to_strict
from ocrs_parser.infrastructure.clients.chat_completions_http import ChatCompletionsClient

logger = logging.getLogger(__name__)


class OpenAIExtractionAdapter:
    """Extractor and FeedbackExtractor backed by OpenAI structured outputs.

    The strict schema is derived once here and reused for every request.
    """

    provider = "openai"

    def __init__(
        self,
        client: ChatCompletionsClient,
        *,
        system_prompt: str,
        schema: dict[str, Any],
        model: str = "gpt-4o-2024-08-06",
        temperature: float = 0.0,
        seed: int | None = 42,
        max_tokens: int = 4096,
    ) -> None:
        self._client = client
        self._system_prompt = system_prompt
        self._strict_schema = to_strict(schema)
        self._model = model
        self._temperature = temperature
        self._seed = seed
        self._max_tokens = max_tokens

    @property
    def strict_schema(self) -> dict[str, Any]:
        return self._strict_schema

    def _payload(self, messages: list[dict[str, str]]) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": self._model,
            "temperature": self._temperature,
            "max_tokens": self._max_tokens,
            "messages": messages,
            "response_format": {
                "type": "json_schema",
                "json_schema": {
                    "name": SCHEMA_NAME,
                    "strict": True,
                    "schema": self._strict_schema,
                },
            },
        }
        if self._seed is not None:
            payload["seed"] = self._seed
        return payload

    async def _call(self, messages: list[dict[str, str]]) -> ParseResult:
        data = await self._client.create(self._payload(messages))
        record = parse_record(extract_message_content(data))
        usage = parse_usage(data)
        logger.debug(
            "llm_call_completed",
            extra={
                "provider": self.provider,
                "model": self._model,
                "input_tokens": usage.input_tokens,
                "output_tokens": usage.output_tokens,
            },
        )
        return ParseResult(parsed_json=record, provider=self.provider, model=self._model, usage=usage)

    async def parse(self, text: str, format_hint: FormatTier) -> ParseResult:
        return await self._call(build_messages(self._system_prompt, text, format_hint))

    async def parse_with_feedback(
        self,
        text: str,
        format_hint: FormatTier,
        prior_errors: Sequence[str],
    ) -> ParseResult:
        return await self._call(
            build_messages(self._system_prompt, text, format_hint, prior_errors=prior_errors)
        )
