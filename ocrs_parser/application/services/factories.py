from __future__ import annotations

from ocrs_parser.application.llm.adapters.llm_openai_adapter import OpenAIExtractionAdapter
from ocrs_parser.application.llm.resources import load_schema, load_system_prompt
from ocrs_parser.core.config import Settings, get_settings
from ocrs_parser.domain.pipeline.orchestrator import Pipeline
from ocrs_parser.infrastructure.clients.chat_completions_http import ChatCompletionsClient


def build_llm_client(settings: Settings | None = None) -> OpenAIExtractionAdapter:
    s = settings or get_settings()
    client = ChatCompletionsClient(
        base_url=s.LLM_BASE_URL,
        api_key=s.LLM_API_KEY.get_secret_value(),
        timeout_seconds=s.LLM_TIMEOUT_SECONDS,
        verify_ssl=s.LLM_VERIFY_SSL,
    )
    return OpenAIExtractionAdapter(
        client,
        system_prompt=load_system_prompt(s.PROMPT_PATH),
        schema=load_schema(s.SCHEMA_PATH),
        model=s.LLM_MODEL,
        temperature=s.LLM_TEMPERATURE,
        seed=s.LLM_SEED,
        max_tokens=s.LLM_MAX_TOKENS,
    )


def build_pipeline(settings: Settings | None = None) -> Pipeline:
    s = settings or get_settings()
    return Pipeline(build_llm_client(s), max_retries=s.PIPELINE_MAX_RETRIES)
