"""Thin wrapper around LLM providers (Groq / OpenAI / Azure / local-compatible)."""

from __future__ import annotations

import logging
from typing import Any

from openai import AsyncOpenAI, AsyncAzureOpenAI

from config import settings

logger = logging.getLogger("summarizer.llm")


def _build_client() -> tuple[AsyncOpenAI, str]:
    """Return (async_client, model_name) based on the configured provider."""
    provider = settings.llm_provider.lower()

    if provider == "openai":
        client = AsyncOpenAI(api_key=settings.openai_api_key or "not-configured")
        model = settings.openai_model
    elif provider == "azure":
        client = AsyncAzureOpenAI(
            azure_endpoint=settings.azure_openai_endpoint,
            api_key=settings.azure_openai_api_key,
            api_version="2024-12-01-preview",
        )
        model = settings.azure_openai_deployment
    elif provider == "local":
        client = AsyncOpenAI(
            base_url=settings.local_llm_base_url,
            api_key="not-needed",
        )
        model = settings.local_llm_model
    else:  # default: groq
        client = AsyncOpenAI(
            base_url=settings.groq_base_url,
            api_key=settings.groq_api_key or "not-configured",
        )
        model = settings.groq_model

    return client, model


_client, _model = _build_client()


class LLMError(Exception):
    """Raised when the chat-completion call fails."""


async def chat_completion(
    system_prompt: str,
    user_message: str,
    *,
    temperature: float | None = None,
    max_tokens: int | None = None,
) -> str:
    """Send a chat-completion request and return the assistant's text reply.

    Parameters
    ----------
    system_prompt : str
        The system-level instruction.
    user_message : str
        The single user turn.
    temperature : float, optional
        Sampling temperature; defaults to ``settings.summary_temperature``.
    max_tokens : int, optional
        Output cap; defaults to ``settings.summary_max_tokens``.

    Returns
    -------
    str
        Text of the first choice, or ``""`` when the provider returned none.
    """
    kwargs: dict[str, Any] = {
        "model": _model,
        "temperature": temperature if temperature is not None else settings.summary_temperature,
        "max_tokens": max_tokens if max_tokens is not None else settings.summary_max_tokens,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_message},
        ],
    }

    try:
        response = await _client.chat.completions.create(**kwargs)
    except Exception as exc:
        logger.exception("LLM call failed: %s", exc)
        raise LLMError(f"Chat completion failed: {exc}") from exc

    if not response.choices:
        logger.warning("LLM returned no choices.")
        return ""
    return response.choices[0].message.content or ""
