"""
Cliente LLM - chamada única de chat completion (SiliconFlow, compatível com OpenAI).
"""

import logging
import os

from openai import OpenAI, APIConnectionError, APIStatusError

import settings
from errors import ConfigError, UpstreamError

logger = logging.getLogger(__name__)


def _build_client(api_key: str) -> OpenAI:
    """Cliente OpenAI apontado para o endpoint configurado."""
    # Sem retry automático do SDK: uma tentativa por chamada
    return OpenAI(
        api_key=api_key,
        base_url=settings.LLM_BASE_URL,
        timeout=settings.LLM_TIMEOUT_SECONDS,
        max_retries=0,
    )


def call_llm(prompt: str) -> str:
    """Envia o prompt como mensagem única de usuário e retorna o texto da primeira escolha."""

    api_key = os.getenv(settings.LLM_API_KEY_ENV)
    if not api_key:
        raise ConfigError(f"missing credential: {settings.LLM_API_KEY_ENV} is not set")

    client = _build_client(api_key)

    try:
        response = client.chat.completions.create(
            model=settings.LLM_MODEL,
            messages=[{"role": "user", "content": prompt}],
            stream=False,
        )
    except APIStatusError as e:
        body = e.response.text
        logger.error("LLM API error (%s): %s", e.status_code, body)
        raise UpstreamError("LLM service returned an error", body=body) from e
    except APIConnectionError as e:
        logger.error("LLM API unreachable: %s", e)
        raise UpstreamError("LLM service unreachable") from e

    if not response.choices:
        return ""
    message = response.choices[0].message
    if message is None or not message.content:
        return ""
    return message.content
