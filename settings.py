"""Configuração do serviço, lida do ambiente (.env suportado)."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _get_number(name: str, default, cast=int):
    """Lê uma variável numérica; valores inválidos caem no default."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Invalid value for %s: %r, using %r", name, raw, default)
        return default


def _get_log_level(name: str, default: str = "INFO") -> str:
    """Lê o nível de log; nomes desconhecidos caem no default."""
    level = os.getenv(name, default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Invalid value for %s: %r, using %r", name, level, default)
        return default
    return level


PORT = _get_number("PORT", 3000)

# =============================================================================
# LLM (SiliconFlow, API compatível com OpenAI)
# =============================================================================
LLM_API_KEY_ENV = "SILICONFLOW_API_KEY"
LLM_BASE_URL = os.getenv("LLM_BASE_URL", "https://api.siliconflow.cn/v1")
LLM_MODEL = os.getenv("LLM_MODEL", "deepseek-ai/DeepSeek-R1-0528-Qwen3-8B")
# None = sem timeout
LLM_TIMEOUT_SECONDS = _get_number("LLM_TIMEOUT_SECONDS", None, float)

# =============================================================================
# GEOLOCALIZAÇÃO
# =============================================================================
IP_API_URL = os.getenv("IP_API_URL", "http://ip-api.com/json/")
GEO_TIMEOUT_SECONDS = _get_number("GEO_TIMEOUT_SECONDS", None, float)

# =============================================================================
# HTTP / PROXY
# =============================================================================
# Quantos proxies reversos são confiáveis para o header X-Forwarded-For
TRUSTED_PROXY_HOPS = _get_number("TRUSTED_PROXY_HOPS", 1)
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
STATIC_DIR = os.getenv("STATIC_DIR", "public")

LOG_LEVEL = _get_log_level("LOG_LEVEL")
