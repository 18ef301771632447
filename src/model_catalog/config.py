"""
config.py — Centralised configuration for the model catalog

Provider endpoints, credential lookups, and tunable knobs live here.
Everything referencing a provider name resolves it through these helpers;
the catalog itself never reads the environment directly.
"""

from __future__ import annotations

import os
from typing import Any, Optional


def _env_bool(key: str, default: bool) -> bool:
    val = os.getenv(key, "").lower()
    if val in ("1", "true", "yes"):
        return True
    if val in ("0", "false", "no"):
        return False
    return default


class Settings:
    """
    Simple settings object populated from environment variables.
    """

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Timeout for a single "list models" round-trip
    discovery_timeout: float = float(os.getenv("DISCOVERY_TIMEOUT", "10"))

    # Cache
    # When false, failed fetches are not cached and the next call retries.
    # Entries are only stored for providers with a resolvable base URL (the
    # catalogue plus <PROVIDER>_BASE_URL overrides), so the bound is never
    # reached unless more overrides than this are configured.
    cache_failed_fetches: bool = _env_bool("MODEL_CATALOG_CACHE_FAILURES", True)
    catalog_max_providers: int = int(os.getenv("MODEL_CATALOG_MAX_PROVIDERS", "256"))


settings = Settings()


# ══════════════════════════════════════════════════════════════════════════════
# Provider catalogue  — single source of truth
# ══════════════════════════════════════════════════════════════════════════════

# Every provider definition:
#   name          — display name
#   api_key_env   — env var that holds the credential
#   base_url      — OpenAI-compatible API root; "/models" is appended for listing

PROVIDER_CATALOGUE: dict[str, dict[str, Any]] = {
    "openai": {
        "name": "OpenAI",
        "api_key_env": "OPENAI_API_KEY",
        "base_url": "https://api.openai.com/v1",
    },
    "azure": {
        "name": "AzureOpenAI",
        "api_key_env": "AZURE_OPENAI_API_KEY",
        "base_url": "https://YOUR_PROJECT_NAME.openai.azure.com/openai",
    },
    "openrouter": {
        "name": "OpenRouter",
        "api_key_env": "OPENROUTER_API_KEY",
        "base_url": "https://openrouter.ai/api/v1",
    },
    "gemini": {
        "name": "Gemini",
        "api_key_env": "GEMINI_API_KEY",
        # The OpenAI-compatible listing returns ids like "models/gemini-2.0-flash"
        "base_url": "https://generativelanguage.googleapis.com/v1beta/openai",
    },
    "ollama": {
        "name": "Ollama",
        "api_key_env": "OLLAMA_API_KEY",
        "base_url": "http://localhost:11434/v1",
    },
    "mistral": {
        "name": "Mistral",
        "api_key_env": "MISTRAL_API_KEY",
        "base_url": "https://api.mistral.ai/v1",
    },
    "deepseek": {
        "name": "DeepSeek",
        "api_key_env": "DEEPSEEK_API_KEY",
        "base_url": "https://api.deepseek.com",
    },
    "xai": {
        "name": "xAI",
        "api_key_env": "XAI_API_KEY",
        "base_url": "https://api.x.ai/v1",
    },
    "groq": {
        "name": "Groq",
        "api_key_env": "GROQ_API_KEY",
        "base_url": "https://api.groq.com/openai/v1",
    },
    "arceeai": {
        "name": "ArceeAI",
        "api_key_env": "ARCEEAI_API_KEY",
        "base_url": "https://conductor.arcee.ai/v2",
    },
}


def initialize_provider_env_vars(dotenv_path: Optional[str] = None) -> None:
    """Load a .env file into the process environment.

    Call this at process start, not at import time. Without `dotenv_path`
    the nearest .env above the working directory is used. Existing
    variables are never overwritten.
    """
    from dotenv import find_dotenv, load_dotenv

    load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)


def get_base_url(provider: str) -> Optional[str]:
    """Return the API root for `provider`, or None if it cannot be resolved.

    A ``<PROVIDER>_BASE_URL`` environment variable overrides the catalogue.
    """
    provider = provider.lower()
    override = os.getenv(f"{provider.upper()}_BASE_URL")
    if override:
        return override.rstrip("/")
    cfg = PROVIDER_CATALOGUE.get(provider)
    if not cfg or not cfg.get("base_url"):
        return None
    return cfg["base_url"].rstrip("/")


def get_api_key(provider: str) -> Optional[str]:
    """Return the configured credential for `provider`, or None.

    Providers outside the catalogue are looked up as ``<PROVIDER>_API_KEY``.
    """
    provider = provider.lower()
    cfg = PROVIDER_CATALOGUE.get(provider)
    env_name = cfg.get("api_key_env") if cfg else f"{provider.upper()}_API_KEY"
    if not env_name:
        return None
    return os.getenv(env_name) or None


def has_api_key(provider: str) -> bool:
    """Return True if a credential is configured for `provider`."""
    return bool(get_api_key(provider))
