"""
classifier.py — Model-name normalisation and recommendation labels.

Pure, stateless helpers. The UI calls ``is_recommended`` to decide whether
to show a "not a recommended model" warning; the catalog calls
``normalize_model_id`` on every id a provider returns.
"""

from __future__ import annotations

from typing import Any, Optional

RECOMMENDED_MODELS: tuple[str, ...] = (
    "o4-mini",
    "o3",
    "deepseek-v3",
)

# Gemini's OpenAI-compatible endpoint namespaces ids as "models/<id>"
MODEL_NAMESPACE_PREFIX = "models/"


def normalize_model_id(model_id: str) -> str:
    """Strip a single leading ``models/`` namespace from `model_id`."""
    if model_id.startswith(MODEL_NAMESPACE_PREFIX):
        return model_id[len(MODEL_NAMESPACE_PREFIX):]
    return model_id


def is_recommended(model: Optional[Any]) -> bool:
    """Return whether `model` is in the recommended list.

    Informational only; nothing is blocked on it. A missing or blank name
    returns True so callers do not warn about it.
    """
    if not isinstance(model, str) or not model.strip():
        return True
    return model.strip() in RECOMMENDED_MODELS


def is_supported(model: Optional[Any]) -> bool:  # noqa: ARG001
    """Deprecated: every model is accepted. Always returns True."""
    return True
