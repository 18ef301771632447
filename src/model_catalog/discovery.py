"""
discovery.py — Background model discovery and per-process cache.

Responsibilities:
  • Fetch the live model list from a provider's OpenAI-compatible
    ``/models`` endpoint
  • Normalise namespaced ids ("models/gemini-pro" → "gemini-pro") and sort
  • Cache the outcome per provider for the lifetime of the process
  • Share one in-flight fetch between concurrent callers
  • Never raise: every failure becomes an empty list

Dependencies: httpx (async HTTP), cachetools (bounded cache), pydantic (schemas)
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

import httpx
from cachetools import Cache
from pydantic import ValidationError

from model_catalog import config
from model_catalog.classifier import normalize_model_id
from model_catalog.config import settings
from model_catalog.models import CatalogEntry, FetchErrorKind, ModelListResponse

logger = logging.getLogger(__name__)

ErrorHook = Callable[[str, "CatalogError"], None]


# ══════════════════════════════════════════════════════════════════════════════
# Error taxonomy
# ══════════════════════════════════════════════════════════════════════════════


class CatalogError(Exception):
    """Base class for failures inside a single provider fetch."""

    kind: FetchErrorKind = FetchErrorKind.UNEXPECTED

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(message)
        self.provider = provider


class MissingCredentialError(CatalogError):
    kind = FetchErrorKind.MISSING_CREDENTIAL


class MissingBaseUrlError(CatalogError):
    kind = FetchErrorKind.MISSING_BASE_URL


class TransportFailureError(CatalogError):
    kind = FetchErrorKind.TRANSPORT_FAILURE


class MalformedResponseError(CatalogError):
    kind = FetchErrorKind.MALFORMED_RESPONSE


# ══════════════════════════════════════════════════════════════════════════════
# ModelCatalog  — the main class
# ══════════════════════════════════════════════════════════════════════════════


class ModelCatalog:
    """
    Fetches and caches the model list for each provider.

    Usage::

        catalog = ModelCatalog()
        catalog.prefetch("openai")                       # when the UI starts
        models = await catalog.get_available_models("OpenAI")

    The first call for a provider performs the network request; later calls
    are served from the cache. With ``cache_failures=True`` (the default) an
    empty result caused by a failure is cached too and is not retried for the
    rest of the process.
    """

    def __init__(
        self,
        api_key_getter: Callable[[str], Optional[str]] = config.get_api_key,
        base_url_getter: Callable[[str], Optional[str]] = config.get_base_url,
        cache_failures: Optional[bool] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        on_error: Optional[ErrorHook] = None,
    ) -> None:
        self._get_api_key = api_key_getter
        self._get_base_url = base_url_getter
        self._cache_failures = (
            settings.cache_failed_fetches if cache_failures is None else cache_failures
        )
        self._timeout = settings.discovery_timeout if timeout is None else timeout
        self._transport = transport
        self._on_error = on_error
        self._cache: Cache = Cache(maxsize=settings.catalog_max_providers)
        self._inflight: Dict[str, asyncio.Task] = {}

    # ── Public interface ───────────────────────────────────────────────────────

    async def get_available_models(self, provider: str) -> List[str]:
        """Return the sorted model ids for `provider`; ``[]`` on any failure."""
        key = provider.lower()
        entry = self._cache.get(key)
        if entry is None:
            entry = await self._shared_fetch(key)
        return list(entry.models)

    def prefetch(self, provider: str) -> asyncio.Task:
        """Start fetching `provider` in the background and return the task.

        Must be called from inside a running event loop.
        """
        key = provider.lower()
        return asyncio.create_task(self.get_available_models(key))

    def get_entry(self, provider: str) -> Optional[CatalogEntry]:
        """Return the cached outcome for `provider` without fetching."""
        return self._cache.get(provider.lower())

    def clear(self, provider: Optional[str] = None) -> None:
        """Drop the cached entry for `provider`, or every entry."""
        if provider is None:
            self._cache.clear()
            return
        self._cache.pop(provider.lower(), None)

    # ── Internal ───────────────────────────────────────────────────────────────

    async def _shared_fetch(self, provider: str) -> CatalogEntry:
        # Check-and-insert happens without an await in between, so only one
        # task per provider is ever created on a given loop.
        task = self._inflight.get(provider)
        if task is None:
            task = asyncio.create_task(self._load(provider))
            self._inflight[provider] = task
            task.add_done_callback(lambda _t: self._inflight.pop(provider, None))
        return await asyncio.shield(task)

    async def _load(self, provider: str) -> CatalogEntry:
        try:
            models = await self._fetch_models(provider)
        except Exception as exc:
            err = exc if isinstance(exc, CatalogError) else CatalogError(provider, str(exc))
            logger.debug(
                "Model discovery failed for %s (%s): %s", provider, err.kind.value, exc
            )
            self._report_error(provider, err)
            entry = CatalogEntry(provider=provider, error=err.kind)
            # Failures are only cached for providers with a resolvable endpoint
            if self._cache_failures and self._has_endpoint(provider):
                self._cache[provider] = entry
            return entry

        entry = CatalogEntry(provider=provider, models=tuple(models))
        self._cache[provider] = entry
        logger.debug("Discovered %d models from %s", len(models), provider)
        return entry

    async def _fetch_models(self, provider: str) -> List[str]:
        api_key = self._get_api_key(provider)
        if not api_key:
            raise MissingCredentialError(
                provider, f"No API key configured for provider: {provider}"
            )
        base_url = self._get_base_url(provider)
        if not base_url:
            raise MissingBaseUrlError(provider, f"No base URL configured for provider: {provider}")

        payload = await self._fetch_json(f"{base_url.rstrip('/')}/models", api_key, provider)
        try:
            listing = ModelListResponse.model_validate(payload)
        except ValidationError as exc:
            raise MalformedResponseError(
                provider, f"Unexpected model list shape: {exc.error_count()} errors"
            ) from exc

        return sorted(normalize_model_id(mid) for mid in listing.model_ids())

    async def _fetch_json(self, url: str, api_key: str, provider: str) -> Any:
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
        }
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                r = await client.get(url, headers=headers)
                r.raise_for_status()
        except httpx.HTTPError as exc:
            raise TransportFailureError(provider, f"{type(exc).__name__}: {exc}") from exc

        try:
            return r.json()
        except ValueError as exc:
            raise MalformedResponseError(provider, "Response body is not JSON") from exc

    def _has_endpoint(self, provider: str) -> bool:
        try:
            return bool(self._get_base_url(provider))
        except Exception:
            return False

    def _report_error(self, provider: str, err: CatalogError) -> None:
        if self._on_error is None:
            return
        try:
            self._on_error(provider, err)
        except Exception:
            logger.debug("on_error hook raised for provider %s", provider, exc_info=True)


# ══════════════════════════════════════════════════════════════════════════════
# Process-wide default catalog
# ══════════════════════════════════════════════════════════════════════════════

_default_catalog: Optional[ModelCatalog] = None


def get_default_catalog() -> ModelCatalog:
    """Return the process-wide catalog, creating it on first use."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = ModelCatalog()
    return _default_catalog


def reset_default_catalog() -> None:
    """Discard the process-wide catalog and everything it cached."""
    global _default_catalog
    _default_catalog = None


async def get_available_models(provider: str) -> List[str]:
    """Return the models for `provider` from the process-wide catalog."""
    return await get_default_catalog().get_available_models(provider)
