"""Public package surface for model_catalog.

Expose the primary entry points used by consumers of the package.
"""

__version__ = "0.1.0"

from model_catalog.classifier import (
    RECOMMENDED_MODELS,
    is_recommended,
    is_supported,
    normalize_model_id,
)
from model_catalog.config import PROVIDER_CATALOGUE, settings
from model_catalog.discovery import (
    CatalogError,
    MalformedResponseError,
    MissingBaseUrlError,
    MissingCredentialError,
    ModelCatalog,
    TransportFailureError,
    get_available_models,
    get_default_catalog,
    reset_default_catalog,
)
from model_catalog.models import CatalogEntry, FetchErrorKind

__all__ = [
    "PROVIDER_CATALOGUE",
    "RECOMMENDED_MODELS",
    "CatalogEntry",
    "CatalogError",
    "FetchErrorKind",
    "MalformedResponseError",
    "MissingBaseUrlError",
    "MissingCredentialError",
    "ModelCatalog",
    "TransportFailureError",
    "__version__",
    "get_available_models",
    "get_default_catalog",
    "is_recommended",
    "is_supported",
    "normalize_model_id",
    "reset_default_catalog",
    "settings",
]
