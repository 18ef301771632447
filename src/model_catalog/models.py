"""
models.py — Pydantic schemas and runtime dataclasses for the model catalog.

Two layers:
  1. Wire schemas for a provider's "list models" response
  2. Runtime state objects (CatalogEntry, FetchErrorKind)
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, RootModel, field_validator, model_validator


# ══════════════════════════════════════════════════════════════════════════════
# Enumerations
# ══════════════════════════════════════════════════════════════════════════════


class FetchErrorKind(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    MISSING_BASE_URL   = "missing_base_url"
    TRANSPORT_FAILURE  = "transport_failure"
    MALFORMED_RESPONSE = "malformed_response"
    UNEXPECTED         = "unexpected"


# ══════════════════════════════════════════════════════════════════════════════
# Wire schemas
# ══════════════════════════════════════════════════════════════════════════════


class ModelListEntry(BaseModel):
    """One record of a "list models" response. Only ``id`` is used."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def drop_non_string_id(cls, v: Any) -> Optional[str]:
        # Records whose id is not a string are kept but treated as id-less
        return v if isinstance(v, str) else None


class ModelListPage(BaseModel):
    """OpenAI-style envelope: ``{"object": "list", "data": [...]}``."""

    model_config = ConfigDict(extra="ignore")

    data: List[ModelListEntry]

    @field_validator("data", mode="before")
    @classmethod
    def drop_non_object_records(cls, v: Any) -> Any:
        # null / string / number records are skipped one at a time
        if isinstance(v, list):
            return [item for item in v if isinstance(item, dict)]
        return v


class ModelListResponse(RootModel[ModelListPage]):
    """Either the OpenAI envelope or a bare list of records."""

    @model_validator(mode="before")
    @classmethod
    def wrap_bare_list(cls, v: Any) -> Any:
        if isinstance(v, list):
            return {"data": v}
        return v

    @property
    def entries(self) -> List[ModelListEntry]:
        return self.root.data

    def model_ids(self) -> List[str]:
        """Return the non-empty string ids in response order."""
        return [e.id for e in self.entries if e.id]


# ══════════════════════════════════════════════════════════════════════════════
# Runtime state
# ══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class CatalogEntry:
    """Cached outcome of one provider fetch."""

    provider: str
    models: Tuple[str, ...] = ()
    error: Optional[FetchErrorKind] = None
    fetched_at: float = field(default_factory=time.time)

    @property
    def ok(self) -> bool:
        return self.error is None
