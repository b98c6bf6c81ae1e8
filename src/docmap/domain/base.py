"""Core base classes for registry records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable record base with strict validation."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_assignment=True)
