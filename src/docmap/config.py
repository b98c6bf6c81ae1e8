"""Lightweight registry configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no"}


@dataclass(frozen=True)
class RegistrySettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    document_attribute: str = "_document"
    strict_defaults: bool = True

    @classmethod
    def from_env(cls) -> RegistrySettings:
        return cls(
            environment=os.getenv("DOCMAP_ENV", cls.environment),
            document_attribute=os.getenv("DOCMAP_DOCUMENT_ATTRIBUTE") or cls.document_attribute,
            strict_defaults=_env_bool("DOCMAP_STRICT_DEFAULTS", True),
        )


__all__ = ["RegistrySettings"]
