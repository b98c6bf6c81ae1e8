from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the src/ directory is importable when tests run via `uv run pytest`.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from docmap.config import RegistrySettings  # noqa: E402
from docmap.registry import FieldRegistry  # noqa: E402


@pytest.fixture()
def registry() -> FieldRegistry:
    """A registry isolated from the process-wide one."""

    return FieldRegistry(settings=RegistrySettings(environment="test"))
