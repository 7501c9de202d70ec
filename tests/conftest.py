# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Shared test configuration and fixtures."""

try:
    import pagedesc  # noqa: F401
except ImportError:
    raise ImportError("pagedesc is not installed. Run: pip install -e '.[dev]'") from None

import pytest

from pagedesc.config import DescriptionConfig
from pagedesc.context import PageCompilation


@pytest.fixture
def compilation() -> PageCompilation:
    """Fresh page compilation with an empty property store."""
    return PageCompilation()


@pytest.fixture
def enabled_config() -> DescriptionConfig:
    return DescriptionConfig(enable_meta_description_functions=True)


@pytest.fixture(autouse=True)
def _clear_pagedesc_env(monkeypatch):
    """Keep PAGEDESC_* from the developer's shell out of config tests."""
    for name in ("PAGEDESC_ENABLE_FUNCTIONS", "PAGEDESC_LOG_LEVEL", "PAGEDESC_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
