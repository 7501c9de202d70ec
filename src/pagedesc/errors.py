# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""pagedesc exception hierarchy.

Derivation itself never raises: degenerate HTML simply yields no
description. Exceptions are reserved for the surrounding glue
(configuration loading, CLI input).
"""

from __future__ import annotations


class PageDescError(Exception):
    """Base exception for all pagedesc errors."""


class ConfigError(PageDescError):
    """Configuration file or environment could not be loaded."""

    def __init__(self, message: str, *, source: str = "") -> None:
        super().__init__(message)
        self.source = source
