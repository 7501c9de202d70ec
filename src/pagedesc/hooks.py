# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Host integration: derivation hook, override directive, metadata export.

The host rendering pipeline calls, in order:

1. ``on_first_call_init(registrar)`` once per markup processor, which
   registers the ``description2`` override directive when enabled
2. the directive callback, whenever page markup invokes it
3. ``on_content_rendered(compilation, html)`` once the body HTML exists
4. ``on_output(compilation, sink)`` when building the page response

The override only takes precedence because step 2 runs before step 3.
The store itself just makes repeated calls idempotent.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol, runtime_checkable

import structlog

from .config import DescriptionConfig
from .context import PageCompilation
from .derivation.provider import DescriptionProvider, SimpleDescriptionProvider
from .store import (
    ABSENT,
    DESCRIPTION_KEY,
    OG_DESCRIPTION_KEY,
    SetResult,
    get_description,
    set_description,
)

logger = logging.getLogger(__name__)

DIRECTIVE_NAME = "description2"

DirectiveCallback = Callable[..., str]


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


@runtime_checkable
class OverrideRegistrar(Protocol):
    """Host markup processor that accepts callable directives."""

    def register(self, name: str, callback: DirectiveCallback) -> None: ...


@runtime_checkable
class MetadataSink(Protocol):
    """Page response that collects ``<meta>`` entries."""

    def publish(self, name: str, value: str) -> None: ...

    def has_meta(self, name: str) -> bool: ...


# ---------------------------------------------------------------------------
# Override directive
# ---------------------------------------------------------------------------


def override_description(compilation: PageCompilation, *args: str) -> str:
    """Directive callback: ``{{#description2: text}}`` style explicit override.

    The host expands the argument before calling. The write is always
    attempted; if a description is already stored it is a silent no-op.
    Renders to an empty string.
    """
    text = args[0] if args else ""
    result = set_description(compilation.store, text)
    if result is SetResult.ALREADY_SET:
        logger.debug("Override ignored, description already set")
    return ""


class DirectiveRegistry:
    """Dict-backed OverrideRegistrar for hosts without their own directive table."""

    def __init__(self) -> None:
        self._directives: dict[str, DirectiveCallback] = {}

    def register(self, name: str, callback: DirectiveCallback) -> None:
        self._directives[name] = callback

    def __contains__(self, name: object) -> bool:
        return name in self._directives

    def invoke(self, name: str, compilation: PageCompilation, *args: str) -> str:
        """Run a registered directive. Unknown names raise KeyError."""
        return self._directives[name](compilation, *args)


# ---------------------------------------------------------------------------
# Hooks
# ---------------------------------------------------------------------------


class DescriptionHooks:
    """Wires description derivation into a host's rendering lifecycle."""

    def __init__(self, config: DescriptionConfig, provider: DescriptionProvider | None = None) -> None:
        self._config = config
        self._provider = provider if provider is not None else SimpleDescriptionProvider()

    def on_first_call_init(self, registrar: OverrideRegistrar) -> bool:
        if not self._config.enable_meta_description_functions:
            # Directive disabled, only automatic derivation populates the property
            return True
        registrar.register(DIRECTIVE_NAME, override_description)
        logger.debug("Registered %r directive", DIRECTIVE_NAME)
        return True

    def on_content_rendered(self, compilation: PageCompilation, html: str) -> bool:
        """Derive a description from the rendered body, unless one exists already."""
        with structlog.contextvars.bound_contextvars(compilation_id=compilation.compilation_id):
            if compilation.interface_message:
                return True

            # Hosts may re-render the same page (e.g. file pages); skip the scan
            if get_description(compilation.store):
                return True

            desc = self._provider.derive(html)
            if desc:
                if set_description(compilation.store, desc) is SetResult.STORED:
                    logger.info("Derived page description (%d chars)", len(desc))
                else:
                    logger.debug("Derived description discarded, empty override already set")
            else:
                logger.debug("No paragraph text found for description")
        return True

    def on_output(self, compilation: PageCompilation, sink: MetadataSink) -> None:
        """Export the stored description as ``description`` and ``og:description`` meta."""
        description = get_description(compilation.store)
        if description is ABSENT:
            return
        for name in (DESCRIPTION_KEY, OG_DESCRIPTION_KEY):
            # Called more than once per response, or another plugin got there first
            if sink.has_meta(name):
                continue
            sink.publish(name, description)
