# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""structlog + stdlib bridge. Terminal: ConsoleRenderer, pipelines: JSONRenderer.

Leaf module: pagedesc imports are type-only. Library modules log through plain
``logging.getLogger(__name__)``; hosts call configure() or configure_for() once.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from .config import DescriptionConfig


def _shared_processors() -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def configure(*, json_output: bool = False, level: str = "INFO", stream: TextIO | None = None) -> None:
    """Route stdlib and structlog records through one structlog formatter.

    Args:
        json_output: True for JSON lines, False for human-readable output.
        level: Root logger level name; unknown names fall back to INFO.
        stream: Destination stream (default sys.stderr, resolved at call time).
    """
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False)
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        foreign_pre_chain=shared,
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def configure_for(
    config: DescriptionConfig,
    *,
    verbose: bool = False,
    json_output: bool | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure logging from a DescriptionConfig.

    ``verbose`` forces DEBUG; ``json_output`` (when not None) overrides
    ``config.log_json``, so a CLI flag can switch a console config to JSON.
    """
    level = "DEBUG" if verbose else config.log_level
    use_json = config.log_json if json_output is None else json_output
    configure(json_output=use_json, level=level, stream=stream)
    logging.getLogger("pagedesc").debug("Logging configured (level=%s, json=%s)", level, use_json)
