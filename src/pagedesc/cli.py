# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""pagedesc CLI: derive a page description or the meta tags for it.

Usage:
    python -m pagedesc.cli derive [FILE] [--format text|json] [--description TEXT]
    python -m pagedesc.cli meta [FILE] [--description TEXT]
    python -m pagedesc.cli --config pagedesc.yaml derive page.html

HTML is read from FILE, or from stdin when FILE is omitted or "-".
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import DescriptionConfig, load_config
from .context import PageCompilation
from .errors import ConfigError, PageDescError
from .hooks import DIRECTIVE_NAME, DescriptionHooks, DirectiveRegistry
from .logging_config import configure_for
from .output import MetaTagCollector
from .store import ABSENT, get_description

logger = logging.getLogger(__name__)


def _read_html(path_str: str | None) -> str:
    if not path_str or path_str == "-":
        return sys.stdin.read()
    return Path(path_str).read_text(encoding="utf-8")


def _compile(args: argparse.Namespace, config: DescriptionConfig) -> tuple[PageCompilation, str | None]:
    """Run one page compilation through the hooks in host order.

    Returns the compilation and where the description came from
    ("override", "derived" or None).
    """
    html = _read_html(args.file)
    hooks = DescriptionHooks(config)
    registry = DirectiveRegistry()
    hooks.on_first_call_init(registry)

    compilation = PageCompilation()
    if args.description is not None:
        if DIRECTIVE_NAME not in registry:
            raise PageDescError(
                "--description needs the override directive. "
                "Set enable_meta_description_functions: true or PAGEDESC_ENABLE_FUNCTIONS=1."
            )
        registry.invoke(DIRECTIVE_NAME, compilation, args.description)

    source = "override" if get_description(compilation.store) is not ABSENT else None
    hooks.on_content_rendered(compilation, html)
    if source is None and get_description(compilation.store) is not ABSENT:
        source = "derived"
    return compilation, source


def cmd_derive(args: argparse.Namespace, config: DescriptionConfig) -> None:
    """Print the description for one page."""
    compilation, source = _compile(args, config)
    description = get_description(compilation.store)
    value = None if description is ABSENT else description

    if args.format == "json":
        print(json.dumps({"description": value, "source": source}, ensure_ascii=False))
    elif value is not None:
        print(value)


def cmd_meta(args: argparse.Namespace, config: DescriptionConfig) -> None:
    """Print the <meta> elements a page response would carry."""
    compilation, _ = _compile(args, config)
    sink = MetaTagCollector()
    hooks = DescriptionHooks(config)
    hooks.on_output(compilation, sink)
    rendered = sink.render()
    if rendered:
        print(rendered)


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("file", nargs="?", metavar="FILE", help="HTML file (default: stdin)")
    p.add_argument("--description", type=str, metavar="TEXT", help="Explicit override, applied before derivation")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Derive a page description from rendered HTML",
        prog="python -m pagedesc.cli",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--log-json", action="store_true", help="JSON log lines on stderr")
    parser.add_argument("--config", type=str, metavar="PATH", help="YAML config file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_derive = subparsers.add_parser(
        "derive",
        help="Print the derived description",
        epilog="""\
examples:
  %(prog)s page.html                         Plain text to stdout
  %(prog)s page.html --format json           {"description": ..., "source": ...}
  cat page.html | %(prog)s                   Read from stdin""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _add_common(p_derive)
    p_derive.add_argument("--format", type=str, choices=["text", "json"], default="text")

    p_meta = subparsers.add_parser("meta", help="Print description meta tags")
    _add_common(p_meta)
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    commands = {"derive": cmd_derive, "meta": cmd_meta}

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    configure_for(config, verbose=args.verbose, json_output=True if args.log_json else None)

    try:
        commands[args.command](args, config)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(130)
    except (PageDescError, OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            logger.exception("Command %s failed", args.command)
        sys.exit(1)


if __name__ == "__main__":
    main()
