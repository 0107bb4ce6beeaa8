"""Command-line interface for oohtml."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from jinja2 import TemplateError

from .blocks import BlockLoader
from .config import OohtmlConfig, load_config
from .errors import OohtmlError


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


def _parse_vars(pairs: Optional[list[str]]) -> dict[str, str]:
    context: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise SystemExit(f"--var expects KEY=VALUE, got {pair!r}")
        if key in context:
            warn(f"--var {key} given more than once; using the last value.")
        context[key] = value
    return context


def _resolve_config(args: argparse.Namespace) -> OohtmlConfig:
    config = load_config(Path(args.config)) if args.config else OohtmlConfig()
    if args.blocks:
        config = config.model_copy(update={"blocks_dir": Path(args.blocks)})
    return config


def _handle_render_block(args: argparse.Namespace) -> None:
    try:
        config = _resolve_config(args)
        loader = BlockLoader.from_config(config)
        output = loader.load(args.name, **_parse_vars(args.vars))
    except (OohtmlError, TemplateError) as exc:
        raise SystemExit(f"render-block failed: {exc}") from exc

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(str(output), encoding="utf-8")
    else:
        sys.stdout.write(str(output))


def _handle_list_blocks(args: argparse.Namespace) -> None:
    try:
        config = _resolve_config(args)
    except OohtmlError as exc:
        raise SystemExit(str(exc)) from exc
    names = BlockLoader.from_config(config).available()
    if not names:
        warn(f"No blocks found in {config.blocks_dir}")
    for name in names:
        print(name)


def _handle_check_config(args: argparse.Namespace) -> None:
    try:
        config = load_config(Path(args.path))
    except OohtmlError as exc:
        raise SystemExit(str(exc)) from exc
    if not config.blocks_dir.is_dir():
        warn(f"blocks_dir {config.blocks_dir} does not exist.")
    print(f"{args.path}: OK")


def _add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="Path to a YAML config file.")
    parser.add_argument(
        "--blocks",
        default=None,
        help="Block directory (overrides blocks_dir from the config).",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="oohtml", description="Object-oriented HTML builder tools.")
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render-block",
        help="Render a block template.",
        description="Render a named block from the block directory.",
    )
    render_parser.add_argument("name", help="Block name without suffix.")
    _add_config_arguments(render_parser)
    render_parser.add_argument(
        "--var",
        action="append",
        dest="vars",
        help="Template variable as KEY=VALUE (repeatable).",
    )
    render_parser.add_argument("--out", default=None, help="Write output to this file instead of stdout.")
    render_parser.set_defaults(func=_handle_render_block)

    list_parser = subparsers.add_parser("list-blocks", help="List available block names.")
    _add_config_arguments(list_parser)
    list_parser.set_defaults(func=_handle_list_blocks)

    check_parser = subparsers.add_parser("check-config", help="Validate a YAML config file.")
    check_parser.add_argument("path", help="Path to the config file.")
    check_parser.set_defaults(func=_handle_check_config)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
