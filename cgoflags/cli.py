# SPDX-License-Identifier: MIT
"""Command-line interface for cgoflags."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from cgoflags.configure.config import ResolverConfig, config_from_env, load_config
from cgoflags.configure.platform import resolve_os
from cgoflags.core.errors import CgoFlagsError
from cgoflags.generators import GENERATOR_NAMES, get_generator
from cgoflags.probe import MakefileProbe, TextProbe, ToolchainProbe

# Set up logging
logger = logging.getLogger("cgoflags")


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(name)s: %(message)s"
    elif verbose:
        level = logging.INFO
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=fmt)


def make_probe(makefile: str, platform: str | None = None) -> ToolchainProbe:
    """Create a probe for a makefile path, or stdin when path is '-'."""
    if makefile == "-":
        return TextProbe(sys.stdin.read())
    return MakefileProbe(Path(makefile), os=platform)


def build_config(args: argparse.Namespace) -> ResolverConfig:
    """Combine config file, environment and command line options.

    Command line options win over the environment, which wins over
    the config file.
    """
    config_path = getattr(args, "config", None)
    base = load_config(config_path) if config_path else None
    config = config_from_env(base)

    if getattr(args, "platform", None):
        config.platform = resolve_os(args.platform)
    if getattr(args, "iterative", False):
        config.iterative = True
    if getattr(args, "format", None):
        config.generator = args.format
    if getattr(args, "prefix", None):
        config.prefix = args.prefix

    logger.debug("Resolver config: %s", config)
    return config


def cmd_render(args: argparse.Namespace) -> int:
    """Render flag directives from a makefile.

    This command:
    1. Reads the makefile (or stdin)
    2. Resolves variable references and applies quirk rules
    3. Prints the directives, or writes them with --output
    """
    setup_logging(args.verbose, args.debug)

    try:
        config = build_config(args)
        lines = make_probe(args.makefile, config.platform).read_lines()
        directives = config.make_resolver().run(lines)
        generator = get_generator(config.generator, prefix=config.prefix)

        if args.output:
            generator.generate(directives, Path(args.output))
        else:
            text = generator.render(directives)
            print(text, end="" if text.endswith("\n") else "\n")
    except (CgoFlagsError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 1

    return 0


def cmd_symbols(args: argparse.Namespace) -> int:
    """Print the resolved makefile variables as JSON.

    Useful for checking what a flag expanded to before it is rendered.
    """
    setup_logging(args.verbose, args.debug)

    try:
        config = build_config(args)
        lines = make_probe(args.makefile, config.platform).read_lines()
        resolver = config.make_resolver()
        table = resolver.parse(lines) if args.raw else resolver.resolve_lines(lines)
    except (CgoFlagsError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 1

    print(json.dumps(table, indent=2, sort_keys=args.sort))
    return 0


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments to a parser."""
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug output")


def add_resolve_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments for commands that resolve a makefile."""
    parser.add_argument("makefile", help="Makefile generated by qmake ('-' for stdin)")
    parser.add_argument(
        "-p",
        "--platform",
        metavar="OS",
        help=(
            "Target OS for quirk rules (darwin, linux, windows, or host;"
            " default: all rules)"
        ),
    )
    parser.add_argument(
        "-i",
        "--iterative",
        action="store_true",
        help="Expand nested variable references transitively",
    )
    parser.add_argument("-c", "--config", metavar="FILE", help="JSON config file")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the cgoflags CLI."""
    parser = argparse.ArgumentParser(
        prog="cgoflags",
        description="Extract cgo compiler and linker flags from a qmake makefile.",
        epilog="Run 'cgoflags <command> --help' for command-specific help.",
    )
    from cgoflags import __version__

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # cgoflags render
    render_parser = subparsers.add_parser(
        "render", help="Render flag directives from a makefile"
    )
    add_common_args(render_parser)
    add_resolve_args(render_parser)
    render_parser.add_argument(
        "-f",
        "--format",
        choices=GENERATOR_NAMES,
        help="Output format (default: cgo)",
    )
    render_parser.add_argument(
        "--prefix", help="Directive prefix for the cgo format (default: #cgo)"
    )
    render_parser.add_argument(
        "-o", "--output", metavar="FILE", help="Write to FILE instead of stdout"
    )
    render_parser.set_defaults(func=cmd_render)

    # cgoflags symbols
    symbols_parser = subparsers.add_parser(
        "symbols", help="Print resolved makefile variables as JSON"
    )
    add_common_args(symbols_parser)
    add_resolve_args(symbols_parser)
    symbols_parser.add_argument(
        "--raw", action="store_true", help="Print values before expansion"
    )
    symbols_parser.add_argument(
        "--sort", action="store_true", help="Sort variables by name"
    )
    symbols_parser.set_defaults(func=cmd_symbols)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
