# SPDX-License-Identifier: MIT
"""Core flag resolution: symbol parsing, reference expansion, directives."""

from cgoflags.core.directives import FlagDirective
from cgoflags.core.quirks import DEFAULT_QUIRKS, QuirkRule, quirks_for
from cgoflags.core.resolver import (
    FlagResolver,
    parse_symbols,
    render_flags,
    resolve_references,
)

__all__ = [
    "DEFAULT_QUIRKS",
    "FlagDirective",
    "FlagResolver",
    "QuirkRule",
    "parse_symbols",
    "quirks_for",
    "render_flags",
    "resolve_references",
]
