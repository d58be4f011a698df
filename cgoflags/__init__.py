# SPDX-License-Identifier: MIT
"""
Cgoflags: cgo compiler and linker flags from qmake makefiles.

Cgoflags reads the makefile qmake generates for a Qt project, expands the
``$(VAR)`` references in its compiler and linker variables, patches flags
that cgo cannot handle, and renders ``#cgo`` directives for a Go binding.

Example:
    from cgoflags import FlagResolver, CgoGenerator

    directives = FlagResolver(platform="linux").run(makefile.splitlines())
    print(CgoGenerator().render(directives))
"""

from __future__ import annotations

__version__ = "0.1.0"

# Re-export commonly used classes for convenient imports
from cgoflags.core.directives import FlagDirective  # noqa: E402
from cgoflags.core.quirks import DEFAULT_QUIRKS, QuirkRule  # noqa: E402
from cgoflags.core.resolver import (  # noqa: E402
    FlagResolver,
    parse_symbols,
    render_flags,
    resolve_references,
)
from cgoflags.generators import CgoGenerator, JsonGenerator  # noqa: E402


def generate_cgo_flags(
    lines: list[str],
    *,
    platform: str | None = None,
    prefix: str = "#cgo",
) -> str:
    """Render the cgo directive block for makefile lines.

    Args:
        lines: Makefile lines.
        platform: Target OS for quirk rules. None applies all rules.
        prefix: Directive prefix.

    Returns:
        The directive lines joined by newlines.
    """
    directives = FlagResolver(platform=platform).run(lines)
    return CgoGenerator(prefix=prefix).render(directives)


# Public API exports
__all__ = [
    # Version
    "__version__",
    # Resolver
    "DEFAULT_QUIRKS",
    "FlagDirective",
    "FlagResolver",
    "QuirkRule",
    "parse_symbols",
    "render_flags",
    "resolve_references",
    # Generators
    "CgoGenerator",
    "JsonGenerator",
    "generate_cgo_flags",
]
