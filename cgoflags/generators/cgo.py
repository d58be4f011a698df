# SPDX-License-Identifier: MIT
"""cgo preamble generator.

Renders directives as ``#cgo`` lines for the comment block above
``import "C"`` in a Go source file:

    #cgo CFLAGS: -pipe -O2 -Wall -W -D_REENTRANT -fPIC
    #cgo CXXFLAGS: -pipe -O2 -std=gnu++11 -Wall -W -D_REENTRANT -fPIC
    #cgo CXXFLAGS: -I. -isystem /usr/include/qt
    #cgo LDFLAGS: -Wl,-O1
    #cgo LDFLAGS: -lQt5Core -lpthread
    #cgo CFLAGS: -Wno-unused-parameter -Wno-unused-variable -Wno-return-type
    #cgo CXXFLAGS: -Wno-unused-parameter -Wno-unused-variable -Wno-return-type
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from cgoflags.generators.generator import BaseGenerator

if TYPE_CHECKING:
    from cgoflags.core.directives import FlagDirective


class CgoGenerator(BaseGenerator):
    """Generator for cgo flag directives.

    Each directive becomes ``<prefix> <CATEGORY>: <value>``. Lines are
    joined with newlines and the last one has no trailing newline, so the
    block can be embedded as-is between ``/*`` and ``*/``.
    """

    def __init__(self, *, prefix: str = "#cgo") -> None:
        """Initialize the cgo generator.

        Args:
            prefix: Directive prefix placed before each category.
        """
        super().__init__("cgo")
        self.prefix = prefix

    def format_directive(self, directive: FlagDirective) -> str:
        return f"{self.prefix} {directive.category}: {directive.value}"

    def render(self, directives: Sequence[FlagDirective]) -> str:
        return "\n".join(self.format_directive(d) for d in directives)
