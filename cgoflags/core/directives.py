# SPDX-License-Identifier: MIT
"""Flag directive types.

A directive is a single compiler or linker option string tagged with the
category the code generator files it under. The resolver produces them in
a fixed order; categories repeat on purpose (two CXXFLAGS lines, two
LDFLAGS lines).
"""

from __future__ import annotations

from dataclasses import dataclass

CFLAGS = "CFLAGS"
CXXFLAGS = "CXXFLAGS"
LDFLAGS = "LDFLAGS"

# (category, makefile variable) in output order.
DIRECTIVE_SOURCES: tuple[tuple[str, str], ...] = (
    (CFLAGS, "CFLAGS"),
    (CXXFLAGS, "CXXFLAGS"),
    (CXXFLAGS, "INCPATH"),
    (LDFLAGS, "LFLAGS"),
    (LDFLAGS, "LIBS"),
)

# Appended after the makefile-derived directives, once for C and once for C++.
WARNING_SUPPRESSION_FLAGS = (
    "-Wno-unused-parameter -Wno-unused-variable -Wno-return-type"
)


@dataclass(frozen=True)
class FlagDirective:
    """A (category, value) pair such as ``("LDFLAGS", "-lQt5Core")``.

    Attributes:
        category: One of CFLAGS, CXXFLAGS or LDFLAGS.
        value: The flag string; may be empty.
    """

    category: str
    value: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"category": self.category, "value": self.value}
