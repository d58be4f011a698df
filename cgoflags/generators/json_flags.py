# SPDX-License-Identifier: MIT
"""JSON generator for flag directives.

Writes the directive set as a JSON array for tools that do not parse
cgo preambles:

    [
      {"category": "CFLAGS", "value": "-O2"},
      {"category": "CXXFLAGS", "value": "-std=c++11"},
      ...
    ]
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import TYPE_CHECKING

from cgoflags.generators.generator import BaseGenerator

if TYPE_CHECKING:
    from cgoflags.core.directives import FlagDirective


class JsonGenerator(BaseGenerator):
    """Generator for a JSON list of directives."""

    def __init__(self) -> None:
        super().__init__("json")

    def render(self, directives: Sequence[FlagDirective]) -> str:
        return json.dumps([d.to_dict() for d in directives], indent=2) + "\n"
