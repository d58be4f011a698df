# SPDX-License-Identifier: MIT
"""Output generators for cgoflags."""

from __future__ import annotations

from cgoflags.core.errors import GenerateError
from cgoflags.generators.cgo import CgoGenerator
from cgoflags.generators.generator import BaseGenerator, Generator
from cgoflags.generators.json_flags import JsonGenerator

GENERATOR_NAMES = ("cgo", "json")


def get_generator(name: str, *, prefix: str = "#cgo") -> BaseGenerator:
    """Create a generator by name.

    Args:
        name: 'cgo' or 'json'.
        prefix: Directive prefix, used by the cgo generator.

    Raises:
        GenerateError: If the name is unknown.
    """
    if name == "cgo":
        return CgoGenerator(prefix=prefix)
    if name == "json":
        return JsonGenerator()
    raise GenerateError(
        f"unknown generator: {name} (choose from {', '.join(GENERATOR_NAMES)})"
    )


__all__ = [
    "GENERATOR_NAMES",
    "BaseGenerator",
    "CgoGenerator",
    "Generator",
    "JsonGenerator",
    "get_generator",
]
