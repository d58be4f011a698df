# SPDX-License-Identifier: MIT
"""Generator protocol for flag output.

Generators take the ordered directive set produced by the resolver and
turn it into text for a consumer (cgo preamble lines, JSON, etc.).
Every generator keeps the directive order and repeated categories.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from cgoflags.core.errors import GenerateError

if TYPE_CHECKING:
    from cgoflags.core.directives import FlagDirective

logger = logging.getLogger(__name__)


@runtime_checkable
class Generator(Protocol):
    """Protocol for directive generators.

    A Generator renders directives to text and can write that text
    to a file. Different generators produce different formats.
    """

    @property
    def name(self) -> str:
        """Generator name (e.g., 'cgo', 'json')."""
        ...

    def render(self, directives: Sequence[FlagDirective]) -> str:
        """Render directives to text.

        Args:
            directives: Directives in output order.
        """
        ...

    def generate(self, directives: Sequence[FlagDirective], output_file: Path) -> None:
        """Write rendered directives to a file.

        Args:
            directives: Directives in output order.
            output_file: File to write; parent directories are created.
        """
        ...


class BaseGenerator:
    """Base class for generators with common functionality."""

    def __init__(self, name: str) -> None:
        """Initialize a generator.

        Args:
            name: Generator name.
        """
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def render(self, directives: Sequence[FlagDirective]) -> str:
        """Render directives. Subclasses must implement."""
        raise NotImplementedError

    def generate(self, directives: Sequence[FlagDirective], output_file: Path) -> None:
        text = self.render(directives)
        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(text)
        except OSError as e:
            raise GenerateError(
                f"cannot write output: {e.strerror}", str(output_file)
            ) from e
        logger.info("Wrote %s", output_file)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
