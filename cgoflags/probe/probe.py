# SPDX-License-Identifier: MIT
"""Toolchain probe protocol and makefile readers.

A probe supplies the raw lines of the makefile written by the
build-configuration tool. Running the tool is left to the caller; the
probes here only read what it produced.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from cgoflags.core.errors import ProbeError

logger = logging.getLogger(__name__)


@runtime_checkable
class ToolchainProbe(Protocol):
    """Protocol for sources of makefile lines."""

    @property
    def name(self) -> str:
        """Probe name (e.g., 'makefile', 'text')."""
        ...

    def read_lines(self) -> list[str]:
        """Return the makefile contents as a list of lines."""
        ...


class MakefileProbe:
    """Read a makefile generated by qmake.

    On Windows qmake writes debug and release makefiles next to the
    requested one, and the flags come from ``<path>.Release``. That file
    is preferred when the target OS is windows and it exists.

    Example:
        probe = MakefileProbe(Path("build/qamel.makefile"), os="windows")
        lines = probe.read_lines()  # reads build/qamel.makefile.Release
    """

    def __init__(self, path: Path | str, *, os: str | None = None) -> None:
        self.path = Path(path)
        self.os = os

    @property
    def name(self) -> str:
        return "makefile"

    def makefile_path(self) -> Path:
        """Path of the file that will actually be read."""
        if self.os == "windows":
            release = self.path.with_name(self.path.name + ".Release")
            if release.is_file():
                return release
        return self.path

    def read_lines(self) -> list[str]:
        path = self.makefile_path()
        logger.info("Reading makefile %s", path)
        try:
            return path.read_text(encoding="utf-8", errors="replace").splitlines()
        except FileNotFoundError:
            raise ProbeError("makefile not found", str(path)) from None
        except OSError as e:
            raise ProbeError(f"cannot read makefile: {e.strerror}", str(path)) from e

    def __repr__(self) -> str:
        return f"MakefileProbe({str(self.path)!r}, os={self.os!r})"


class TextProbe:
    """Serve makefile lines from text already in memory."""

    def __init__(self, text: str) -> None:
        self.text = text

    @property
    def name(self) -> str:
        return "text"

    def read_lines(self) -> list[str]:
        return self.text.splitlines()

    def __repr__(self) -> str:
        return f"TextProbe({len(self.text)} chars)"
