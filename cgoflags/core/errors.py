# SPDX-License-Identifier: MIT
"""Custom exceptions for cgoflags.

All cgoflags exceptions inherit from CgoFlagsError, which includes
an optional location (usually a file path) for better error messages.

The flag resolver itself never raises: these exceptions belong to the
layers that read makefiles, load configuration and write output.
"""

from __future__ import annotations


class CgoFlagsError(Exception):
    """Base class for all cgoflags exceptions.

    Attributes:
        message: The error message.
        location: Optional location (file path, line) where the error occurred.
    """

    def __init__(
        self,
        message: str,
        location: str | None = None,
    ) -> None:
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


class ProbeError(CgoFlagsError):
    """Error while reading toolchain output.

    Raised when the makefile produced by the build-configuration
    tool is missing or cannot be read.
    """


class ConfigError(CgoFlagsError):
    """Invalid cgoflags configuration."""


class GenerateError(CgoFlagsError):
    """Error during output generation.

    Raised for unknown generators or when the output file
    cannot be written.
    """
