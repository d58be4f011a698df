# SPDX-License-Identifier: MIT
"""Sources of makefile lines for the flag resolver."""

from cgoflags.probe.probe import MakefileProbe, TextProbe, ToolchainProbe

__all__ = [
    "MakefileProbe",
    "TextProbe",
    "ToolchainProbe",
]
