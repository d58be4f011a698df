# SPDX-License-Identifier: MIT
"""Host platform detection.

Platform names follow Go's GOOS spelling (darwin, linux, windows), which
is what quirk rules are keyed by. The name ``host`` stands for the
platform cgoflags is running on.
"""

from __future__ import annotations

import logging
import platform as _platform
from dataclasses import dataclass

logger = logging.getLogger(__name__)

HOST = "host"


@dataclass(frozen=True)
class Platform:
    """Operating system and architecture of a build target.

    Attributes:
        os: 'darwin', 'linux', 'windows' or another lower-cased system name.
        arch: Machine architecture (e.g., 'x86_64', 'arm64').
    """

    os: str
    arch: str = ""


def normalize_os(name: str) -> str:
    """Map a system name to its GOOS spelling."""
    lowered = name.strip().lower()
    if lowered in ("macos", "macosx", "osx"):
        return "darwin"
    if lowered in ("win32", "win64", "cygwin", "msys"):
        return "windows"
    return lowered


def get_platform() -> Platform:
    """Detect the host platform."""
    return Platform(
        os=normalize_os(_platform.system()),
        arch=_platform.machine().lower(),
    )


def resolve_os(name: str) -> str:
    """Normalize a target OS name, detecting the host for ``host``.

    Args:
        name: A system name such as 'Linux' or 'macos', or 'host'.

    Returns:
        The GOOS spelling of the target OS.
    """
    target = normalize_os(name)
    if target == HOST:
        host = get_platform()
        logger.debug("Host platform: %s/%s", host.os, host.arch)
        return host.os
    return target
