# SPDX-License-Identifier: MIT
"""Configuration and platform detection."""

from cgoflags.configure.config import ResolverConfig, config_from_env, load_config
from cgoflags.configure.platform import (
    Platform,
    get_platform,
    normalize_os,
    resolve_os,
)

__all__ = [
    "Platform",
    "ResolverConfig",
    "config_from_env",
    "get_platform",
    "load_config",
    "normalize_os",
    "resolve_os",
]
