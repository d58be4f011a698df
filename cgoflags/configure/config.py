# SPDX-License-Identifier: MIT
"""Resolver configuration for cgoflags.

Settings come from, highest precedence first:
    1. Command line options
    2. Environment: CGOFLAGS_PLATFORM, CGOFLAGS_ITERATIVE
    3. A JSON config file
    4. Defaults

Config file format:
    {
        "platform": "windows",
        "iterative": false,
        "generator": "cgo",
        "prefix": "#cgo",
        "quirks": [
            {"pattern": " -fno-keep-inline-dllexport ", "replacement": " ",
             "platforms": ["windows"], "description": "..."}
        ]
    }
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from cgoflags.configure.platform import resolve_os
from cgoflags.core.errors import ConfigError
from cgoflags.core.quirks import DEFAULT_QUIRKS, QuirkRule
from cgoflags.core.resolver import FlagResolver

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class ResolverConfig:
    """Settings for resolving and rendering flags.

    Attributes:
        platform: Target OS for quirk selection; None applies every rule.
        iterative: Expand references transitively instead of one level.
        generator: Output generator name ('cgo' or 'json').
        prefix: Directive prefix for the cgo generator.
        extra_quirks: Rules applied after the built-in ones.
    """

    platform: str | None = None
    iterative: bool = False
    generator: str = "cgo"
    prefix: str = "#cgo"
    extra_quirks: list[QuirkRule] = field(default_factory=list)

    @property
    def quirks(self) -> list[QuirkRule]:
        return [*DEFAULT_QUIRKS, *self.extra_quirks]

    def make_resolver(self) -> FlagResolver:
        return FlagResolver(
            quirks=self.quirks,
            platform=self.platform,
            iterative=self.iterative,
        )


def _expect(data: Mapping[str, Any], key: str, kind: type, path: Path) -> Any:
    value = data[key]
    if not isinstance(value, kind):
        raise ConfigError(
            f"'{key}' must be a {kind.__name__}, got {type(value).__name__}",
            str(path),
        )
    return value


def load_config(path: Path | str) -> ResolverConfig:
    """Load a JSON config file.

    Args:
        path: Path to the config file.

    Returns:
        The configuration, with defaults for missing keys.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ConfigError: If the file cannot be read, is not UTF-8 JSON, or has
            bad values.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON: {e.msg} (line {e.lineno})", str(path)) from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"not UTF-8 text: {e.reason}", str(path)) from e
    except OSError as e:
        raise ConfigError(f"cannot read config: {e.strerror}", str(path)) from e

    if not isinstance(data, dict):
        raise ConfigError("top level must be a JSON object", str(path))

    config = ResolverConfig()
    if "platform" in data and data["platform"] is not None:
        config.platform = resolve_os(_expect(data, "platform", str, path))
    if "iterative" in data:
        config.iterative = _expect(data, "iterative", bool, path)
    if "generator" in data:
        config.generator = _expect(data, "generator", str, path)
    if "prefix" in data:
        config.prefix = _expect(data, "prefix", str, path)
    if "quirks" in data:
        rules = _expect(data, "quirks", list, path)
        try:
            config.extra_quirks = [QuirkRule.from_dict(rule) for rule in rules]
        except (ConfigError, AttributeError) as e:
            raise ConfigError(f"bad quirk rule: {e}", str(path)) from e

    logger.debug("Loaded config from %s: %s", path, config)
    return config


def config_from_env(
    base: ResolverConfig | None = None,
    environ: Mapping[str, str] | None = None,
) -> ResolverConfig:
    """Apply environment variable overrides to a config.

    Args:
        base: Config to start from (default: defaults).
        environ: Environment mapping (default: os.environ).

    Returns:
        A new config; base is not modified.
    """
    config = replace(base) if base is not None else ResolverConfig()
    env = os.environ if environ is None else environ

    platform = env.get("CGOFLAGS_PLATFORM")
    if platform:
        config.platform = resolve_os(platform)

    iterative = env.get("CGOFLAGS_ITERATIVE")
    if iterative is not None and iterative != "":
        config.iterative = iterative.strip().lower() in _TRUE_VALUES

    return config
