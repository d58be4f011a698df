# SPDX-License-Identifier: MIT
"""Toolchain quirk rules.

A quirk rule is a literal text substitution applied to every resolved
flag value to work around an incompatibility between what the
build-configuration tool emits and what the target toolchain accepts.

Rules may be restricted to target platforms. When no platform is given,
every rule applies.

Example:
    rule = QuirkRule(" -Wa,-mbig-obj ", " ", platforms=frozenset({"windows"}))
    rule.apply("-O2 -Wa,-mbig-obj -Wall")  # "-O2 -Wall"
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from cgoflags.core.errors import ConfigError


@dataclass(frozen=True)
class QuirkRule:
    """A literal (pattern, replacement) substitution.

    Attributes:
        pattern: Substring to look for (matched literally, not as a regex).
        replacement: Text that replaces every occurrence of pattern.
        platforms: Target OS names the rule applies to. Empty means all.
        description: Human readable reason for the rule.
    """

    pattern: str
    replacement: str = ""
    platforms: frozenset[str] = field(default_factory=frozenset)
    description: str = ""

    def applies_to(self, platform: str | None) -> bool:
        if platform is None or not self.platforms:
            return True
        return platform in self.platforms

    def apply(self, value: str) -> str:
        if not self.pattern:
            return value
        return value.replace(self.pattern, self.replacement)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuirkRule:
        """Build a rule from its JSON form.

        Raises:
            ConfigError: If the pattern is missing or a field has the wrong type.
        """
        pattern = data.get("pattern")
        if not isinstance(pattern, str) or not pattern:
            raise ConfigError(f"quirk rule needs a non-empty 'pattern': {data!r}")

        replacement = data.get("replacement", "")
        description = data.get("description", "")
        platforms = data.get("platforms", [])
        if not isinstance(replacement, str) or not isinstance(description, str):
            raise ConfigError(f"quirk rule fields must be strings: {data!r}")
        if not isinstance(platforms, list) or not all(
            isinstance(p, str) for p in platforms
        ):
            raise ConfigError(f"quirk rule 'platforms' must be a list: {data!r}")

        return cls(
            pattern=pattern,
            replacement=replacement,
            platforms=frozenset(platforms),
            description=description,
        )


# mingw64 qmake passes -Wa,-mbig-obj by default, and cgo cannot link
# big-obj object files (golang/go#24341).
BIG_OBJ_RULE = QuirkRule(
    " -Wa,-mbig-obj ",
    " ",
    platforms=frozenset({"windows"}),
    description="cgo cannot link big-obj COFF files produced by mingw",
)

DEFAULT_QUIRKS: tuple[QuirkRule, ...] = (BIG_OBJ_RULE,)


def quirks_for(
    platform: str | None,
    rules: Iterable[QuirkRule] = DEFAULT_QUIRKS,
) -> list[QuirkRule]:
    """Return the rules that apply to a platform, in order."""
    return [rule for rule in rules if rule.applies_to(platform)]
