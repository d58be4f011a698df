# SPDX-License-Identifier: MIT
"""Makefile variable resolution and flag assembly.

The resolver turns the variable assignments of a generated makefile into
the ordered flag directives a cgo source file needs:

1. parse_symbols() collects ``KEY = VALUE`` lines into a symbol table
2. resolve_references() expands ``$(KEY)`` references and applies quirk rules
3. render_flags() picks the compiler and linker variables in fixed order

Nothing here raises for input made of strings. Unknown references expand
to the empty string and lines that are not assignments are skipped.

Expansion is a single pass by default: a value is expanded against the
values as parsed, so ``A = $(B)`` with ``B = $(C)`` leaves ``$(C)`` in A.
Pass ``iterative=True`` to expand references transitively.

Example:
    resolver = FlagResolver(platform="windows")
    for directive in resolver.run(makefile_text.splitlines()):
        print(directive.category, directive.value)
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence

from cgoflags.core.directives import (
    CFLAGS,
    CXXFLAGS,
    DIRECTIVE_SOURCES,
    WARNING_SUPPRESSION_FLAGS,
    FlagDirective,
)
from cgoflags.core.quirks import DEFAULT_QUIRKS, QuirkRule, quirks_for

logger = logging.getLogger(__name__)

# Match: KEY = VALUE (key has no whitespace, value is the rest of the line)
_ASSIGNMENT_PATTERN = re.compile(r"^(\S+)\s*=\s*(.+)$")

# Match: $(KEY)
_REFERENCE_PATTERN = re.compile(r"\$\((\S+)\)")


def parse_symbols(lines: Iterable[str]) -> dict[str, str]:
    """Build a symbol table from makefile lines.

    Args:
        lines: Lines of makefile text, with or without line endings.

    Returns:
        Mapping of variable name to raw value. A later assignment to the
        same name overwrites the earlier one.
    """
    table: dict[str, str] = {}
    for line in lines:
        match = _ASSIGNMENT_PATTERN.match(line.rstrip("\r\n"))
        if match is None:
            continue
        table[match.group(1)] = match.group(2).strip()

    logger.debug("Parsed %d makefile variables", len(table))
    return table


def _expand(key: str, value: str, symbols: Mapping[str, str]) -> str:
    """Replace every $(NAME) in value with its entry in symbols."""
    for match in _REFERENCE_PATTERN.finditer(value):
        placeholder, name = match.group(0), match.group(1)
        if name not in symbols:
            logger.debug("%s: undefined variable %s expands to ''", key, placeholder)
        value = value.replace(placeholder, symbols.get(name, ""))
    return value


def _substitution_pass(table: Mapping[str, str]) -> dict[str, str]:
    """Expand each value once against an unmodified view of the table."""
    return {key: _expand(key, value, table) for key, value in table.items()}


def _reference_graph(table: Mapping[str, str]) -> dict[str, list[str]]:
    """Map each variable to the defined variables its value references."""
    return {
        key: [
            ref
            for ref in dict.fromkeys(_REFERENCE_PATTERN.findall(value))
            if ref in table
        ]
        for key, value in table.items()
    }


def _strongly_connected(graph: Mapping[str, list[str]]) -> list[list[str]]:
    """Tarjan's algorithm with an explicit stack.

    Components come out in dependency order: every component is listed
    after all components it references.
    """
    index: dict[str, int] = {}
    low: dict[str, int] = {}
    stack: list[str] = []
    on_stack: set[str] = set()
    components: list[list[str]] = []

    for root in graph:
        if root in index:
            continue
        index[root] = low[root] = len(index)
        stack.append(root)
        on_stack.add(root)
        work = [(root, iter(graph[root]))]

        while work:
            node, children = work[-1]
            for child in children:
                if child not in index:
                    index[child] = low[child] = len(index)
                    stack.append(child)
                    on_stack.add(child)
                    work.append((child, iter(graph[child])))
                    break
                if child in on_stack:
                    low[node] = min(low[node], index[child])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[node])
                if low[node] == index[node]:
                    component: list[str] = []
                    while True:
                        member = stack.pop()
                        on_stack.discard(member)
                        component.append(member)
                        if member == node:
                            break
                    components.append(component)

    return components


def _expand_all(table: Mapping[str, str]) -> dict[str, str]:
    """Expand each value until no defined references remain.

    Variables that reference each other in a cycle cannot be expanded.
    A reference to any variable on a cycle is logged and left in place
    as a literal placeholder, whatever order the table is in.
    """
    graph = _reference_graph(table)
    components = _strongly_connected(graph)

    cyclic: set[str] = set()
    for component in components:
        if len(component) > 1 or component[0] in graph[component[0]]:
            cyclic.update(component)
            logger.warning(
                "circular variable reference among: %s",
                ", ".join(sorted(component)),
            )

    done: dict[str, str] = {}
    for component in components:
        for name in component:
            value = table[name]
            for match in _REFERENCE_PATTERN.finditer(table[name]):
                placeholder, ref = match.group(0), match.group(1)
                if ref in cyclic:
                    continue
                if ref in table:
                    replacement = done[ref]
                else:
                    logger.debug(
                        "%s: undefined variable %s expands to ''", name, placeholder
                    )
                    replacement = ""
                value = value.replace(placeholder, replacement)
            done[name] = value

    return {key: done[key] for key in table}


def resolve_references(
    table: Mapping[str, str],
    *,
    quirks: Sequence[QuirkRule] | None = None,
    platform: str | None = None,
    iterative: bool = False,
) -> dict[str, str]:
    """Expand variable references and apply toolchain quirk rules.

    Args:
        table: Symbol table from parse_symbols(). Not modified.
        quirks: Quirk rules to apply. Defaults to DEFAULT_QUIRKS.
        platform: Target OS used to select quirk rules. None applies all.
        iterative: Expand references transitively instead of a single level.
                   References to variables on a cycle are left as
                   literal placeholders.

    Returns:
        A new table with the same keys and expanded, patched, trimmed values.
    """
    rules = quirks_for(platform, DEFAULT_QUIRKS if quirks is None else quirks)

    if iterative:
        resolved = _expand_all(table)
    else:
        resolved = _substitution_pass(table)

    result: dict[str, str] = {}
    for key, value in resolved.items():
        for rule in rules:
            patched = rule.apply(value)
            if patched != value:
                logger.debug("%s: applied quirk %r", key, rule.pattern)
            value = patched
        result[key] = value.strip()
    return result


def render_flags(table: Mapping[str, str]) -> list[FlagDirective]:
    """Assemble the directive set from a resolved table.

    Always returns seven directives: CFLAGS, CXXFLAGS (twice), LDFLAGS
    (twice) taken from the table, followed by the warning suppression
    flags for C and C++. Missing variables give empty values.
    """
    directives = [
        FlagDirective(category, table.get(variable, ""))
        for category, variable in DIRECTIVE_SOURCES
    ]
    directives.append(FlagDirective(CFLAGS, WARNING_SUPPRESSION_FLAGS))
    directives.append(FlagDirective(CXXFLAGS, WARNING_SUPPRESSION_FLAGS))
    return directives


class FlagResolver:
    """Parse, resolve and render makefile flags with fixed settings.

    Attributes:
        quirks: Quirk rules applied after expansion.
        platform: Target OS for quirk selection, or None for all rules.
        iterative: Whether references are expanded transitively.
    """

    def __init__(
        self,
        *,
        quirks: Sequence[QuirkRule] | None = None,
        platform: str | None = None,
        iterative: bool = False,
    ) -> None:
        self.quirks: tuple[QuirkRule, ...] = (
            DEFAULT_QUIRKS if quirks is None else tuple(quirks)
        )
        self.platform = platform
        self.iterative = iterative

    def parse(self, lines: Iterable[str]) -> dict[str, str]:
        return parse_symbols(lines)

    def resolve(self, table: Mapping[str, str]) -> dict[str, str]:
        return resolve_references(
            table,
            quirks=self.quirks,
            platform=self.platform,
            iterative=self.iterative,
        )

    def render(self, table: Mapping[str, str]) -> list[FlagDirective]:
        return render_flags(table)

    def resolve_lines(self, lines: Iterable[str]) -> dict[str, str]:
        """Parse and resolve in one step."""
        return self.resolve(self.parse(lines))

    def run(self, lines: Iterable[str]) -> list[FlagDirective]:
        """Turn makefile lines into the ordered directive set."""
        return self.render(self.resolve_lines(lines))

    def __repr__(self) -> str:
        return (
            f"FlagResolver(platform={self.platform!r}, "
            f"iterative={self.iterative}, quirks={len(self.quirks)})"
        )
