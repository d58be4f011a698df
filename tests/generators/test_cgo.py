# SPDX-License-Identifier: MIT
"""Tests for cgoflags.generators.cgo."""

from pathlib import Path

import pytest

from cgoflags.core.directives import FlagDirective
from cgoflags.core.errors import GenerateError
from cgoflags.core.resolver import FlagResolver, render_flags
from cgoflags.generators import (
    CgoGenerator,
    Generator,
    JsonGenerator,
    get_generator,
)

EXPECTED_BLOCK = """\
#cgo CFLAGS: -O2
#cgo CXXFLAGS: -std=c++11
#cgo CXXFLAGS: -I/usr/include/qt
#cgo LDFLAGS: -L/usr/lib
#cgo LDFLAGS: -lQt5Core
#cgo CFLAGS: -Wno-unused-parameter -Wno-unused-variable -Wno-return-type
#cgo CXXFLAGS: -Wno-unused-parameter -Wno-unused-variable -Wno-return-type"""


@pytest.fixture
def directives() -> list[FlagDirective]:
    return FlagResolver().run(
        [
            "CFLAGS = -O2",
            "CXXFLAGS = -std=c++11",
            "INCPATH = -I/usr/include/qt",
            "LFLAGS = -L/usr/lib",
            "LIBS = -lQt5Core $(EXTRA)",
        ]
    )


class TestCgoGenerator:
    def test_creation(self):
        gen = CgoGenerator()
        assert gen.name == "cgo"
        assert gen.prefix == "#cgo"
        assert isinstance(gen, Generator)

    def test_render(self, directives):
        assert CgoGenerator().render(directives) == EXPECTED_BLOCK

    def test_no_trailing_newline(self, directives):
        assert not CgoGenerator().render(directives).endswith("\n")

    def test_empty_values(self):
        lines = CgoGenerator().render(render_flags({})).split("\n")
        assert len(lines) == 7
        assert lines[0] == "#cgo CFLAGS: "
        assert lines[4] == "#cgo LDFLAGS: "

    def test_custom_prefix(self):
        gen = CgoGenerator(prefix="// flags")
        assert gen.format_directive(FlagDirective("LDFLAGS", "-lm")) == (
            "// flags LDFLAGS: -lm"
        )

    def test_generate_writes_file(self, tmp_path: Path, directives) -> None:
        """Test writing the block to a nested output path."""
        output = tmp_path / "gen" / "flags.txt"
        CgoGenerator().generate(directives, output)

        assert output.read_text() == EXPECTED_BLOCK

    def test_generate_unwritable(self, tmp_path: Path, directives) -> None:
        (tmp_path / "blocker").write_text("")
        with pytest.raises(GenerateError, match="cannot write output"):
            CgoGenerator().generate(directives, tmp_path / "blocker" / "flags.txt")

    def test_repr(self):
        assert repr(CgoGenerator()) == "CgoGenerator('cgo')"


class TestGetGenerator:
    def test_cgo(self):
        gen = get_generator("cgo", prefix="#x")
        assert isinstance(gen, CgoGenerator)
        assert gen.prefix == "#x"

    def test_json(self):
        assert isinstance(get_generator("json"), JsonGenerator)

    def test_unknown(self):
        with pytest.raises(GenerateError, match="unknown generator: ninja"):
            get_generator("ninja")
