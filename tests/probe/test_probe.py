# SPDX-License-Identifier: MIT
"""Tests for cgoflags.probe."""

from pathlib import Path

import pytest

from cgoflags.core.errors import ProbeError
from cgoflags.probe import MakefileProbe, TextProbe, ToolchainProbe


class TestMakefileProbe:
    def test_reads_lines(self, tmp_path: Path) -> None:
        """Test reading a makefile into lines."""
        makefile = tmp_path / "qamel.makefile"
        makefile.write_text("CC = gcc\nCXX = g++\n")

        probe = MakefileProbe(makefile)
        assert probe.read_lines() == ["CC = gcc", "CXX = g++"]

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        makefile = tmp_path / "qamel.makefile"
        makefile.write_text("CC = gcc\n")

        assert MakefileProbe(str(makefile)).read_lines() == ["CC = gcc"]

    def test_decodes_utf8(self, tmp_path: Path) -> None:
        """Test that makefiles are read as UTF-8 with bad bytes replaced."""
        makefile = tmp_path / "qamel.makefile"
        makefile.write_bytes(b"INCPATH = -I/home/jos\xc3\xa9\nLIBS = -l\xff\n")

        assert MakefileProbe(makefile).read_lines() == [
            "INCPATH = -I/home/josé",
            "LIBS = -l\ufffd",
        ]

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing makefile raises ProbeError."""
        probe = MakefileProbe(tmp_path / "missing.makefile")
        with pytest.raises(ProbeError, match="makefile not found") as excinfo:
            probe.read_lines()
        assert excinfo.value.location == str(tmp_path / "missing.makefile")

    def test_directory_is_error(self, tmp_path: Path) -> None:
        with pytest.raises(ProbeError):
            MakefileProbe(tmp_path).read_lines()

    def test_windows_prefers_release(self, tmp_path: Path) -> None:
        """Test that windows reads the .Release makefile qmake writes."""
        makefile = tmp_path / "qamel.makefile"
        makefile.write_text("CFLAGS = top\n")
        (tmp_path / "qamel.makefile.Release").write_text("CFLAGS = release\n")

        probe = MakefileProbe(makefile, os="windows")
        assert probe.makefile_path() == tmp_path / "qamel.makefile.Release"
        assert probe.read_lines() == ["CFLAGS = release"]

    def test_windows_without_release(self, tmp_path: Path) -> None:
        makefile = tmp_path / "qamel.makefile"
        makefile.write_text("CFLAGS = top\n")

        probe = MakefileProbe(makefile, os="windows")
        assert probe.read_lines() == ["CFLAGS = top"]

    def test_linux_ignores_release(self, tmp_path: Path) -> None:
        makefile = tmp_path / "qamel.makefile"
        makefile.write_text("CFLAGS = top\n")
        (tmp_path / "qamel.makefile.Release").write_text("CFLAGS = release\n")

        probe = MakefileProbe(makefile, os="linux")
        assert probe.read_lines() == ["CFLAGS = top"]

    def test_is_toolchain_probe(self, tmp_path: Path) -> None:
        probe = MakefileProbe(tmp_path / "Makefile")
        assert isinstance(probe, ToolchainProbe)
        assert probe.name == "makefile"


class TestTextProbe:
    def test_read_lines(self):
        probe = TextProbe("A = 1\r\nB = 2\n")
        assert probe.read_lines() == ["A = 1", "B = 2"]

    def test_empty(self):
        assert TextProbe("").read_lines() == []

    def test_is_toolchain_probe(self):
        probe = TextProbe("")
        assert isinstance(probe, ToolchainProbe)
        assert probe.name == "text"
