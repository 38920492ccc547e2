#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASMplot v0.1.0

Tests for per-run scratch name allocation.

Author: ASMplot Development Team
License: See README.md
"""

import itertools

import pytest
from asmplot.utils import scratch
from asmplot.utils.scratch import ScratchSession


class TestScratchSession:
    """Test ScratchSession.allocate."""

    def test_root_inside_directory(self, tmp_path):
        session = ScratchSession.allocate(tmp_path)

        assert session.root.parent == tmp_path
        assert session.root.name.startswith("._ASM.")
        assert len(session.root.name) == len("._ASM.") + 4

    def test_creates_nothing(self, tmp_path):
        ScratchSession.allocate(tmp_path)
        assert list(tmp_path.iterdir()) == []

    def test_custom_prefix(self, tmp_path):
        session = ScratchSession.allocate(tmp_path, prefix="run_", width=6)
        assert session.root.name.startswith("run_")
        assert len(session.root.name) == 10

    def test_sessions_differ(self, tmp_path):
        roots = {ScratchSession.allocate(tmp_path).root for _ in range(5)}
        assert len(roots) > 1

    def test_skips_names_in_use(self, tmp_path, monkeypatch):
        (tmp_path / "._ASM.aaaa.hist").write_text("")
        letters = itertools.chain("aaaa", "bbbb")
        monkeypatch.setattr(scratch.secrets, "choice", lambda alphabet: next(letters))

        session = ScratchSession.allocate(tmp_path)

        assert session.root.name == "._ASM.bbbb"

    def test_gives_up(self, tmp_path, monkeypatch):
        (tmp_path / "._ASM.aaaa").write_text("")
        monkeypatch.setattr(scratch.secrets, "choice", lambda alphabet: "a")

        with pytest.raises(FileExistsError):
            ScratchSession.allocate(tmp_path, attempts=3)

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ScratchSession.allocate(tmp_path / "absent")

    def test_str(self, tmp_path):
        session = ScratchSession.allocate(tmp_path)
        assert str(session) == str(session.root)
