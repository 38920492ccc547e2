#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASMplot v0.1.0

Pytest configuration and shared fixtures.

Author: ASMplot Development Team
License: See README.md
"""

import os
import shutil
import subprocess
import tempfile
from pathlib import Path

import numpy as np
import pytest

from asmplot.errors import ExternalToolError


def _write_ktab(path, kmer):
    """Write a FastK table stub whose header records ``kmer``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    # k-mer size, then a few header ints FastK also stores
    np.array([kmer, 4, 1, 0], dtype="<i4").tofile(str(path))
    return path


class RecordingRunner:
    """
    Stand-in for the external tools.

    Records every command line. FastK writes a table stub for its input base
    name (with the requested k, unless overridden), Fastrm deletes it, and
    the plotter does nothing. Executables listed in ``failing`` raise
    ExternalToolError instead.
    """

    def __init__(self):
        self.calls = []
        self.kmer_overrides = {}
        self.failing = set()
        self.fastk = "FastK"
        self.fastrm = "Fastrm"
        self.plotter = "asm_plotter"

    def __call__(self, cmd, timeout=None):
        cmd = [str(c) for c in cmd]
        self.calls.append(cmd)
        exe = cmd[0]

        if exe in self.failing:
            raise ExternalToolError(f"{exe} exited with code 1.", cmd=cmd, returncode=1)

        if exe == self.fastk:
            base = cmd[-1]
            kmer = int(next(c for c in cmd if c.startswith("-k"))[2:])
            _write_ktab(base + ".ktab", self.kmer_overrides.get(base, kmer))
        elif exe == self.fastrm:
            table = cmd[-1] + ".ktab"
            if os.path.exists(table):
                os.remove(table)

        return subprocess.CompletedProcess(cmd, 0, "", "")

    def calls_to(self, exe):
        return [c for c in self.calls if c[0] == exe]

    @property
    def fastk_calls(self):
        return self.calls_to(self.fastk)

    @property
    def fastrm_calls(self):
        return self.calls_to(self.fastrm)

    @property
    def plot_calls(self):
        return self.calls_to(self.plotter)


@pytest.fixture
def write_ktab():
    """Factory writing a .ktab stub with a given k-mer size."""
    return _write_ktab


@pytest.fixture
def tool_runner():
    """Recording replacement for FastK, Fastrm and the plotter."""
    return RecordingRunner()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside an empty directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="asmplot_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)

# ASMplot v0.1.0
# Any usage is subject to this software's license.
