#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASMplot v0.1.0

Pipeline-level tests: ordering, k-mer consistency and cleanup guarantees.

Author: ASMplot Development Team
License: See README.md
"""

import os

import pytest
from asmplot.config.run_config import AxisScale, OutputFormat, RunConfig
from asmplot.errors import (
    ConfigValidationError,
    ExternalToolError,
    KmerMismatchError,
    TableNotFoundError,
)
from asmplot.pipeline.orchestrator import SpectraOrchestrator, ToolSettings


class CapturingPlotEngine:
    """Plot engine that keeps the requests it receives."""

    def __init__(self, fail=False):
        self.requests = []
        self.fail = fail

    def plot(self, request):
        self.requests.append(request)
        if self.fail:
            raise ExternalToolError("asm_plotter exited with code 1.")


@pytest.fixture
def reads_table(workdir, write_ktab):
    return write_ktab(workdir / "reads.ktab", 21)


def _run(workdir, runner, assemblies=("asmA.fasta", "asmB.fasta"), output="cmp",
         plot_engine=None, **kwargs):
    config = RunConfig(reads="reads.ktab", assemblies=assemblies, output=output,
                       scratch_dir=str(workdir), **kwargs)
    orchestrator = SpectraOrchestrator(config, runner=runner, plot_engine=plot_engine)
    return orchestrator.run()


class TestSuccessfulRuns:
    """End-to-end runs with fake external tools."""

    def test_two_assemblies_default_flags(self, workdir, reads_table, tool_runner):
        result = _run(workdir, tool_runner)

        assert tool_runner.fastk_calls == [
            ["FastK", "-k21", "-T4", f"-P{workdir}", "-t1", "asmA"],
            ["FastK", "-k21", "-T4", f"-P{workdir}", "-t1", "asmB"],
        ]
        assert len(tool_runner.plot_calls) == 1
        assert tool_runner.plot_calls[0][-4:] == ["cmp", "asmA", "asmB", "reads"]
        assert tool_runner.fastrm_calls == [["Fastrm", "asmA"], ["Fastrm", "asmB"]]

        assert result.kmer == 21
        assert result.built == ["asmA", "asmB"]
        assert result.removed == ["asmA", "asmB"]
        assert not os.path.exists("asmA.ktab")
        assert not os.path.exists("asmB.ktab")
        assert os.path.exists("reads.ktab")

    def test_pipeline_order(self, workdir, reads_table, tool_runner):
        _run(workdir, tool_runner)

        order = [call[0] for call in tool_runner.calls]
        assert order == ["FastK", "FastK", "asm_plotter", "Fastrm", "Fastrm"]

    def test_absolute_scales_pdf_threads(self, workdir, reads_table, tool_runner):
        engine = CapturingPlotEngine()
        _run(workdir, tool_runner, plot_engine=engine,
             x_scale=AxisScale.absolute(100), y_scale=AxisScale.absolute(500),
             output_format=OutputFormat.PDF, threads=8)

        request, = engine.requests
        assert request.x_scale == AxisScale.absolute(100)
        assert request.y_scale == AxisScale.absolute(500)
        assert request.output_format is OutputFormat.PDF
        assert request.threads == 8
        assert all("-T8" in call for call in tool_runner.fastk_calls)

    def test_single_assembly(self, workdir, reads_table, tool_runner):
        engine = CapturingPlotEngine()
        result = _run(workdir, tool_runner, assemblies=("asmA.fasta",), output="out",
                      plot_engine=engine)

        assert len(tool_runner.fastk_calls) == 1
        assert len(tool_runner.fastrm_calls) == 1
        assert engine.requests[0].assembly2 is None
        assert engine.requests[0].output == "out"
        assert len(result.assemblies) == 1

    def test_existing_table_kept(self, workdir, reads_table, tool_runner, write_ktab):
        write_ktab("asmA.ktab", 21)

        result = _run(workdir, tool_runner)

        assert [c[-1] for c in tool_runner.fastk_calls] == ["asmB"]
        assert tool_runner.fastrm_calls == [["Fastrm", "asmB"]]
        assert result.built == ["asmB"]
        assert os.path.exists("asmA.ktab")

    def test_scratch_root_passed_to_plotter(self, workdir, reads_table, tool_runner):
        result = _run(workdir, tool_runner)

        assert result.scratch_root.parent == workdir
        assert result.scratch_root.name.startswith("._ASM.")
        assert f"-P{result.scratch_root}" in tool_runner.plot_calls[0]

    def test_custom_tools(self, workdir, reads_table, tool_runner):
        tool_runner.fastk, tool_runner.fastrm, tool_runner.plotter = "fk", "frm", "plot"
        config = RunConfig(reads="reads", assemblies=("asmA.fa",), output="o",
                           scratch_dir=str(workdir))
        tools = ToolSettings(fastk="fk", fastrm="frm", plotter="plot", timeout=60)

        SpectraOrchestrator(config, tools=tools, runner=tool_runner).run()

        assert [c[0] for c in tool_runner.calls] == ["fk", "plot", "frm"]

    def test_cleanup_failure_does_not_fail_run(self, workdir, reads_table, tool_runner):
        tool_runner.failing.add("Fastrm")

        result = _run(workdir, tool_runner)

        assert result.removed == []
        assert len(tool_runner.plot_calls) == 1


class TestFailures:
    """Fatal errors and cleanup on failure paths."""

    def test_missing_reads_table(self, workdir, tool_runner):
        with pytest.raises(TableNotFoundError):
            _run(workdir, tool_runner)
        assert tool_runner.calls == []

    def test_built_table_kmer_mismatch(self, workdir, reads_table, tool_runner):
        tool_runner.kmer_overrides["asmB"] = 19
        engine = CapturingPlotEngine()

        with pytest.raises(KmerMismatchError) as exc:
            _run(workdir, tool_runner, plot_engine=engine)

        assert exc.value.found == 19 and exc.value.expected == 21
        assert engine.requests == []
        assert tool_runner.fastrm_calls == [["Fastrm", "asmA"], ["Fastrm", "asmB"]]

    def test_existing_table_kmer_mismatch(self, workdir, reads_table, tool_runner, write_ktab):
        write_ktab("asmA.ktab", 31)

        with pytest.raises(KmerMismatchError):
            _run(workdir, tool_runner)

        assert tool_runner.calls == []
        assert os.path.exists("asmA.ktab")

    def test_counting_failure_cleans_up(self, workdir, reads_table, tool_runner):
        original = tool_runner.__call__

        def fail_on_second(cmd, timeout=None):
            if cmd[0] == "FastK" and cmd[-1] == "asmB":
                tool_runner.calls.append(list(cmd))
                raise ExternalToolError("FastK exited with code 1.")
            return original(cmd, timeout=timeout)

        config = RunConfig(reads="reads", assemblies=("asmA.fa", "asmB.fa"), output="cmp",
                           scratch_dir=str(workdir))
        with pytest.raises(ExternalToolError):
            SpectraOrchestrator(config, runner=fail_on_second).run()

        assert tool_runner.plot_calls == []
        assert tool_runner.fastrm_calls == [["Fastrm", "asmA"], ["Fastrm", "asmB"]]
        assert not os.path.exists("asmA.ktab")

    def test_plot_failure_cleans_up(self, workdir, reads_table, tool_runner):
        tool_runner.failing.add("asm_plotter")

        with pytest.raises(ExternalToolError):
            _run(workdir, tool_runner)

        assert len(tool_runner.fastrm_calls) == 2
        assert not os.path.exists("asmA.ktab")

    def test_missing_scratch_dir(self, workdir, reads_table, tool_runner):
        config = RunConfig(reads="reads", assemblies=("asmA.fa",), output="o",
                           scratch_dir=str(workdir / "absent"))

        with pytest.raises(ConfigValidationError, match="Scratch directory not found"):
            SpectraOrchestrator(config, runner=tool_runner).run()
        assert tool_runner.calls == []
