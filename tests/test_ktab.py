#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASMplot v0.1.0

Tests for FastK table header checks.

Author: ASMplot Development Team
License: See README.md
"""

import pytest
from asmplot.errors import KmerMismatchError, TableFormatError, TableNotFoundError
from asmplot.io_utils.ktab import check_table, read_kmer_size


class TestReadKmerSize:
    """Test reading the k-mer size field."""

    def test_reads_stored_size(self, tmp_path, write_ktab):
        table = write_ktab(tmp_path / "reads.ktab", 21)
        assert read_kmer_size(table) == 21

    def test_accepts_str_path(self, tmp_path, write_ktab):
        table = write_ktab(tmp_path / "reads.ktab", 40)
        assert read_kmer_size(str(table)) == 40

    def test_missing_table(self, tmp_path):
        with pytest.raises(TableNotFoundError) as exc:
            read_kmer_size(tmp_path / "absent.ktab")
        assert "Cannot find FastK table" in str(exc.value)

    def test_truncated_table(self, tmp_path):
        table = tmp_path / "short.ktab"
        table.write_bytes(b"\x15\x00")
        with pytest.raises(TableFormatError):
            read_kmer_size(table)

    def test_non_positive_size(self, tmp_path, write_ktab):
        table = write_ktab(tmp_path / "zero.ktab", 0)
        with pytest.raises(TableFormatError):
            read_kmer_size(table)

    def test_little_endian_layout(self, tmp_path):
        table = tmp_path / "raw.ktab"
        table.write_bytes((31).to_bytes(4, "little") + b"\x00" * 12)
        assert read_kmer_size(table) == 31


class TestCheckTable:
    """Test k-mer size consistency checks."""

    def test_any_size_when_not_expected(self, tmp_path, write_ktab):
        table = write_ktab(tmp_path / "a.ktab", 19)
        assert check_table(table) == 19
        assert check_table(table, 0) == 19

    def test_matching_size(self, tmp_path, write_ktab):
        table = write_ktab(tmp_path / "a.ktab", 21)
        assert check_table(table, 21) == 21

    def test_mismatch_reports_both_sizes(self, tmp_path, write_ktab):
        table = write_ktab(tmp_path / "a.ktab", 19)
        with pytest.raises(KmerMismatchError) as exc:
            check_table(table, 21)

        assert exc.value.found == 19
        assert exc.value.expected == 21
        assert "19" in str(exc.value) and "21" in str(exc.value)
