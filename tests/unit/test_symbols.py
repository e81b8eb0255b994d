"""Tests for the closed register mapping."""

from __future__ import annotations

import pytest

from mipsc.errors import LoweringError, UnmappedVariableError
from mipsc.symbols import SymbolTable


class TestSymbolTable:
    def test_default_mapping(self):
        table = SymbolTable()
        assert table.register_for("a") == "$t0"
        assert table.register_for("i") == "$t1"
        assert table.register_for("b") == "$t2"

    def test_unmapped_name_raises(self):
        with pytest.raises(UnmappedVariableError, match="'x' has no register"):
            SymbolTable().register_for("x")

    def test_unmapped_error_is_lowering_and_key_error(self):
        with pytest.raises(LoweringError):
            SymbolTable().register_for("x")
        with pytest.raises(KeyError):
            SymbolTable().register_for("x")

    def test_custom_mapping_is_closed(self):
        table = SymbolTable({"x": "$s0"})
        assert table.register_for("x") == "$s0"
        with pytest.raises(UnmappedVariableError):
            table.register_for("a")

    def test_source_mapping_is_copied(self):
        regs = {"x": "$s0"}
        table = SymbolTable(regs)
        regs["y"] = "$s1"
        with pytest.raises(UnmappedVariableError):
            table.register_for("y")
