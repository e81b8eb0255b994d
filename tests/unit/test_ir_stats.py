"""Tests for instruction statistics: count_opcodes (pure) and ir_stats (API wrapper)."""

from mipsc.api import ir_stats, lower_source
from mipsc.ir import Instruction, Opcode
from mipsc.ir_stats import branch_targets, count_opcodes, defined_labels

LOOP_SOURCE = "int a = 1; for (i = 0; i < 3; i++) { if (a == b) { a = 2; } }"


class TestCountOpcodes:
    def test_empty_list_returns_empty_dict(self):
        assert count_opcodes([]) == {}

    def test_single_instruction(self):
        instructions = [Instruction(opcode=Opcode.LI, operands=["$t0", "1"])]
        assert count_opcodes(instructions) == {"LI": 1}

    def test_repeated_opcodes_are_summed(self):
        instructions = [
            Instruction(opcode=Opcode.LI, operands=["$t0", "1"]),
            Instruction(opcode=Opcode.LI, operands=["$t1", "2"]),
            Instruction(opcode=Opcode.ADD, operands=["$t0", "$t0", "$t1"]),
        ]
        assert count_opcodes(instructions) == {"LI": 2, "ADD": 1}


class TestLabels:
    def test_every_branch_target_is_defined(self):
        ir = lower_source(LOOP_SOURCE)
        assert branch_targets(ir) <= set(defined_labels(ir))

    def test_defined_labels_in_order(self):
        assert defined_labels(lower_source(LOOP_SOURCE)) == [
            "LOOP_START",
            "IF_TRUE0",
            "IF_FALSE0",
            "END_IF0",
            "LOOP_END",
        ]


class TestIrStatsApi:
    def test_loop_program(self):
        assert ir_stats(LOOP_SOURCE) == {
            "LI": 3,
            "LABEL": 5,
            "BGT": 1,
            "BEQ": 1,
            "J": 3,
            "ADDI": 1,
        }

    def test_empty_source(self):
        assert ir_stats("") == {}
