"""Tests for the emitter and instruction rendering."""

from __future__ import annotations

from mipsc.emitter import generate_code
from mipsc.ir import Instruction, Opcode


class TestInstructionStr:
    def test_label(self):
        assert str(Instruction(opcode=Opcode.LABEL, label="LOOP_END")) == "LOOP_END:"

    def test_operands_joined_with_commas(self):
        inst = Instruction(opcode=Opcode.ADDI, operands=["$t0", "$t0", "-2"])
        assert str(inst) == "addi $t0, $t0, -2"

    def test_branch_target_last(self):
        inst = Instruction(opcode=Opcode.BGT, operands=["$t1", "3"], label="LOOP_END")
        assert str(inst) == "bgt $t1, 3, LOOP_END"

    def test_jump(self):
        assert str(Instruction(opcode=Opcode.J, label="LOOP_START")) == "j LOOP_START"


class TestGenerateCode:
    def test_empty(self):
        assert generate_code([]) == ""

    def test_one_line_per_instruction(self):
        code = generate_code(
            [
                Instruction(opcode=Opcode.LI, operands=["$t0", "3"]),
                Instruction(opcode=Opcode.LABEL, label="LOOP_START"),
                Instruction(opcode=Opcode.J, label="LOOP_START"),
            ]
        )
        assert code == "li $t0, 3\nLOOP_START:\nj LOOP_START\n"

    def test_no_reordering(self):
        insts = [
            Instruction(opcode=Opcode.J, label="X"),
            Instruction(opcode=Opcode.LABEL, label="X"),
        ]
        assert generate_code(insts).splitlines() == ["j X", "X:"]
