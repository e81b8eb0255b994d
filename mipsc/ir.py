"""Target instruction model — MIPS subset plus label pseudo-instructions."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel


class Opcode(str, Enum):
    # Register loads and arithmetic
    LI = "LI"
    MOVE = "MOVE"
    ADD = "ADD"
    ADDI = "ADDI"
    SUB = "SUB"
    # Control flow
    BEQ = "BEQ"
    BNE = "BNE"
    BGT = "BGT"
    J = "J"
    # Labels (pseudo-instruction)
    LABEL = "LABEL"


BRANCH_OPCODES: frozenset[Opcode] = frozenset(
    {Opcode.BEQ, Opcode.BNE, Opcode.BGT, Opcode.J}
)


class Instruction(BaseModel):
    opcode: Opcode
    operands: list[Any] = []
    label: str | None = None  # for LABEL / branch targets

    def __str__(self) -> str:
        if self.opcode == Opcode.LABEL:
            return f"{self.label}:"
        args = [str(op) for op in self.operands]
        if self.label:
            args.append(self.label)
        if not args:
            return self.opcode.value.lower()
        return f"{self.opcode.value.lower()} {', '.join(args)}"
