"""Pure functions for computing statistics over instruction lists."""

from __future__ import annotations

from collections import Counter

from mipsc.ir import BRANCH_OPCODES, Instruction, Opcode


def count_opcodes(instructions: list[Instruction]) -> dict[str, int]:
    """Return a frequency map of opcode names in the given instruction list.

    Args:
        instructions: A list of instructions.

    Returns:
        A dict mapping opcode name strings to their occurrence counts.
        Empty dict for an empty input list.
    """
    return dict(Counter(inst.opcode.value for inst in instructions))


def branch_targets(instructions: list[Instruction]) -> set[str]:
    """Labels referenced by any branch or jump."""
    return {inst.label for inst in instructions if inst.opcode in BRANCH_OPCODES and inst.label}


def defined_labels(instructions: list[Instruction]) -> list[str]:
    """Labels defined by LABEL pseudo-instructions, in order of definition."""
    return [inst.label for inst in instructions if inst.opcode == Opcode.LABEL and inst.label]
