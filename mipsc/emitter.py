"""Emitter — instruction list → assembly text."""

from __future__ import annotations

from .ir import Instruction


def generate_code(instructions: list[Instruction]) -> str:
    """Concatenate one line per instruction, in order."""
    return "".join(f"{inst}\n" for inst in instructions)
