"""LoweringSession — syntax tree → MIPS instruction list."""

from __future__ import annotations

import logging
from typing import Any, Callable

from . import constants
from .errors import UnsupportedExpressionError, UnsupportedOperatorError
from .expression import Assignment, decode_expression, is_number
from .ir import Instruction, Opcode
from .symbols import SymbolTable
from .syntax import (
    Declaration,
    Expression,
    ForLoop,
    IfStatement,
    Increment,
    Program,
)

logger = logging.getLogger(__name__)

_IF_BRANCH_OPCODES: dict[str, Opcode] = {
    "==": Opcode.BEQ,
    "!=": Opcode.BNE,
}


class LoweringSession:
    """One translation's worth of lowering state.

    Owns the instruction buffer and the ``if`` label counter, so separate
    sessions never share label numbering.  Loop labels are fixed names:
    only one ``for`` loop per program gets distinct labels.
    """

    def __init__(self, symbols: SymbolTable | None = None):
        self._symbols = symbols if symbols is not None else SymbolTable()
        self._label_counter: int = 0
        self._instructions: list[Instruction] = []
        self._STMT_DISPATCH: dict[str, Callable] = {
            Declaration.kind: self._lower_declaration,
            ForLoop.kind: self._lower_for_loop,
        }
        self._BODY_DISPATCH: dict[str, Callable] = {
            IfStatement.kind: self._lower_if,
            Expression.kind: self._lower_expression,
        }

    # ── helpers ──────────────────────────────────────────────────

    def _fresh_if_labels(self) -> tuple[str, str, str]:
        n = self._label_counter
        self._label_counter += 1
        return (
            f"{constants.IF_TRUE_LABEL_PREFIX}{n}",
            f"{constants.IF_FALSE_LABEL_PREFIX}{n}",
            f"{constants.IF_END_LABEL_PREFIX}{n}",
        )

    def _emit(
        self,
        opcode: Opcode,
        *,
        operands: list[Any] = [],
        label: str = "",
    ) -> Instruction:
        inst = Instruction(opcode=opcode, operands=operands or [], label=label or None)
        self._instructions.append(inst)
        return inst

    def _already_emitted(self, inst: Instruction) -> bool:
        line = str(inst)
        return any(str(prev) == line for prev in self._instructions)

    def _reg(self, name: str) -> str:
        return self._symbols.register_for(name)

    def _operand(self, value: str) -> str:
        """Register for a variable, or the literal itself for a number."""
        return value if is_number(value) else self._reg(value)

    # ── entry point ──────────────────────────────────────────────

    def lower(self, program: Program) -> list[Instruction]:
        self._label_counter = 0
        self._instructions = []
        for stmt in program.body:
            handler = self._STMT_DISPATCH.get(stmt.kind)
            if handler is None:
                logger.debug("No lowering for top-level %s", stmt.kind)
                continue
            handler(stmt)
        logger.debug("Lowered %d instructions", len(self._instructions))
        return self._instructions

    # ── statements ───────────────────────────────────────────────

    def _lower_declaration(self, decl: Declaration):
        logger.debug("Declaration %s = %s", decl.name, decl.initial_value)
        self._emit(Opcode.LI, operands=[self._reg(decl.name), decl.initial_value])

    def _lower_for_loop(self, loop: ForLoop):
        init_reg = self._reg(loop.init.name)
        init = Instruction(opcode=Opcode.LI, operands=[init_reg, loop.init.value])
        if self._already_emitted(init):
            logger.debug("Skipping duplicate loop initialization '%s'", init)
        else:
            self._instructions.append(init)

        self._emit(Opcode.LABEL, label=constants.LOOP_START_LABEL)

        # The parsed comparison is not consulted: the exit test is always '>'.
        cond_reg = self._reg(loop.cond.name)
        self._emit(
            Opcode.BGT,
            operands=[cond_reg, self._operand(loop.cond.value)],
            label=constants.LOOP_END_LABEL,
        )

        for stmt in loop.body:
            self._BODY_DISPATCH[stmt.kind](stmt)

        self._lower_increment(loop.incr, init_reg)
        self._emit(Opcode.J, label=constants.LOOP_START_LABEL)
        self._emit(Opcode.LABEL, label=constants.LOOP_END_LABEL)

    def _lower_if(self, node: IfStatement):
        name, op, value = node.cond.split()
        branch = _IF_BRANCH_OPCODES.get(op)
        if branch is None:
            raise UnsupportedOperatorError(f"Unsupported condition operator: {op}")
        operands = [self._reg(name), self._operand(value)]

        true_label, false_label, end_label = self._fresh_if_labels()
        logger.debug("If %s (%s)", node.cond.name_and_operator, true_label)

        self._emit(branch, operands=operands, label=true_label)
        self._emit(Opcode.J, label=false_label)
        self._emit(Opcode.LABEL, label=true_label)
        # Only the first statement of an if body is translated.
        if node.body:
            self._lower_expression(node.body[0])
        self._emit(Opcode.J, label=end_label)
        self._emit(Opcode.LABEL, label=false_label)
        self._emit(Opcode.LABEL, label=end_label)

    def _lower_increment(self, incr: Increment, reg: str):
        op = incr.operator
        if op == "++":
            step = "1"
        elif op == "--":
            step = "-1"
        elif "+=" in op and is_number(op[2:]):
            step = op[2:]
        elif "-=" in op and is_number(op[2:]):
            step = f"-{op[2:]}"
        else:
            raise UnsupportedOperatorError(f"Unsupported increment operator: {op}")
        self._emit(Opcode.ADDI, operands=[reg, reg, step])

    def _lower_expression(self, expr: Expression):
        assign = decode_expression(expr.text)
        logger.debug("Expression '%s' -> %s", expr.text, assign)
        lowering = _EXPRESSION_FORMS.get((assign.operator, assign.secondary_operator))
        if lowering is None:
            raise UnsupportedExpressionError(
                f"Unsupported operation in expression: {expr.text}"
            )
        lowering(self, assign)

    # ── expression forms ─────────────────────────────────────────

    def _lower_compound(self, assign: Assignment, opcode: Opcode):
        dest = self._reg(assign.dest)
        src = self._reg(assign.operand)
        imm = assign.immediate
        step = str(imm) if assign.secondary_operator == "+" else f"-{imm}"
        self._emit(opcode, operands=[dest, dest, src])
        self._emit(Opcode.ADDI, operands=[dest, dest, step])

    def _lower_add_assign(self, assign: Assignment):
        self._lower_compound(assign, Opcode.ADD)

    def _lower_sub_assign(self, assign: Assignment):
        self._lower_compound(assign, Opcode.SUB)

    def _lower_assign_binop(self, assign: Assignment):
        opcode = Opcode.ADD if assign.secondary_operator == "+" else Opcode.SUB
        dest = self._reg(assign.dest)
        src = self._reg(assign.operand)
        self._emit(opcode, operands=[dest, src, str(assign.immediate)])

    def _lower_plain_assign(self, assign: Assignment):
        dest = self._reg(assign.dest)
        if assign.operand_is_literal:
            self._emit(Opcode.LI, operands=[dest, assign.operand])
        else:
            self._emit(Opcode.MOVE, operands=[dest, self._reg(assign.operand)])


_EXPRESSION_FORMS: dict[tuple[str, str], Callable[[LoweringSession, Assignment], None]] = {
    ("+=", "+"): LoweringSession._lower_add_assign,
    ("+=", "-"): LoweringSession._lower_add_assign,
    ("-=", "+"): LoweringSession._lower_sub_assign,
    ("-=", "-"): LoweringSession._lower_sub_assign,
    ("=", "+"): LoweringSession._lower_assign_binop,
    ("=", "-"): LoweringSession._lower_assign_binop,
    ("=", ""): LoweringSession._lower_plain_assign,
}


def lower(program: Program, symbols: SymbolTable | None = None) -> list[Instruction]:
    """Lower *program* in a fresh session."""
    return LoweringSession(symbols).lower(program)
