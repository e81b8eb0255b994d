"""Syntax tree — one frozen dataclass per grammar production."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from . import constants


@dataclass(frozen=True)
class Declaration:
    kind: ClassVar[str] = "Declaration"

    name: str
    initial_value: str = constants.DEFAULT_INITIAL_VALUE


@dataclass(frozen=True)
class Initialization:
    kind: ClassVar[str] = "Initialization"

    name: str
    value: str


@dataclass(frozen=True)
class Condition:
    kind: ClassVar[str] = "Condition"

    name: str
    operator: str
    value: str

    @property
    def name_and_operator(self) -> str:
        """The variable and operator as one field, e.g. ``"i <="``."""
        return f"{self.name} {self.operator}"

    def split(self) -> tuple[str, str, str]:
        return self.name, self.operator, self.value


@dataclass(frozen=True)
class Increment:
    kind: ClassVar[str] = "Increment"

    name: str
    operator: str


@dataclass(frozen=True)
class Expression:
    """An assignment statement kept as raw text until lowering."""

    kind: ClassVar[str] = "Expression"

    text: str


@dataclass(frozen=True)
class IfStatement:
    kind: ClassVar[str] = "IfStatement"

    cond: Condition
    body: tuple[Expression, ...] = ()


LoopStatement = Union[IfStatement, Expression]


@dataclass(frozen=True)
class ForLoop:
    kind: ClassVar[str] = "ForLoop"

    init: Initialization
    cond: Condition
    incr: Increment
    body: tuple[LoopStatement, ...] = ()


TopLevelStatement = Union[Declaration, ForLoop]


@dataclass(frozen=True)
class Program:
    kind: ClassVar[str] = "Program"

    body: tuple[TopLevelStatement, ...] = ()


Node = Union[
    Program,
    Declaration,
    ForLoop,
    IfStatement,
    Initialization,
    Condition,
    Increment,
    Expression,
]


def format_tree(node: Node, indent: int = 0) -> str:
    """Render *node* and its descendants, one node per line."""
    pad = "  " * indent
    if isinstance(node, Program):
        lines = [f"{pad}Program"]
        lines.extend(format_tree(child, indent + 1) for child in node.body)
        return "\n".join(lines)
    if isinstance(node, ForLoop):
        lines = [f"{pad}ForLoop"]
        children: list[Node] = [node.init, node.cond, node.incr, *node.body]
        lines.extend(format_tree(child, indent + 1) for child in children)
        return "\n".join(lines)
    if isinstance(node, IfStatement):
        lines = [f"{pad}IfStatement"]
        lines.extend(format_tree(child, indent + 1) for child in (node.cond, *node.body))
        return "\n".join(lines)
    if isinstance(node, Declaration):
        return f"{pad}Declaration {node.name} = {node.initial_value}"
    if isinstance(node, Initialization):
        return f"{pad}Initialization {node.name} = {node.value}"
    if isinstance(node, Condition):
        return f"{pad}Condition {node.name_and_operator} {node.value}"
    if isinstance(node, Increment):
        return f"{pad}Increment {node.name}{node.operator}"
    return f"{pad}Expression {node.text}"
