"""Symbol table — closed variable → register mapping."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from . import constants
from .errors import UnmappedVariableError


class SymbolTable:
    """Read-only mapping from source variable names to physical registers.

    The set of names is fixed at construction; looking up any other name
    raises ``UnmappedVariableError``.
    """

    def __init__(self, registers: Optional[Mapping[str, str]] = None):
        self._registers = MappingProxyType(
            dict(constants.DEFAULT_REGISTERS if registers is None else registers)
        )

    def register_for(self, name: str) -> str:
        try:
            return self._registers[name]
        except KeyError:
            raise UnmappedVariableError(name, sorted(self._registers)) from None

