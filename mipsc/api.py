"""Composable API functions for the translation pipeline.

Each function corresponds to a CLI workflow (--tokens, --ast, --ir-only,
--stats) but is callable programmatically without argparse.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from .emitter import generate_code
from .ir import Instruction
from .ir_stats import branch_targets, count_opcodes, defined_labels
from .lowering import LoweringSession
from .parser import Parser
from .run_types import CompilerConfig, PipelineStats
from .symbols import SymbolTable
from .syntax import Program, format_tree
from .tokens import Token, tokenize

logger = logging.getLogger(__name__)


def _session(config: Optional[CompilerConfig]) -> LoweringSession:
    config = config or CompilerConfig()
    return LoweringSession(SymbolTable(config.registers))


def tokenize_source(source: str) -> list[Token]:
    """Scan source text into tokens."""
    return tokenize(source)


def parse_source(source: str) -> Program:
    """Tokenize and parse source text into a syntax tree.

    Raises:
        ParseError: If the tokens do not match the grammar.
    """
    logger.info("Parsing source (%d chars)", len(source))
    return Parser(tokenize(source)).parse()


def dump_tree(source: str) -> str:
    """Parse source and return an indented, one-node-per-line tree dump."""
    return format_tree(parse_source(source))


def lower_source(
    source: str, config: Optional[CompilerConfig] = None
) -> list[Instruction]:
    """Parse and lower source text to instructions.

    Args:
        source: The source code text.
        config: Register mapping and flags; defaults to ``CompilerConfig()``.

    Returns:
        A list of instructions.  Each call uses a fresh lowering session.
    """
    program = parse_source(source)
    logger.info("Lowering %d top-level statements", len(program.body))
    return _session(config).lower(program)


def compile_source(source: str, config: Optional[CompilerConfig] = None) -> str:
    """Translate source text to assembly text, one instruction per line."""
    return generate_code(lower_source(source, config))


def dump_ir(source: str, config: Optional[CompilerConfig] = None) -> str:
    """Lower source and return a two-space-indented instruction listing."""
    instructions = lower_source(source, config)
    return "\n".join(f"  {inst}" for inst in instructions)


def ir_stats(source: str, config: Optional[CompilerConfig] = None) -> dict[str, int]:
    """Lower source and return opcode frequency counts."""
    return count_opcodes(lower_source(source, config))


def compile_with_stats(
    source: str, config: Optional[CompilerConfig] = None
) -> tuple[str, PipelineStats]:
    """Translate source text, timing each stage.

    Returns:
        The assembly text and a ``PipelineStats`` for the run.
    """
    stats = PipelineStats(
        source_bytes=len(source.encode("utf-8")),
        source_lines=len(source.splitlines()),
    )
    start = time.perf_counter()

    t0 = time.perf_counter()
    tokens = tokenize(source)
    stats.tokenize_time = time.perf_counter() - t0
    stats.token_count = len(tokens)

    t0 = time.perf_counter()
    program = Parser(tokens).parse()
    stats.parse_time = time.perf_counter() - t0
    stats.statement_count = len(program.body)

    t0 = time.perf_counter()
    instructions = _session(config).lower(program)
    stats.lower_time = time.perf_counter() - t0
    stats.instruction_count = len(instructions)
    stats.label_count = len(defined_labels(instructions))
    stats.branch_target_count = len(branch_targets(instructions))

    t0 = time.perf_counter()
    code = generate_code(instructions)
    stats.emit_time = time.perf_counter() - t0
    stats.output_lines = len(code.splitlines())

    stats.total_time = time.perf_counter() - start
    logger.info("Compiled %d instructions in %.1fms", len(instructions), stats.total_time * 1000)
    return code, stats
