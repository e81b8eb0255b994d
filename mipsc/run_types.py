"""Pipeline data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from . import constants


@dataclass(frozen=True)
class CompilerConfig:
    """Groups translation configuration."""

    registers: Mapping[str, str] = field(
        default_factory=lambda: dict(constants.DEFAULT_REGISTERS)
    )


@dataclass
class PipelineStats:
    """Timing and size statistics for each pipeline stage."""

    source_bytes: int = 0
    source_lines: int = 0

    # Stage timings (seconds)
    tokenize_time: float = 0.0
    parse_time: float = 0.0
    lower_time: float = 0.0
    emit_time: float = 0.0
    total_time: float = 0.0

    # Output sizes
    token_count: int = 0
    statement_count: int = 0
    instruction_count: int = 0
    label_count: int = 0
    branch_target_count: int = 0
    output_lines: int = 0

    def report(self) -> str:
        lines = [
            "═══ Pipeline Statistics ═══",
            f"  Source: {self.source_lines} lines, {self.source_bytes} bytes",
            "",
            f"  {'Stage':<20} {'Time':>10}  {'Output':>30}",
            f"  {'─' * 20} {'─' * 10}  {'─' * 30}",
        ]

        stages = [
            ("Tokenize", self.tokenize_time, f"{self.token_count} tokens"),
            ("Parse", self.parse_time, f"{self.statement_count} statements"),
            (
                "Lower",
                self.lower_time,
                f"{self.instruction_count} instructions, {self.label_count} labels",
            ),
            ("Emit", self.emit_time, f"{self.output_lines} lines"),
        ]
        for name, t, output in stages:
            time_str = f"{t * 1000:>8.1f}ms"
            lines.append(f"  {name:<20} {time_str:>10}  {output:>30}")

        lines.append(f"  {'─' * 20} {'─' * 10}  {'─' * 30}")
        lines.append(f"  {'Total':<20} {self.total_time * 1000:>8.1f}ms")
        lines.append("")
        lines.append(
            f"  Control flow: {self.label_count} labels defined,"
            f" {self.branch_target_count} branch targets"
        )
        return "\n".join(lines)
