"""Loop-language to MIPS assembly translator."""

from .api import (  # noqa: F401
    compile_source,
    compile_with_stats,
    dump_ir,
    dump_tree,
    ir_stats,
    lower_source,
    parse_source,
    tokenize_source,
)
from .errors import (  # noqa: F401
    CompileError,
    LoweringError,
    ParseError,
    UnmappedVariableError,
    UnsupportedExpressionError,
    UnsupportedOperatorError,
)
