"""LibCST-based parsing utilities.

Provides:
- core: parse_file, parse_source, parse_unit, load_unit, CompilationUnit
"""

from sayhello.cst.core import (
    CompilationUnit,
    load_unit,
    parse_file,
    parse_source,
    parse_unit,
)

__all__ = [
    "CompilationUnit",
    "load_unit",
    "parse_file",
    "parse_source",
    "parse_unit",
]
