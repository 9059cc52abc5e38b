"""Shared LibCST parsing utilities.

Provides parse_file, parse_source and the CompilationUnit wrapper used as
the entry points for all CST-based work in the sayhello package.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

import libcst as cst


@dataclass(frozen=True)
class CompilationUnit:
    """A parsed module together with its dotted module name.

    Attributes:
        module: LibCST Module (lossless CST with whitespace preservation)
        module_name: Dotted module name used to qualify class identities,
            e.g. "com.yourorg". Empty for an anonymous unit.
        path: Source file the unit was loaded from, if any
    """

    module: cst.Module
    module_name: str = ""
    path: str | None = None

    @property
    def code(self) -> str:
        return self.module.code

    def with_module(self, module: cst.Module) -> CompilationUnit:
        """Return a copy of this unit holding a different module."""
        return replace(self, module=module)


def parse_file(path: str) -> cst.Module:
    """Parse a Python source file into a LibCST Module.

    The file is read as bytes so LibCST detects its encoding and newlines;
    Module.bytes writes it back unchanged.

    Args:
        path: Absolute or relative path to a Python file

    Returns:
        LibCST Module (lossless CST with whitespace preservation)

    Raises:
        FileNotFoundError: If the file does not exist
        libcst.ParserSyntaxError: If the file cannot be parsed
    """
    with open(path, "rb") as f:
        source = f.read()
    return cst.parse_module(source)


def parse_source(
    code: str, config: cst.PartialParserConfig | None = None
) -> cst.Module:
    """Parse Python source code string into a LibCST Module.

    Args:
        code: Python source code as a string
        config: Parser configuration such as the python version or encoding.
            Indentation and newlines are still inferred from code itself.

    Returns:
        LibCST Module (lossless CST with whitespace preservation)

    Raises:
        libcst.ParserSyntaxError: If the code cannot be parsed

    Example:
        >>> module = parse_source("x = 1\\n")
        >>> module.code
        'x = 1\\n'
    """
    if config is None:
        return cst.parse_module(code)
    return cst.parse_module(code, config=config)


def parse_unit(code: str, module_name: str = "") -> CompilationUnit:
    """Parse source code into a CompilationUnit named module_name."""
    return CompilationUnit(module=parse_source(code), module_name=module_name)


def load_unit(path: str, module_name: str = "") -> CompilationUnit:
    """Parse a file into a CompilationUnit.

    Raises:
        FileNotFoundError: If the file does not exist
        libcst.ParserSyntaxError: If the file cannot be parsed
    """
    return CompilationUnit(
        module=parse_file(path), module_name=module_name, path=path
    )
