"""Tests for CST core parse utilities."""

from pathlib import Path

import pytest

libcst = pytest.importorskip("libcst")

from sayhello.cst.core import (  # noqa: E402
    CompilationUnit,
    load_unit,
    parse_file,
    parse_source,
    parse_unit,
)

FIXTURES = Path(__file__).parent / "fixtures" / "cst"
A_MODULE = str(FIXTURES / "com" / "yourorg" / "a.py")


def test_parse_source_simple():
    """parse_source should return a Module for simple code."""
    module = parse_source("x = 1\n")
    assert module is not None
    assert module.code == "x = 1\n"


def test_parse_source_class():
    """parse_source should handle class definitions."""
    code = "class A:\n    pass\n"
    module = parse_source(code)
    assert module.code == code


def test_parse_source_empty():
    """parse_source should handle empty strings."""
    module = parse_source("")
    assert module is not None
    assert module.code == ""


def test_parse_source_invalid_syntax():
    """parse_source should raise ParserSyntaxError for invalid syntax."""
    with pytest.raises(libcst.ParserSyntaxError):
        parse_source("def foo(:\n")


def test_parse_source_with_config_round_trips():
    """A config taken from another module does not alter the parsed code."""
    tabbed = parse_source("class A:\n\tpass\n")
    module = parse_source("x = 1\n", tabbed.config_for_parsing)
    assert module.code == "x = 1\n"


def test_parse_file_fixture():
    """parse_file should parse the a.py fixture."""
    module = parse_file(A_MODULE)
    assert "class A" in module.code


def test_parse_file_preserves_content():
    """parse_file should preserve all source content (round-trip)."""
    with open(A_MODULE) as f:
        original = f.read()
    module = parse_file(A_MODULE)
    assert module.code == original


def test_parse_file_not_found():
    """parse_file should raise FileNotFoundError for missing files."""
    with pytest.raises(FileNotFoundError):
        parse_file("/nonexistent/path/file.py")


# ============================================================================
# CompilationUnit tests
# ============================================================================


def test_parse_unit_records_module_name():
    """parse_unit should attach the dotted module name."""
    unit = parse_unit("class A:\n    pass\n", module_name="com.yourorg")
    assert unit.module_name == "com.yourorg"
    assert unit.path is None
    assert unit.code == "class A:\n    pass\n"


def test_parse_unit_default_module_name():
    """parse_unit without a module name should produce an anonymous unit."""
    assert parse_unit("x = 1\n").module_name == ""


def test_load_unit_records_path():
    """load_unit should remember where the unit came from."""
    unit = load_unit(A_MODULE, module_name="com.yourorg.a")
    assert unit.path == A_MODULE
    assert unit.module_name == "com.yourorg.a"


def test_with_module_returns_new_unit():
    """with_module should copy the unit, leaving the original untouched."""
    unit = parse_unit("x = 1\n", module_name="m")
    other = unit.with_module(parse_source("y = 2\n"))
    assert other is not unit
    assert other.module_name == "m"
    assert other.code == "y = 2\n"
    assert unit.code == "x = 1\n"


def test_compilation_unit_is_frozen():
    """CompilationUnit should be immutable."""
    unit = CompilationUnit(module=parse_source("x = 1\n"))
    with pytest.raises(AttributeError):
        unit.module_name = "changed"  # type: ignore[misc]
