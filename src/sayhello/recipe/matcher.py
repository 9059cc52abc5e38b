"""Predicates deciding whether a class is the recipe's target.

- declaration_identity: fully-qualified identity of a class from its scope
- matches: exact identity comparison
- member_names / already_has_member: direct member name collision guard
"""

from __future__ import annotations

from collections.abc import Sequence

import libcst as cst
import libcst.matchers as m

# Scope marker pushed by the walker while inside a function body.
LOCALS = "<locals>"


def declaration_identity(module_name: str, scope: Sequence[str]) -> str | None:
    """Join a module name and a class scope stack into an identity.

    Args:
        module_name: Dotted module name of the compilation unit (may be empty)
        scope: Names of the enclosing classes, outermost first, ending with
            the class itself. Function bodies appear as LOCALS.

    Returns:
        Identity such as "com.yourorg.Outer.Inner", or None when the class
        lives inside a function body and has no stable identity.
    """
    if not scope or LOCALS in scope:
        return None
    qualname = ".".join(scope)
    return f"{module_name}.{qualname}" if module_name else qualname


def matches(identity: str | None, target_identity: str) -> bool:
    """True iff identity equals target_identity exactly.

    Unresolved identities and empty targets never match.
    """
    if identity is None or not target_identity:
        return False
    return identity == target_identity


def _statement_names(statement: cst.CSTNode) -> list[str]:
    if m.matches(statement, m.FunctionDef()):
        return [statement.name.value]  # type: ignore[attr-defined]
    if m.matches(statement, m.SimpleStatementLine()):
        return _small_statement_names(statement.body)  # type: ignore[attr-defined]
    return []


def _target_names(target: cst.BaseExpression) -> list[str]:
    """Names bound by an assignment target, including unpacked ones."""
    if isinstance(target, cst.Name):
        return [target.value]
    if isinstance(target, cst.StarredElement):
        return _target_names(target.value)
    if isinstance(target, (cst.Tuple, cst.List)):
        names = []
        for element in target.elements:
            names.extend(_target_names(element.value))
        return names
    return []


def _small_statement_names(small_statements: Sequence[cst.CSTNode]) -> list[str]:
    names = []
    for small in small_statements:
        if isinstance(small, cst.Assign):
            for assign_target in small.targets:
                names.extend(_target_names(assign_target.target))
        elif isinstance(small, cst.AnnAssign):
            names.extend(_target_names(small.target))
    return names


def member_names(node: cst.ClassDef) -> list[str]:
    """Simple names of the direct members of a class, in body order.

    Methods and fields defined at class level count. Nested classes and
    statements inside compound blocks (if/try/...) do not.
    """
    body = node.body
    if isinstance(body, cst.SimpleStatementSuite):
        return _small_statement_names(body.body)
    names: list[str] = []
    for statement in body.body:
        names.extend(_statement_names(statement))
    return names


def already_has_member(node: cst.ClassDef, simple_name: str) -> bool:
    """True iff a direct member of node is named simple_name."""
    return simple_name in member_names(node)
