"""Copy-on-write splicing of a member into a class body."""

from __future__ import annotations

import libcst as cst


def _spaced(
    fragment: cst.BaseStatement, footer: tuple[cst.EmptyLine, ...] = ()
) -> cst.BaseStatement:
    # The block footer stays above the new member, followed by one blank line.
    if fragment.leading_lines:
        return fragment.with_changes(
            leading_lines=[*footer, *fragment.leading_lines]
        )
    leading = list(footer)
    if not leading or leading[-1].comment is not None:
        leading.append(cst.EmptyLine(indent=False))
    return fragment.with_changes(leading_lines=leading)


def with_appended_member(
    node: cst.ClassDef, fragment: cst.BaseStatement
) -> cst.ClassDef:
    """Return a copy of node with fragment appended to its body.

    The input node is never modified. A one-line body such as
    ``class A: pass`` is promoted to an indented block holding the original
    statements followed by the fragment. Trailing comments of the body stay
    in place, above the fragment.

    Args:
        node: Class declaration to extend
        fragment: Detached member statement, e.g. from MemberTemplate

    Returns:
        New ClassDef whose members are node's members plus fragment
    """
    body = node.body
    if isinstance(body, cst.SimpleStatementSuite):
        block = cst.IndentedBlock(
            header=body.trailing_whitespace,
            body=[cst.SimpleStatementLine(body=body.body), _spaced(fragment)],
        )
        return node.with_changes(body=block)

    if body.body:
        fragment = _spaced(fragment, tuple(body.footer))
    return node.with_changes(
        body=body.with_changes(body=[*body.body, fragment], footer=())
    )
