"""Member templates with positional #{} placeholders.

Instantiation is a two-stage pipeline:
1. substitute: pure text substitution, raising ArityError on a count mismatch
2. parse: the substituted text goes through the same parser as whole
   compilation units, raising TemplateError if it is not a single member

Only stage 2 can raise TemplateError, so a parse failure always points at
the substituted text rather than at argument handling.
"""

from __future__ import annotations

from dataclasses import dataclass

import libcst as cst
import libcst.matchers as m

from sayhello.cst.core import parse_source
from sayhello.recipe.errors import ArityError, TemplateError

PLACEHOLDER = "#{}"

# Statements that may appear as a direct class member.
_MEMBER = m.FunctionDef() | m.SimpleStatementLine(
    body=[m.OneOf(m.Assign(), m.AnnAssign())]
)


@dataclass(frozen=True)
class InsertionPoint:
    """Where a fragment will be spliced.

    Attributes:
        identity: Fully-qualified identity of the target declaration
        config: Parser config of the enclosing module. Once spliced, the
            fragment renders with that module's indentation and newlines
    """

    identity: str
    config: cst.PartialParserConfig | None = None

    @classmethod
    def last_member_of(cls, identity: str, module: cst.Module) -> InsertionPoint:
        """Insertion point after the last member of a class in module."""
        return cls(identity=identity, config=module.config_for_parsing)


@dataclass(frozen=True)
class MemberTemplate:
    """A member declaration template, built once and instantiated per target.

    Example:
        >>> template = MemberTemplate("x = #{}\\n")
        >>> template.substitute(1)
        'x = 1\\n'
    """

    source: str

    @property
    def placeholder_count(self) -> int:
        return self.source.count(PLACEHOLDER)

    def substitute(self, *args: object) -> str:
        """Replace each placeholder, in order, with str() of an argument.

        Raises:
            ArityError: If len(args) differs from the number of placeholders
        """
        if len(args) != self.placeholder_count:
            raise ArityError(self.source, self.placeholder_count, len(args))
        pieces = self.source.split(PLACEHOLDER)
        text = pieces[0]
        for arg, piece in zip(args, pieces[1:]):
            text += str(arg) + piece
        return text

    def instantiate(
        self, insertion_point: InsertionPoint, *args: object
    ) -> cst.BaseStatement:
        """Substitute args and parse the result into a detached member.

        Raises:
            ArityError: Before parsing, on an argument count mismatch
            TemplateError: If the text is not exactly one class member
        """
        text = self.substitute(*args)
        return parse_member(text, insertion_point)


def parse_member(text: str, insertion_point: InsertionPoint) -> cst.BaseStatement:
    """Parse text as a single class member statement.

    Raises:
        TemplateError: If the text does not parse, holds more or fewer than
            one statement, or the statement cannot be a class member
    """
    try:
        module = parse_source(text, insertion_point.config)
    except cst.ParserSyntaxError as e:
        raise TemplateError(
            text, insertion_point.identity, f"syntax error: {e.message}"
        ) from e

    if len(module.body) != 1:
        raise TemplateError(
            text,
            insertion_point.identity,
            f"expected one statement, found {len(module.body)}",
        )
    statement = module.body[0]
    if not m.matches(statement, _MEMBER):
        raise TemplateError(
            text,
            insertion_point.identity,
            f"{type(statement).__name__} is not a class member",
        )
    return statement


def instantiate(
    template_source: str, insertion_point: InsertionPoint, *args: object
) -> cst.BaseStatement:
    """Instantiate template_source at insertion_point with positional args."""
    return MemberTemplate(template_source).instantiate(insertion_point, *args)
