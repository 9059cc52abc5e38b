"""The "Say Hello" recipe: add a hello() method to one class.

The recipe targets a single class by fully-qualified identity. If that class
has no member named ``hello``, a method returning "Hello from <identity>!"
is appended to its body. Running the recipe on its own output is a no-op.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import libcst as cst

from sayhello.cst.core import CompilationUnit
from sayhello.recipe.matcher import (
    LOCALS,
    already_has_member,
    declaration_identity,
    matches,
)
from sayhello.recipe.splicer import with_appended_member
from sayhello.recipe.template import InsertionPoint, MemberTemplate

logger = logging.getLogger(__name__)

HELLO_METHOD_NAME = "hello"

HELLO_TEMPLATE = MemberTemplate(
    'def hello(self) -> str:\n    return "Hello from #{}!"\n'
)


@dataclass(frozen=True)
class RecipeOption:
    """Describes one configurable option of a recipe."""

    name: str
    display_name: str
    description: str
    example: str


@dataclass(frozen=True)
class SayHelloRecipe:
    """Adds a hello() method to the class named by fully_qualified_class_name.

    Attributes:
        fully_qualified_class_name: Identity of the target class, e.g.
            "com.yourorg.FooBar" for class FooBar in module com.yourorg
    """

    fully_qualified_class_name: str

    display_name = "Say Hello"
    description = 'Adds a "hello" method to the specified class'

    @staticmethod
    def options() -> list[RecipeOption]:
        return [
            RecipeOption(
                name="fully_qualified_class_name",
                display_name="Fully Qualified Class Name",
                description=(
                    "A fully-qualified class name indicating which class "
                    "to add a hello() method."
                ),
                example="com.yourorg.FooBar",
            )
        ]

    def visit_declaration(
        self,
        node: cst.ClassDef,
        identity: str | None,
        config: cst.PartialParserConfig | None = None,
    ) -> cst.ClassDef:
        """Transform a single class declaration.

        Returns node itself when it is not the target or already has a
        hello member, otherwise a new node with the method appended.

        Raises:
            ArityError, TemplateError: If the hello template is broken
        """
        if not matches(identity, self.fully_qualified_class_name):
            return node
        if already_has_member(node, HELLO_METHOD_NAME):
            logger.debug("%s already has %s()", identity, HELLO_METHOD_NAME)
            return node

        target = self.fully_qualified_class_name
        fragment = HELLO_TEMPLATE.instantiate(
            InsertionPoint(identity=target, config=config), target
        )
        logger.debug("Adding %s() to %s", HELLO_METHOD_NAME, identity)
        return with_appended_member(node, fragment)

    def get_visitor(self, unit: CompilationUnit) -> SayHelloTransformer:
        return SayHelloTransformer(
            self, unit.module_name, unit.module.config_for_parsing
        )

    def apply(self, unit: CompilationUnit) -> CompilationUnit:
        """Run the recipe over a compilation unit.

        Returns:
            unit itself when nothing changed, otherwise a new unit whose
            module differs only in the target class

        Raises:
            ArityError, TemplateError: If the hello template is broken
        """
        if not self.fully_qualified_class_name:
            logger.warning(
                "Empty target class name; leaving %s unchanged",
                unit.module_name or "unit",
            )
            return unit

        transformer = self.get_visitor(unit)
        new_module = unit.module.visit(transformer)

        if transformer.match_count > 1:
            logger.warning(
                "%s matches %d classes in %s; leaving it unchanged",
                self.fully_qualified_class_name,
                transformer.match_count,
                unit.module_name or "unit",
            )
            return unit
        if not transformer.changed:
            return unit
        return unit.with_module(new_module)


class SayHelloTransformer(cst.CSTTransformer):
    """CSTTransformer that tracks class scope and applies SayHelloRecipe.

    Classes are transformed on leave, after their nested classes.
    """

    def __init__(
        self,
        recipe: SayHelloRecipe,
        module_name: str,
        config: cst.PartialParserConfig | None = None,
    ) -> None:
        super().__init__()
        self.recipe = recipe
        self.module_name = module_name
        self.config = config
        self.match_count = 0
        self.changed = False
        self._scope: list[str] = []

    def visit_ClassDef(self, node: cst.ClassDef) -> bool | None:
        self._scope.append(node.name.value)
        return None

    def leave_ClassDef(
        self, original_node: cst.ClassDef, updated_node: cst.ClassDef
    ) -> cst.ClassDef:
        identity = declaration_identity(self.module_name, self._scope)
        self._scope.pop()
        if matches(identity, self.recipe.fully_qualified_class_name):
            self.match_count += 1
        result = self.recipe.visit_declaration(updated_node, identity, self.config)
        if result is not updated_node:
            self.changed = True
        return result

    def visit_FunctionDef(self, node: cst.FunctionDef) -> bool | None:
        self._scope.append(LOCALS)
        return None

    def leave_FunctionDef(
        self, original_node: cst.FunctionDef, updated_node: cst.FunctionDef
    ) -> cst.FunctionDef:
        self._scope.pop()
        return updated_node
