"""The Say Hello recipe and its building blocks.

Provides:
- matcher: declaration_identity, matches, member_names, already_has_member
- template: MemberTemplate, InsertionPoint, instantiate
- splicer: with_appended_member
- say_hello: SayHelloRecipe, SayHelloTransformer
- errors: RecipeError, ArityError, TemplateError
"""

from sayhello.recipe.errors import ArityError, RecipeError, TemplateError
from sayhello.recipe.matcher import (
    already_has_member,
    declaration_identity,
    matches,
    member_names,
)
from sayhello.recipe.say_hello import (
    HELLO_TEMPLATE,
    RecipeOption,
    SayHelloRecipe,
    SayHelloTransformer,
)
from sayhello.recipe.splicer import with_appended_member
from sayhello.recipe.template import InsertionPoint, MemberTemplate, instantiate

__all__ = [
    "ArityError",
    "HELLO_TEMPLATE",
    "InsertionPoint",
    "MemberTemplate",
    "RecipeError",
    "RecipeOption",
    "SayHelloRecipe",
    "SayHelloTransformer",
    "TemplateError",
    "already_has_member",
    "declaration_identity",
    "instantiate",
    "matches",
    "member_names",
    "with_appended_member",
]
