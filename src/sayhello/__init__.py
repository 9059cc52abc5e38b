"""sayhello: an idempotent LibCST recipe that adds hello() to a class.

This package provides:
- LibCST parsing utilities and the CompilationUnit wrapper
- The Say Hello recipe (matcher, template engine, splicer, transformer)
- A file runner with unified diff output, and a Typer CLI
- Before/after assertions for recipe tests
"""

from sayhello.cst import CompilationUnit, load_unit, parse_unit
from sayhello.recipe import (
    ArityError,
    RecipeError,
    SayHelloRecipe,
    TemplateError,
)
from sayhello.runner import run_recipe

__all__ = [
    # Parsing
    "CompilationUnit",
    "load_unit",
    "parse_unit",
    # Recipe
    "ArityError",
    "RecipeError",
    "SayHelloRecipe",
    "TemplateError",
    # Runner
    "run_recipe",
]
__version__ = "0.1.0"
