"""Testing utilities for recipes.

Provides before/after assertions for recipe tests.
"""

from .recipe_test import assert_changed, assert_unchanged

__all__ = ["assert_changed", "assert_unchanged"]
