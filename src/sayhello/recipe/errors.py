"""Error types raised while instantiating recipe templates.

Matching never raises. Only template instantiation does, and always before
any splice, so callers never see a partially modified tree.
"""

from __future__ import annotations

__all__ = ["ArityError", "RecipeError", "TemplateError"]


class RecipeError(Exception):
    """Base class for recipe misconfiguration errors."""


class ArityError(RecipeError):
    """Raised when template arguments do not match its placeholders.

    Attributes:
        template_source: The template text before substitution
        expected: Number of placeholders in the template
        actual: Number of arguments supplied
    """

    def __init__(self, template_source: str, expected: int, actual: int):
        self.template_source = template_source
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Template expects {expected} argument(s) but got {actual}: "
            f"{template_source!r}"
        )


class TemplateError(RecipeError):
    """Raised when substituted template text is not a valid class member.

    Attributes:
        template_text: The template text after substitution
        identity: Fully-qualified identity of the target declaration
        reason: What was wrong with the text
    """

    def __init__(self, template_text: str, identity: str, reason: str):
        self.template_text = template_text
        self.identity = identity
        self.reason = reason
        super().__init__(
            f"Template for {identity} is not a valid member ({reason}): "
            f"{template_text!r}"
        )
