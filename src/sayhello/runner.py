"""Run the Say Hello recipe over a file on disk.

This is the outer runner around the pure recipe: it reads the file, derives
the module name, applies the recipe, renders a unified diff and optionally
writes the result back. Read and parse failures become a RecipeRunResult
with parse_error set; template errors propagate.
"""

from __future__ import annotations

import difflib
import logging
from pathlib import Path

import libcst as cst

from sayhello.cst.core import load_unit
from sayhello.models import RecipeRunResult
from sayhello.recipe.say_hello import SayHelloRecipe

logger = logging.getLogger(__name__)


def module_name_for_path(path: Path, root: Path | None = None) -> str:
    """Derive a dotted module name from a file path.

    Args:
        path: Python source file
        root: Source root the module name is relative to. Defaults to the
            file's own directory, giving just the module stem.

    Returns:
        Dotted module name, e.g. "com.yourorg.a" for com/yourorg/a.py under
        root. A package's __init__.py maps to the package name.

    Raises:
        ValueError: If path is not inside root
    """
    path = path.resolve()
    root = path.parent if root is None else root.resolve()
    parts = list(path.relative_to(root).with_suffix("").parts)
    if parts and parts[-1] == "__init__":
        parts.pop()
    return ".".join(parts)


def unified_diff(before: str, after: str, path: str) -> str:
    """Unified diff of before/after source, labelled a/path and b/path."""
    return "".join(
        difflib.unified_diff(
            before.splitlines(keepends=True),
            after.splitlines(keepends=True),
            fromfile=f"a/{path}",
            tofile=f"b/{path}",
        )
    )


def run_recipe(
    file_path: str,
    target: str,
    module_name: str | None = None,
    root: str | None = None,
    write: bool = False,
) -> RecipeRunResult:
    """Apply SayHelloRecipe(target) to a Python file.

    Args:
        file_path: Path to the Python file to transform
        target: Fully-qualified name of the class to add hello() to
        module_name: Dotted module name of the file. Derived from the path
            relative to root when omitted.
        root: Source root used to derive the module name
        write: Write the modified source back to file_path if it changed

    Returns:
        RecipeRunResult with changed flag, modified_source and diff

    Raises:
        ArityError, TemplateError: If the recipe's template is broken
    """
    path = Path(file_path)
    try:
        if module_name is None:
            module_name = module_name_for_path(
                path, Path(root) if root is not None else None
            )
        unit = load_unit(file_path, module_name=module_name)
    except (OSError, ValueError, cst.ParserSyntaxError) as e:
        logger.error("Could not load %s: %s", file_path, e)
        return RecipeRunResult(
            success=False,
            changed=False,
            module_name=module_name or "",
            parse_error=str(e),
        )

    recipe = SayHelloRecipe(fully_qualified_class_name=target)
    result = recipe.apply(unit)
    changed = result is not unit
    logger.info(
        "%s on %s (%s): %s",
        recipe.display_name,
        file_path,
        module_name,
        "changed" if changed else "unchanged",
    )

    if changed and write:
        path.write_bytes(result.module.bytes)
        logger.info("Wrote %s", file_path)

    return RecipeRunResult(
        success=True,
        changed=changed,
        module_name=module_name,
        modified_source=result.code,
        diff=unified_diff(unit.code, result.code, file_path) if changed else "",
        written=changed and write,
    )
