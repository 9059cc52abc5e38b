"""Pydantic result models returned by the recipe runner."""

from pydantic import BaseModel


class RecipeRunResult(BaseModel):
    """Outcome of running a recipe over one file.

    Attributes:
        success: False if the file could not be read or parsed
        changed: True if the recipe modified the file's source
        module_name: Dotted module name the file was parsed under
        modified_source: Source after the recipe ran (None on failure)
        diff: Unified diff between original and modified source
        written: True if the modified source was written back to disk
        parse_error: Error message if reading or parsing failed
    """

    success: bool
    changed: bool
    module_name: str = ""
    modified_source: str | None = None
    diff: str = ""
    written: bool = False
    parse_error: str | None = None
