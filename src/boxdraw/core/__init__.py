"""Core recipe compiler and drawing engine.

Recipes are compiled once from the catalogue: the translator turns each
expression into a typed tree, the emitter binds it to a command type, and
the table builder collects the results per code point. At draw time the
Font resolves the templates against its Metrics and the DrawingEngine
turns the commands into canvas calls.

Key classes:
- ExpressionTranslator / CommandEmitter: Recipe expression compiler
- RecipeTable: Read-only code point to Recipe mapping
- DrawingEngine: Command executor
- Font: Facade for lookup and drawing
"""

from boxdraw.core.emitter import CommandEmitter, CommandTemplate
from boxdraw.core.engine import DrawingEngine, range_step
from boxdraw.core.font import Font
from boxdraw.core.recipes import (
    Recipe,
    RecipeTable,
    build_recipe_table,
    default_recipe_table,
    parse_code_point,
)
from boxdraw.core.translator import ExpressionTranslator

__all__ = [
    "CommandEmitter",
    "CommandTemplate",
    "DrawingEngine",
    "ExpressionTranslator",
    "Font",
    "Recipe",
    "RecipeTable",
    "build_recipe_table",
    "default_recipe_table",
    "parse_code_point",
    "range_step",
]
