"""Recipe table construction.

Compiles the recipe catalogue into an immutable table mapping code points to
Recipes. Every command is translated up front, so a malformed catalogue
fails here rather than when a glyph is first drawn.
"""

import re
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from functools import cache
from types import MappingProxyType

import structlog

from boxdraw.core.catalogue import RECIPES
from boxdraw.core.emitter import CommandTemplate
from boxdraw.core.translator import ExpressionTranslator
from boxdraw.exceptions import (
    CodePointError,
    DuplicateRecipeError,
    GlyphNotFoundError,
    RecipeBuildError,
    TranslationError,
)

MAX_CODE_POINT = 0x10FFFF
HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")

logger = structlog.get_logger(__name__)

Catalogue = Iterable[tuple[str, str, Sequence[str]]] | Mapping[tuple[str, str], Sequence[str]]


@dataclass(frozen=True)
class Recipe:
    """Compiled drawing instructions for one code point.

    Attributes:
        code_point: Unicode scalar value
        name: Glyph name from the catalogue
        commands: Templates drawn in order, later over earlier
    """

    code_point: int
    name: str
    commands: tuple[CommandTemplate, ...]

    @property
    def char(self) -> str:
        return chr(self.code_point)

    @property
    def label(self) -> str:
        """Code point in U+XXXX notation."""
        return f"U+{self.code_point:04X}"


class RecipeTable(Mapping[int, Recipe]):
    """Read-only mapping of code point to Recipe.

    Lookup of an absent code point raises GlyphNotFoundError; membership
    tests never raise.
    """

    def __init__(self, recipes: Mapping[int, Recipe]) -> None:
        self._recipes = MappingProxyType(dict(sorted(recipes.items())))

    def __getitem__(self, code_point: int) -> Recipe:
        try:
            return self._recipes[code_point]
        except KeyError:
            raise GlyphNotFoundError(code_point) from None

    def __contains__(self, code_point: object) -> bool:
        return code_point in self._recipes

    def get(self, code_point: int, default: Recipe | None = None) -> Recipe | None:  # type: ignore[override]
        return self._recipes.get(code_point, default)

    def __iter__(self) -> Iterator[int]:
        return iter(self._recipes)

    def __len__(self) -> int:
        return len(self._recipes)

    def __repr__(self) -> str:
        return f"RecipeTable({len(self)} recipes)"


def parse_code_point(value: str) -> int:
    """Parse a hexadecimal code point literal such as "2500".

    Only bare hex digits are accepted: no prefix, sign, underscores or
    surrounding whitespace.

    Raises:
        CodePointError: If the literal is not hex or is out of range
    """
    if not value:
        raise CodePointError(value, "empty literal")
    if HEX_DIGITS.fullmatch(value) is None:
        raise CodePointError(value, "not a hexadecimal number")
    code_point = int(value, 16)
    if code_point < 0 or code_point > MAX_CODE_POINT:
        raise CodePointError(value, f"outside 0..{MAX_CODE_POINT:X}")
    return code_point


def _entries(catalogue: Catalogue) -> Iterator[tuple[str, str, Sequence[str]]]:
    if isinstance(catalogue, Mapping):
        for (name, code), commands in catalogue.items():
            yield name, code, commands
    else:
        yield from catalogue


def build_recipe_table(
    catalogue: Catalogue = RECIPES,
    translator: ExpressionTranslator | None = None,
) -> RecipeTable:
    """Compile a catalogue into a RecipeTable.

    Args:
        catalogue: (name, hex code, commands) entries, or a mapping keyed by
            (name, hex code)
        translator: Translator to use (a fresh one if None)

    Returns:
        Table holding one Recipe per catalogue entry

    Raises:
        CodePointError: If an entry's code literal is malformed
        DuplicateRecipeError: If two entries share a code point
        RecipeBuildError: If any command fails to translate
    """
    translator = translator or ExpressionTranslator()
    recipes: dict[int, Recipe] = {}
    command_count = 0

    for name, code, sources in _entries(catalogue):
        code_point = parse_code_point(code)
        if code_point in recipes:
            raise DuplicateRecipeError(code_point, recipes[code_point].name, name)

        templates = []
        for source in sources:
            try:
                templates.append(translator.translate_command(source))
            except TranslationError as e:
                raise RecipeBuildError(code_point, name, source, e) from e

        logger.debug("Recipe compiled", code_point=f"U+{code_point:04X}", name=name)
        recipes[code_point] = Recipe(code_point, name, tuple(templates))
        command_count += len(templates)

    logger.info("Recipe table built", recipes=len(recipes), commands=command_count)
    return RecipeTable(recipes)


@cache
def default_recipe_table() -> RecipeTable:
    """Get the table for the bundled catalogue, compiled once per process."""
    return build_recipe_table(RECIPES)
