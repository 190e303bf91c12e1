"""Tests for recipe table construction."""

import pytest

from boxdraw.core.emitter import CommandTemplate
from boxdraw.core.recipes import (
    Recipe,
    RecipeTable,
    build_recipe_table,
    default_recipe_table,
    parse_code_point,
)
from boxdraw.exceptions import (
    ArgumentValueError,
    CodePointError,
    DuplicateRecipeError,
    GlyphNotFoundError,
    RecipeBuildError,
    UnknownConstantError,
)

SMALL_CATALOGUE = (
    ("lighthorzbxd", "2500", ("horBar(boxPen)",)),
    (
        "lightdnrightbxd",
        "250C",
        ('horHalfBar(boxPen, "right", buttL=STROKE)', 'vertHalfBar(boxPen, "bottom")'),
    ),
)


@pytest.fixture
def table() -> RecipeTable:
    """Build a table from a two-entry catalogue."""
    return build_recipe_table(SMALL_CATALOGUE)


class TestParseCodePoint:
    """Tests for code point literals."""

    @pytest.mark.parametrize(
        "literal,expected",
        [("2500", 0x2500), ("259f", 0x259F), ("41", 0x41), ("10FFFF", 0x10FFFF), ("0", 0)],
    )
    def test_valid(self, literal: str, expected: int) -> None:
        assert parse_code_point(literal) == expected

    @pytest.mark.parametrize(
        "literal",
        ["", "ZZZZ", "25 00", "110000", "-1", "0x", "25_00", "0x2500", "+2500", " 2500"],
    )
    def test_invalid(self, literal: str) -> None:
        with pytest.raises(CodePointError):
            parse_code_point(literal)


class TestBuildRecipeTable:
    """Tests for build_recipe_table."""

    def test_builds_one_recipe_per_entry(self, table: RecipeTable) -> None:
        """Every entry compiles to a Recipe keyed by code point."""
        assert len(table) == 2
        recipe = table[0x250C]
        assert isinstance(recipe, Recipe)
        assert recipe.name == "lightdnrightbxd"
        assert len(recipe.commands) == 2
        assert all(isinstance(t, CommandTemplate) for t in recipe.commands)

    def test_recipe_labels(self, table: RecipeTable) -> None:
        recipe = table[0x2500]
        assert recipe.label == "U+2500"
        assert recipe.char == "─"

    def test_mapping_catalogue(self) -> None:
        """A mapping keyed by (name, code) is accepted too."""
        catalogue = {(name, code): commands for name, code, commands in SMALL_CATALOGUE}
        assert sorted(build_recipe_table(catalogue)) == [0x2500, 0x250C]

    def test_iteration_is_sorted(self) -> None:
        reversed_catalogue = tuple(reversed(SMALL_CATALOGUE))
        assert list(build_recipe_table(reversed_catalogue)) == [0x2500, 0x250C]

    def test_duplicate_code_point(self) -> None:
        """Two entries for one code point abort the build."""
        catalogue = SMALL_CATALOGUE + (("again", "2500", ("horBar(boxPen, FAT)",)),)
        with pytest.raises(DuplicateRecipeError) as exc_info:
            build_recipe_table(catalogue)
        assert exc_info.value.code_point == 0x2500
        assert exc_info.value.first == "lighthorzbxd"
        assert exc_info.value.second == "again"

    def test_bad_code_point(self) -> None:
        with pytest.raises(CodePointError):
            build_recipe_table((("bad", "XYZ", ("horBar(boxPen)",)),))

    def test_translation_failure_is_wrapped(self) -> None:
        """Translation errors name the code point, recipe and source."""
        source = "horBar(boxPen, FOO)"
        with pytest.raises(RecipeBuildError) as exc_info:
            build_recipe_table((("broken", "2501", (source,)),))

        error = exc_info.value
        assert error.code_point == 0x2501
        assert error.name == "broken"
        assert error.source == source
        assert isinstance(error.cause, UnknownConstantError)
        assert error.__cause__ is error.cause
        assert "U+2501" in str(error)

    def test_zero_dash_step_rejected(self) -> None:
        """A dash count of zero fails the build instead of the drawing."""
        with pytest.raises(RecipeBuildError) as exc_info:
            build_recipe_table((("nodash", "2504", ("dashedHorLine(boxPen, 0)",)),))
        assert isinstance(exc_info.value.cause, ArgumentValueError)

    def test_empty_catalogue(self) -> None:
        assert len(build_recipe_table(())) == 0


class TestRecipeTable:
    """Tests for RecipeTable lookups."""

    def test_missing_lookup_raises(self, table: RecipeTable) -> None:
        """Absent code points raise GlyphNotFoundError."""
        with pytest.raises(GlyphNotFoundError) as exc_info:
            table[0x41]
        assert exc_info.value.code_point == 0x41
        assert "U+0041" in str(exc_info.value)

    def test_non_integer_lookup_raises(self, table: RecipeTable) -> None:
        """A string key is reported as missing, not as a formatting failure."""
        with pytest.raises(GlyphNotFoundError) as exc_info:
            table["2500"]  # type: ignore[index]
        assert exc_info.value.code_point == "2500"
        assert "'2500'" in str(exc_info.value)

    def test_membership_never_raises(self, table: RecipeTable) -> None:
        assert 0x2500 in table
        assert 0x41 not in table
        assert "2500" not in table

    def test_get_returns_default(self, table: RecipeTable) -> None:
        """Mapping.get still works despite the custom miss error."""
        assert table.get(0x41) is None

    def test_read_only(self, table: RecipeTable) -> None:
        with pytest.raises(TypeError):
            table[0x41] = table[0x2500]  # type: ignore[index]

    def test_recipes_are_hashable(self, table: RecipeTable) -> None:
        """Recipes and their templates can be used as set members and keys."""
        rebuilt = build_recipe_table(SMALL_CATALOGUE)
        assert hash(table[0x250C]) == hash(rebuilt[0x250C])
        assert len({table[0x2500], rebuilt[0x2500], table[0x250C]}) == 2


class TestDefaultRecipeTable:
    """Tests for the bundled catalogue table."""

    def test_cached(self) -> None:
        assert default_recipe_table() is default_recipe_table()

    def test_covers_both_blocks(self) -> None:
        assert len(default_recipe_table()) == 160
