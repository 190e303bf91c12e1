"""Exception hierarchy for boxdraw."""


class BoxDrawError(Exception):
    """Base exception for all boxdraw errors."""

    pass


class RecipeError(BoxDrawError):
    """Errors raised while compiling the recipe catalogue."""

    pass


class TranslationError(RecipeError):
    """A recipe expression lies outside the supported grammar.

    Attributes:
        source: Recipe source text, when known
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        if source is not None:
            message = f"{message} in '{source}'"
        super().__init__(message)


class RecipeSyntaxError(TranslationError):
    """Recipe source is not a valid expression."""

    def __init__(self, source: str, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid recipe syntax ({reason})", source)


class UnsupportedExpressionError(TranslationError):
    """Expression shape not supported by the recipe grammar."""

    def __init__(self, construct: str, source: str | None = None) -> None:
        self.construct = construct
        super().__init__(f"Unsupported expression: {construct}", source)


class UnknownConstantError(TranslationError):
    """Identifier not present in the constant table."""

    def __init__(self, name: str, source: str | None = None) -> None:
        self.name = name
        super().__init__(f"Unknown constant '{name}'", source)


class UnknownStringError(TranslationError):
    """String literal not present in the string table."""

    def __init__(self, value: str, source: str | None = None) -> None:
        self.value = value
        super().__init__(f"Unknown string literal '{value}'", source)


class UnknownKeywordError(TranslationError):
    """Keyword argument not recognized for a primitive."""

    def __init__(self, keyword: str, primitive: str, source: str | None = None) -> None:
        self.keyword = keyword
        self.primitive = primitive
        super().__init__(f"Unknown keyword '{keyword}' for {primitive}", source)


class UnknownPrimitiveError(TranslationError):
    """Call target is not a known drawing primitive."""

    def __init__(self, name: str, source: str | None = None) -> None:
        self.name = name
        super().__init__(f"Unknown primitive '{name}'", source)


class TupleArityError(TranslationError):
    """Tuple literal is not a 2-tuple."""

    def __init__(self, arity: int, source: str | None = None) -> None:
        self.arity = arity
        super().__init__(f"Tuples must have 2 elements, got {arity}", source)


class SubscriptError(TranslationError):
    """Subscript is not NAME[0] or NAME[1]."""

    def __init__(self, reason: str, source: str | None = None) -> None:
        self.reason = reason
        super().__init__(f"Invalid subscript: {reason}", source)


class ArgumentTypeError(TranslationError):
    """Argument value does not match the field's type."""

    def __init__(
        self, primitive: str, field_name: str, expected: str, got: str, source: str | None = None
    ) -> None:
        self.primitive = primitive
        self.field_name = field_name
        self.expected = expected
        self.got = got
        super().__init__(
            f"{primitive}.{field_name} expects {expected}, got {got}", source
        )


class ArgumentValueError(TranslationError):
    """Argument value is outside the range its field accepts."""

    def __init__(
        self, primitive: str, field_name: str, reason: str, source: str | None = None
    ) -> None:
        self.primitive = primitive
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"{primitive}.{field_name} {reason}", source)


class TooManyArgumentsError(TranslationError):
    """More positional arguments than the primitive declares fields."""

    def __init__(self, primitive: str, given: int, allowed: int) -> None:
        self.primitive = primitive
        self.given = given
        self.allowed = allowed
        super().__init__(
            f"{primitive} takes at most {allowed} positional arguments, got {given}"
        )


class MissingArgumentError(TranslationError):
    """Required field was never set."""

    def __init__(self, primitive: str, field_name: str) -> None:
        self.primitive = primitive
        self.field_name = field_name
        super().__init__(f"{primitive} requires '{field_name}'")


class DuplicateArgumentError(TranslationError):
    """Same field set twice in one call."""

    def __init__(self, primitive: str, field_name: str) -> None:
        self.primitive = primitive
        self.field_name = field_name
        super().__init__(f"{primitive} got multiple values for '{field_name}'")


class CodePointError(RecipeError):
    """Malformed code point literal in the catalogue."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid code point '{value}': {reason}")


class DuplicateRecipeError(RecipeError):
    """Two catalogue entries share a code point."""

    def __init__(self, code_point: int, first: str, second: str) -> None:
        self.code_point = code_point
        self.first = first
        self.second = second
        super().__init__(
            f"Duplicate recipe for U+{code_point:04X}: '{first}' and '{second}'"
        )


class RecipeBuildError(RecipeError):
    """Translation of one catalogue entry failed."""

    def __init__(self, code_point: int, name: str, source: str, cause: Exception) -> None:
        self.code_point = code_point
        self.name = name
        self.source = source
        self.cause = cause
        super().__init__(
            f"Failed to compile recipe U+{code_point:04X} '{name}' ({source}): {cause}"
        )


class GlyphError(BoxDrawError):
    """Errors related to glyph lookup."""

    pass


class GlyphNotFoundError(GlyphError):
    """Requested code point has no recipe."""

    def __init__(self, code_point: object) -> None:
        self.code_point = code_point
        label = f"U+{code_point:04X}" if isinstance(code_point, int) else repr(code_point)
        super().__init__(f"No recipe for code point {label}")
