"""
Name resolver for Go identifiers and enum constants.

Sanitizes arbitrary strings into valid Go identifiers, converts schema
names to type names, and derives collision-free constant names for enums.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ...utils import DEFAULT_NAMING, NamingTransform, type_name_prefix

# Go reserved keywords
GO_KEYWORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)

# Predeclared identifiers: types, constants, zero value and builtin functions
GO_PREDECLARED_IDENTIFIERS = frozenset(
    {
        "bool",
        "byte",
        "complex64",
        "complex128",
        "error",
        "float32",
        "float64",
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "rune",
        "string",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "uintptr",
        "true",
        "false",
        "iota",
        "nil",
        "append",
        "cap",
        "close",
        "complex",
        "copy",
        "delete",
        "imag",
        "len",
        "make",
        "new",
        "panic",
        "print",
        "println",
        "real",
        "recover",
    }
)

# Literal characters that mark a multi-word enum value
_MULTI_WORD_MARKERS = frozenset("_- ")

# Constant identifier used for the empty-string enum literal
EMPTY_ENUM_IDENTIFIER = "Empty"


class IdentifierSanitizer:
    """Turns arbitrary strings into valid Go identifiers."""

    def __init__(
        self,
        reserved_words: Iterable[str] = GO_KEYWORDS,
        predeclared: Iterable[str] = GO_PREDECLARED_IDENTIFIERS,
    ):
        """
        Initialize the sanitizer.

        Args:
            reserved_words: Language keywords
            predeclared: Predeclared names that must not be shadowed
        """
        self.reserved_words = frozenset(reserved_words)
        self.predeclared = frozenset(predeclared)

    @staticmethod
    def _is_identifier_char(char: str) -> bool:
        return char.isalpha() or char.isdecimal() or char == "_"

    def is_reserved(self, name: str) -> bool:
        return name in self.reserved_words or name in self.predeclared

    def is_valid(self, name: str) -> bool:
        """Whether ``name`` can be used as a type or constant name as-is."""
        if not name or name[0].isdecimal():
            return False
        if not all(self._is_identifier_char(char) for char in name):
            return False
        return not self.is_reserved(name)

    def sanitize(self, name: str) -> str:
        """
        Replace illegal characters so ``name`` becomes a valid identifier.

        Invalid characters become underscores; names starting with a digit,
        and names colliding with a keyword or predeclared identifier, get a
        leading underscore.
        """
        sanitized = "".join(char if self._is_identifier_char(char) else "_" for char in name)
        if sanitized and sanitized[0].isdecimal():
            sanitized = "_" + sanitized
        if self.is_reserved(sanitized):
            sanitized = "_" + sanitized
        return sanitized


class NameResolver:
    """Resolves Go type names and enum constant identifiers."""

    def __init__(
        self,
        naming: NamingTransform | None = None,
        sanitizer: IdentifierSanitizer | None = None,
    ):
        self.naming = naming or DEFAULT_NAMING
        self.sanitizer = sanitizer or IdentifierSanitizer()

    def type_name(self, schema_name: str) -> str:
        """Convert a schema name into a sanitized PascalCase type name."""
        return self.sanitizer.sanitize(self.naming.schema_name_to_type_name(schema_name))

    def promoted_type_name(self, path: Sequence[str]) -> str:
        """
        Name a nested type after the property path that reaches it.

        The prefix of the owning schema name is kept, so the nested name
        starts the same way as the owning type name ("1st-place" gives
        "N1stPlace", its "labels" property gives "N1stPlace_Labels").
        """
        if not path:
            return ""
        return self.sanitizer.sanitize(type_name_prefix(path[0]) + self.naming.path_to_type_name(path))

    def enum_identifier(self, literal: str) -> str:
        """Convert a single enum literal into a candidate identifier."""
        if literal == "":
            return EMPTY_ENUM_IDENTIFIER
        return self.sanitizer.sanitize(self.naming.schema_name_to_enum_value_name(literal))

    def sanitize_enum_names(self, literals: Sequence[str]) -> dict[str, str]:
        """
        Derive unique identifiers for a list of enum literals.

        Exact duplicate literals are dropped (first occurrence wins). When any
        literal contains a word separator, all literals are lower-cased before
        conversion so single- and multi-word members are named consistently.
        A literal whose identifier is already taken gets a numeric suffix equal
        to the number of earlier literals that produced the same identifier.

        Args:
            literals: Stringified enum values, in document order

        Returns:
            Mapping from identifier to the original literal, in input order
        """
        unique = list(dict.fromkeys(literals))
        multi_word = any(_MULTI_WORD_MARKERS.intersection(literal) for literal in unique)

        result: dict[str, str] = {}
        seen: dict[str, int] = {}
        for literal in unique:
            identifier = self.enum_identifier(literal.lower() if multi_word else literal)
            count = seen.get(identifier, 0)
            seen[identifier] = count + 1

            candidate = f"{identifier}{count}" if count else identifier
            while candidate in result:
                count += 1
                candidate = f"{identifier}{count}"
            result[candidate] = literal

        return result


DEFAULT_NAME_RESOLVER = NameResolver()


def sanitize_go_identity(name: str) -> str:
    return DEFAULT_NAME_RESOLVER.sanitizer.sanitize(name)


def sanitize_enum_names(literals: Sequence[str]) -> dict[str, str]:
    return DEFAULT_NAME_RESOLVER.sanitize_enum_names(literals)
