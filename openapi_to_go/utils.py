"""
Naming utilities for the Go type model.

Case conversion, initialism normalization and type-name synthesis shared by
the schema compiler and the Go renderer.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

# Characters that start a new word during case conversion
WORD_SEPARATORS = frozenset("-#@!$&=.+:;_~ (){}[]")

# Known initialisms, in their canonical spelling
COMMON_INITIALISMS: tuple[str, ...] = (
    "ACL",
    "API",
    "ASCII",
    "CPU",
    "CSS",
    "DNS",
    "EOF",
    "GUID",
    "HTML",
    "HTTP",
    "HTTPS",
    "ID",
    "IP",
    "JSON",
    "LHS",
    "QPS",
    "RAM",
    "RHS",
    "RPC",
    "SLA",
    "SMTP",
    "SQL",
    "SSH",
    "TCP",
    "TLS",
    "TTL",
    "UDP",
    "UI",
    "UID",
    "UUID",
    "URI",
    "URL",
    "UTF8",
    "VM",
    "XML",
    "XMPP",
    "XSRF",
    "XSS",
    "OAuth",
    "OFAC",
    "NASA",
    "USD",
    "EUR",
    "BTC",
    "ETH",
    "PDF",
    "PDF417",
    "SSN",
    "SMS",
)

# Words spelled out when a name starts with a symbol
_PREFIX_WORDS = {
    "-": "Minus",
    "+": "Plus",
    "&": "And",
    "~": "Tilde",
    "=": "Equal",
    "#": "Hash",
    ".": "Dot",
}


def type_name_prefix(name: str) -> str:
    """Return the prefix needed to make ``name`` start with a letter.

    Examples:
        "-1" -> "Minus"
        "+=x" -> "PlusEqual"
        "1st" -> "N"
        "$" -> "DollarSign"
        "name" -> ""
    """
    prefix = ""
    for char in name:
        if char == "$":
            if len(name) == 1:
                return "DollarSign"
            continue
        if char in _PREFIX_WORDS:
            prefix += _PREFIX_WORDS[char]
            continue
        if not prefix and char.isdecimal():
            return "N"
        return prefix
    return prefix


class NamingTransform:
    """Converts arbitrary schema strings to Go-style names.

    The initialism table is fixed at construction so that independent
    compilations never share mutable lookup state.
    """

    def __init__(self, initialisms: Iterable[str] = COMMON_INITIALISMS):
        self.initialisms = tuple(dict.fromkeys(initialisms))
        # "Id" only matches when not followed by a lower-case letter, so
        # "Identity" is never rewritten.
        self._initialism_patterns = tuple((re.compile(re.escape(word.capitalize()) + r"(?![a-z])"), word) for word in self.initialisms)

    def to_pascal_case(self, text: str) -> str:
        """Convert query-arg style strings to PascalCase.

        Examples:
            "word.word-word+word" -> "WordWordWordWord"
            "user_id" -> "UserID"
            "api_url" -> "APIURL"
        """
        return self._to_camel_or_pascal_case(text, cap_first=True)

    def to_camel_case(self, text: str) -> str:
        """Convert query-arg style strings to camelCase ("user_name" -> "userName")."""
        return self._to_camel_or_pascal_case(text, cap_first=False)

    def _to_camel_or_pascal_case(self, text: str, cap_first: bool) -> str:
        result = []
        cap_next = cap_first
        for char in text.strip(" "):
            if char.isupper() or char.isdecimal():
                result.append(char)
            elif char.islower():
                result.append(char.upper() if cap_next else char)
            cap_next = char in WORD_SEPARATORS
        return self.fix_initialisms("".join(result))

    def fix_initialisms(self, text: str) -> str:
        for pattern, word in self._initialism_patterns:
            text = pattern.sub(word, text)
        return text

    def schema_name_to_type_name(self, name: str) -> str:
        """Convert a schema name to a Go type name."""
        return type_name_prefix(name) + self.to_pascal_case(name)

    def schema_name_to_enum_value_name(self, name: str) -> str:
        """Convert an enum literal (or constant path) to a Go constant name."""
        return type_name_prefix(name) + self.to_pascal_case(name.replace("_", "-"))

    def path_to_type_name(self, path: Sequence[str]) -> str:
        """Convert a property path like ["Object", "field1", "nested"] into "Object_Field1_Nested"."""
        return "_".join(self.to_pascal_case(part) for part in path)


DEFAULT_NAMING = NamingTransform()


def to_pascal_case(text: str) -> str:
    return DEFAULT_NAMING.to_pascal_case(text)


def to_camel_case(text: str) -> str:
    return DEFAULT_NAMING.to_camel_case(text)


def schema_name_to_type_name(name: str) -> str:
    return DEFAULT_NAMING.schema_name_to_type_name(name)


def schema_name_to_enum_value_name(name: str) -> str:
    return DEFAULT_NAMING.schema_name_to_enum_value_name(name)


def path_to_type_name(path: Sequence[str]) -> str:
    return DEFAULT_NAMING.path_to_type_name(path)


def string_to_go_comment(text: str) -> str:
    """Render a possibly multi-line string as a Go comment block.

    Blank input gives an empty string. A trailing newline does not produce a
    dangling empty comment line.
    """
    if not text or not text.strip():
        return ""

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    comment = "\n".join(f"// {line}" for line in text.split("\n"))
    return comment.removesuffix("\n// ")
