from unittest import TestCase

from openapi_to_go.pipeline.analyzer.name_resolver import (
    IdentifierSanitizer,
    NameResolver,
    sanitize_enum_names,
    sanitize_go_identity,
)


class TestIdentifierSanitizer(TestCase):
    """Test conversion of arbitrary strings into Go identifiers"""

    def setUp(self):
        self.sanitizer = IdentifierSanitizer()

    def test_replaces_invalid_characters(self):
        self.assertEqual(self.sanitizer.sanitize("my-name"), "my_name")
        self.assertEqual(self.sanitizer.sanitize("a.b c"), "a_b_c")

    def test_leading_digit(self):
        self.assertEqual(self.sanitizer.sanitize("2fast"), "_2fast")

    def test_keywords_and_predeclared(self):
        self.assertEqual(self.sanitizer.sanitize("type"), "_type")
        self.assertEqual(self.sanitizer.sanitize("string"), "_string")
        self.assertEqual(sanitize_go_identity("nil"), "_nil")

    def test_is_valid(self):
        self.assertTrue(self.sanitizer.is_valid("Foo"))
        self.assertFalse(self.sanitizer.is_valid("1a"))
        self.assertFalse(self.sanitizer.is_valid("map"))
        self.assertFalse(self.sanitizer.is_valid("a-b"))
        self.assertFalse(self.sanitizer.is_valid(""))

    def test_custom_reserved_words(self):
        sanitizer = IdentifierSanitizer(reserved_words=["Model"], predeclared=[])
        self.assertEqual(sanitizer.sanitize("Model"), "_Model")
        self.assertEqual(sanitizer.sanitize("string"), "string")


class TestEnumNames(TestCase):
    """Test derivation of enum constant identifiers"""

    def test_distinct_values(self):
        self.assertEqual(sanitize_enum_names(["red", "green"]), {"Red": "red", "Green": "green"})

    def test_duplicates_dropped(self):
        self.assertEqual(sanitize_enum_names(["red", "green", "red"]), {"Red": "red", "Green": "green"})

    def test_collisions_get_suffixes(self):
        result = sanitize_enum_names(["a-b", "a_b", "A B"])
        self.assertEqual(result, {"AB": "a-b", "AB1": "a_b", "AB2": "A B"})

    def test_suffix_skips_taken_names(self):
        result = sanitize_enum_names(["a", "A", "a1"])
        self.assertEqual(result, {"A": "a", "A1": "A", "A11": "a1"})

    def test_empty_literal(self):
        self.assertEqual(sanitize_enum_names(["", "x"]), {"Empty": "", "X": "x"})

    def test_mixed_words_lower_cased(self):
        self.assertEqual(sanitize_enum_names(["A", "a-b", "c"]), {"A": "A", "AB": "a-b", "C": "c"})

    def test_exact_duplicate(self):
        self.assertEqual(sanitize_enum_names(["x", "x"]), {"X": "x"})

    def test_order_preserved(self):
        self.assertEqual(list(sanitize_enum_names(["zeta", "alpha"])), ["Zeta", "Alpha"])


class TestTypeNames(TestCase):
    """Test schema name to type name resolution"""

    def test_type_name(self):
        resolver = NameResolver()
        self.assertEqual(resolver.type_name("pet-store"), "PetStore")
        self.assertEqual(resolver.type_name("1st"), "N1st")

    def test_promoted_type_name(self):
        resolver = NameResolver()
        self.assertEqual(resolver.promoted_type_name(["Pet", "labels"]), "Pet_Labels")
        self.assertEqual(resolver.promoted_type_name(["1st-place", "labels"]), "N1stPlace_Labels")
        self.assertEqual(resolver.promoted_type_name(["-x", "labels"]), "MinusX_Labels")
