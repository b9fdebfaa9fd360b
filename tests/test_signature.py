"""Tests for app.services.signature.structural_signature."""

from app.services.signature import structural_signature


class TestPrimitiveSignatures:
    def test_type_families(self):
        assert structural_signature(None) == "null"
        assert structural_signature(True) == "boolean"
        assert structural_signature(3) == "number"
        assert structural_signature(2.5) == "number"
        assert structural_signature("hi") == "string"

    def test_content_is_ignored(self):
        assert structural_signature("a") == structural_signature("completely different")
        assert structural_signature(0) == structural_signature(-1.75)

    def test_bool_is_not_a_number(self):
        assert structural_signature(False) != structural_signature(0)

    def test_null_is_not_an_object(self):
        assert structural_signature(None) != structural_signature({})


class TestArraySignatures:
    def test_element_signatures_in_order(self):
        assert structural_signature([1, "a", None]) == "array<number|string|null>"

    def test_empty_array(self):
        assert structural_signature([]) == "array<>"

    def test_element_order_matters_regardless_of_flag(self):
        assert structural_signature([1, "a"]) != structural_signature(["a", 1])
        assert structural_signature([1, "a"], True) != structural_signature(["a", 1], True)

    def test_length_matters(self):
        assert structural_signature([1]) != structural_signature([1, 2])

    def test_nested_arrays(self):
        assert structural_signature([[1], []]) == "array<array<number>|array<>>"

    def test_mixed_types(self):
        value = [{"a": 1}, [True], "x"]
        assert structural_signature(value) == 'array<{"a":number}|array<boolean>|string>'


class TestObjectSignatures:
    def test_keys_sorted_by_default(self):
        assert structural_signature({"b": 1, "a": "x"}) == '{"a":string,"b":number}'

    def test_key_order_ignored_by_default(self):
        assert structural_signature({"a": 1, "b": 2}) == structural_signature({"b": 2, "a": 1})

    def test_key_order_matters_when_preserved(self):
        first = structural_signature({"a": 1, "b": 2}, preserve_order=True)
        second = structural_signature({"b": 2, "a": 1}, preserve_order=True)
        assert first != second
        assert first == '{"a":number,"b":number}'

    def test_different_key_sets(self):
        assert structural_signature({"id": 1}) != structural_signature({"id": 1, "email": "x"})

    def test_nested_value_types_matter(self):
        assert structural_signature({"id": 1}) != structural_signature({"id": "1"})

    def test_nested_objects(self):
        value = {"user": {"name": "A", "tags": ["x"]}}
        assert structural_signature(value) == '{"user":{"name":string,"tags":array<string>}}'

    def test_empty_object(self):
        assert structural_signature({}) == "{}"

    def test_delimiters_in_keys_cannot_collide(self):
        # Unquoted keys would render both of these as {a:number,b:number}
        one_key = {"a:number,b": 1}
        two_keys = {"a": 1, "b": 1}
        assert structural_signature(one_key) != structural_signature(two_keys)

    def test_quote_in_key_is_escaped(self):
        assert structural_signature({'a"': 1}) == '{"a\\"":number}'

    def test_does_not_reorder_input(self):
        value = {"b": 1, "a": 2}
        structural_signature(value)
        assert list(value) == ["b", "a"]
