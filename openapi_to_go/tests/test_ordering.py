#!/usr/bin/env python3

import pytest

from openapi_to_go.pipeline.analyzer.ordering import key_sort_order, sort_keys, sorted_keys


class TestOrdering:
    """Test canonical key ordering"""

    def test_id_first_and_timestamps_last(self):
        keys = ["name", "created_at", "id", "age", "updated_at"]
        assert sort_keys(keys) == ["id", "age", "name", "created_at", "updated_at"]

    def test_timestamps_after_plain_keys(self):
        assert sort_keys(["id", "created_at", "name", "updated_at"]) == ["id", "name", "created_at", "updated_at"]

    def test_id_is_case_insensitive(self):
        assert sort_keys(["b", "ID"]) == ["ID", "b"]

    def test_code_point_order(self):
        assert sort_keys(["b", "B", "a"]) == ["B", "a", "b"]

    def test_independent_of_input_order(self):
        keys = ["x_at", "id", "b", "a"]
        assert sort_keys(keys) == sort_keys(reversed(keys))

    def test_sorted_keys_of_mapping(self):
        assert sorted_keys({"b": 1, "a": 2}) == ["a", "b"]
        assert sorted_keys(None) == []
        assert sorted_keys({}) == []

    def test_sort_groups(self):
        assert key_sort_order("Id")[0] == 0
        assert key_sort_order("name")[0] == 1
        assert key_sort_order("deleted_at")[0] == 2


if __name__ == "__main__":
    pytest.main([__file__])
