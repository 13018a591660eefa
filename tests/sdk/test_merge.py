import pytest

from hatstall import merge_params


class TestMergeParams:
    def test_empty_default_returns_caller(self):
        caller = {"a": 1, "tags": ["x"], "f": {"b": 2}}

        assert merge_params({}, caller) == caller

    def test_empty_caller_returns_default(self):
        default = {"a": 1, "tags": ["x"], "f": {"b": 2}}

        assert merge_params(default, {}) == default

    def test_none_is_treated_as_empty(self):
        assert merge_params(None, {"a": 1}) == {"a": 1}
        assert merge_params({"a": 1}, None) == {"a": 1}

    def test_caller_wins_on_scalars(self):
        assert merge_params({"a": 1}, {"a": 2}) == {"a": 2}

    def test_lists_concatenate_default_first(self):
        assert merge_params({"tags": ["x"]}, {"tags": ["y"]}) == {"tags": ["x", "y"]}

    def test_mappings_merge_recursively(self):
        assert merge_params({"f": {"a": 1, "b": 2}}, {"f": {"b": 3}}) == {
            "f": {"a": 1, "b": 3}
        }

    def test_deeply_nested_merge(self):
        default = {"f": {"g": {"tags": ["x"], "keep": True}}}
        caller = {"f": {"g": {"tags": ["y"], "new": 1}}}

        assert merge_params(default, caller) == {
            "f": {"g": {"tags": ["x", "y"], "keep": True, "new": 1}}
        }

    @pytest.mark.parametrize(
        "default, caller, expected",
        [
            ({"a": [1]}, {"a": 2}, {"a": 2}),
            ({"a": 1}, {"a": [2]}, {"a": [2]}),
            ({"a": {"b": 1}}, {"a": "flat"}, {"a": "flat"}),
            ({"a": "flat"}, {"a": {"b": 1}}, {"a": {"b": 1}}),
            ({"a": [1]}, {"a": {"b": 1}}, {"a": {"b": 1}}),
        ],
    )
    def test_mismatched_types_caller_wins(self, default, caller, expected):
        assert merge_params(default, caller) == expected

    def test_inputs_are_not_mutated(self):
        default = {"tags": ["x"], "f": {"a": 1}}
        caller = {"tags": ["y"], "f": {"b": 2}}

        merged = merge_params(default, caller)
        merged["tags"].append("z")
        merged["f"]["c"] = 3

        assert default == {"tags": ["x"], "f": {"a": 1}}
        assert caller == {"tags": ["y"], "f": {"b": 2}}
