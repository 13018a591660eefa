import copy
from typing import Any, Dict, Mapping, Optional


def merge_params(
    base: Optional[Mapping[str, Any]], override: Optional[Mapping[str, Any]]
) -> Dict[str, Any]:
    """Deep-merge two parameter mappings.

    Values from ``override`` win on conflicts, except that two lists under
    the same key are concatenated (``base`` items first) and two mappings
    under the same key are merged recursively. Neither input is modified.

    Examples:
        >>> merge_params({"a": 1}, {"a": 2})
        {'a': 2}
        >>> merge_params({"tags": ["x"]}, {"tags": ["y"]})
        {'tags': ['x', 'y']}
        >>> merge_params({"f": {"a": 1, "b": 2}}, {"f": {"b": 3}})
        {'f': {'a': 1, 'b': 3}}
    """
    merged: Dict[str, Any] = copy.deepcopy(dict(base or {}))
    for key, value in (override or {}).items():
        current = merged.get(key)
        if isinstance(value, list) and isinstance(current, list):
            merged[key] = current + copy.deepcopy(value)
        elif isinstance(value, Mapping) and isinstance(current, Mapping):
            merged[key] = merge_params(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged
