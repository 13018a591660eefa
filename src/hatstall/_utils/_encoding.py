import json
from typing import Any, Dict, Mapping, Tuple


def _flatten(value: Any) -> Any:
    if isinstance(value, Mapping):
        return json.dumps(value)
    if isinstance(value, (list, tuple)):
        return [
            json.dumps(item) if isinstance(item, Mapping) else item for item in value
        ]
    return value


def encode_query(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Prepare merged params for an httpx query string.

    Lists become repeated keys and nested mappings are JSON-encoded, since a
    query string has no native representation for them.
    """
    return {key: _flatten(value) for key, value in params.items()}


def _is_content(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray)) or callable(
        getattr(value, "read", None)
    )


def _is_file(value: Any) -> bool:
    # (filename, content[, content_type])
    if isinstance(value, tuple):
        return (
            len(value) in (2, 3)
            and isinstance(value[0], str)
            and _is_content(value[1])
        )
    return _is_content(value)


def split_multipart(
    params: Mapping[str, Any],
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Split params into plain form fields and file parts.

    ``bytes``, ``bytearray``, binary file objects and ``(filename, content)``
    or ``(filename, content, content_type)`` tuples whose content is bytes or
    a file object become file parts; every other value, other tuples
    included, is sent as a form field.
    """
    data: Dict[str, Any] = {}
    files: Dict[str, Any] = {}
    for key, value in params.items():
        if _is_file(value):
            files[key] = bytes(value) if isinstance(value, bytearray) else value
        else:
            data[key] = _flatten(value)
    return data, files
