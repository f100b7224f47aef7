from typing import Any, Dict, Iterable, Mapping, Optional


def only_request_fields(patch: Optional[Mapping[str, Any]], fields: Iterable[str]) -> Dict[str, Any]:
    """
    Keep only the whitelisted keys of an update payload.

    Keys outside ``fields`` are dropped silently; the caller decides whether an
    empty result is an error.
    """
    if not patch:
        return {}
    return {field: patch[field] for field in fields if field in patch}


def merge_fields(target: Any, patch: Mapping[str, Any], allowed_keys: Iterable[str]) -> Any:
    """
    Copy ``patch`` values onto ``target`` for every allowed key.

    A falsy value (None, "", 0, False) never overwrites the stored attribute,
    so this path cannot be used to clear a field.

    Returns the target for chaining.
    """
    for key in allowed_keys:
        if key not in patch or not hasattr(target, key):
            continue
        value = patch[key]
        if value:
            setattr(target, key, value)
    return target
