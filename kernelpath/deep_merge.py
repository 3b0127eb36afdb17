"""Logic for deep merging configuration dictionaries."""

from typing import Any

# Keys whose mappings are keyed by drive letter, merged case-insensitively.
DRIVE_KEYED = frozenset({"drive_directories"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Drive-keyed objects treat `c` and `C` as the same key.
    - Everything else in 'update' replaces 'base'.
    """
    result = base.copy()
    for key, value in update.items():
        if key in DRIVE_KEYED and isinstance(value, dict):
            merged = {str(k).upper(): v for k, v in (result.get(key) or {}).items()}
            merged.update({str(k).upper(): v for k, v in value.items()})
            result[key] = merged
        elif key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
