"""
Field Readers

Typed accessors for values in parsed storefront JSON. Every decoder goes
through these so shape errors surface as MalformedDataError with the
offending key in the message.
"""

from typing import Any, Dict, List, Optional

from ..errors import MalformedDataError


def require_object(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise MalformedDataError(f"{what}: expected a JSON object, got {type(data).__name__}")
    return data


def get_str(data: Dict[str, Any], key: str, default: Optional[str] = "") -> Optional[str]:
    """String value; numbers are converted, None/missing gives the default."""
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, (dict, list)):
        raise MalformedDataError(f"{key}: expected a string, got {type(value).__name__}")
    return str(value)


def get_int(data: Dict[str, Any], key: str, default: Optional[int] = None) -> Optional[int]:
    value = data.get(key)
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise MalformedDataError(f"{key}: expected an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise MalformedDataError(f"{key}: expected an integer, got {value!r}")


def get_bool(data: Dict[str, Any], key: str, default: Optional[bool] = False) -> Optional[bool]:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise MalformedDataError(f"{key}: expected true/false, got {value!r}")
    return value


def get_list(data: Dict[str, Any], key: str) -> List[Any]:
    """List value; None/missing gives an empty list."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedDataError(f"{key}: expected a list, got {type(value).__name__}")
    return value


def get_int_list(data: Dict[str, Any], key: str) -> List[int]:
    result = []
    for value in get_list(data, key):
        if isinstance(value, bool):
            raise MalformedDataError(f"{key}: expected integers, got {value!r}")
        try:
            result.append(int(value))
        except (TypeError, ValueError):
            raise MalformedDataError(f"{key}: expected integers, got {value!r}")
    return result
