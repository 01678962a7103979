"""Parameter bag handling: normalization, whitelisting and required-key checks.

A parameter bag is a plain dict. After normalize() every key is a str,
so the filter and required-key checks compare on one representation.
"""

from collections.abc import Iterable, Mapping
from enum import Enum

from loguru import logger

from .errors import InvalidParameterError, MissingRequiredParameterError

SCALAR_TYPES = (str, bool, int, type(None))


def normalize(params: Mapping | None) -> dict:
    """Return a copy of params with every key converted to str.

    Nested mappings, including mappings inside lists, are normalized too.
    Values are left as they are. When two keys convert to the same str,
    the last one wins.
    """
    if not params:
        return {}
    result = {}
    for key, value in params.items():
        name = _canonical_key(key)
        if name in result:
            logger.debug(f"Duplicate parameter '{name}' after normalization, keeping the last value")
        result[name] = _normalize_value(value)
    return result


def filter_keys(valid_keys: Iterable[str], params: Mapping) -> dict:
    """Keep only the keys listed in valid_keys. Unknown keys are dropped."""
    allowed = set(valid_keys)
    kept = {key: value for key, value in params.items() if key in allowed}
    dropped = [key for key in params if key not in allowed]
    if dropped:
        logger.debug(f"Dropping unsupported parameters: {', '.join(map(str, dropped))}")
    return kept


def assert_required_keys(required_keys: Iterable[str], params: Mapping) -> None:
    """Raise MissingRequiredParameterError for the first required key not in params."""
    for key in required_keys:
        if key not in params:
            raise MissingRequiredParameterError(key)


def validate_values(params: Mapping) -> None:
    """Check that every value is a str, bool, int, None, list of str or nested bag."""
    for key, value in params.items():
        if isinstance(value, SCALAR_TYPES):
            continue
        if isinstance(value, Mapping):
            validate_values(value)
            continue
        if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
            continue
        raise InvalidParameterError(key, value)


def _canonical_key(key) -> str:
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, bytes):
        return key.decode("utf-8")
    return key if isinstance(key, str) else str(key)


def _normalize_value(value):
    if isinstance(value, Mapping):
        return normalize(value)
    if isinstance(value, list):
        return [_normalize_value(v) for v in value]
    if isinstance(value, tuple):
        return tuple(_normalize_value(v) for v in value)
    return value
