import json
from datetime import datetime, timezone
from typing import Any, Callable, List

from mzqc.constants import ISO_TIME_FORMAT
from mzqc.core.exceptions import ParseError


def current_iso_time() -> str:
    return datetime.now(timezone.utc).strftime(ISO_TIME_FORMAT)


def is_empty(value: Any) -> bool:
    return value is None or value == "" or value == [] or value == {}


def put_if_present(ret_dict: dict, key: str, value: Any):
    """
    Set ``ret_dict[key]`` only when ``value`` is non-empty.

    Empty strings, ``None`` and empty lists are left out of the output
    instead of being written as empty or null values.
    """
    if not is_empty(value):
        ret_dict[key] = value


def list_value(data: dict, key: str) -> list:
    value = data.get(key)
    if isinstance(value, list):
        return value
    return []


def refill(target: list, data: dict, key: str, factory: Callable[[dict], Any]) -> List:
    """
    Clear ``target`` in place and append ``factory(item)`` for every object
    in ``data[key]``. A list entry that is not an object raises ParseError.
    """
    target.clear()
    for index, item in enumerate(list_value(data, key)):
        if not isinstance(item, dict):
            raise ParseError(f"'{key}[{index}]' must be a JSON object, got {type(item).__name__}")
        target.append(factory(item))
    return target


def as_text(value: Any) -> str:
    """JSON text of a non-string value, so ``true`` stays ``"true"``."""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def str_value(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return as_text(value)


def str_list_value(data: dict, key: str) -> List[str]:
    return [as_text(item) for item in list_value(data, key) if item is not None]
