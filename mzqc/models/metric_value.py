import json
from dataclasses import dataclass
from typing import Any, Dict, List, Union

from mzqc.core.exceptions import ParseError
from mzqc.interfaces.simple_enum import ValueKind


def _shell(obj: Any) -> "MetricValue":
    """Scalar value, or a list/object value whose children are not filled in yet."""
    if isinstance(obj, MetricValue):
        return obj
    if obj is None:
        return MetricValue(kind=ValueKind.Null)
    # bool before int, bool is an int subclass
    if isinstance(obj, bool):
        return MetricValue(kind=ValueKind.Boolean, data=obj)
    if isinstance(obj, int):
        return MetricValue(kind=ValueKind.Integer, data=obj)
    if isinstance(obj, float):
        return MetricValue(kind=ValueKind.Float, data=obj)
    if isinstance(obj, str):
        return MetricValue(kind=ValueKind.String, data=obj)
    if isinstance(obj, (list, tuple)):
        return MetricValue(kind=ValueKind.List, data=[])
    if isinstance(obj, dict):
        return MetricValue(kind=ValueKind.Object, data={})
    raise TypeError(f"Cannot convert {type(obj).__name__} into a metric value")


def _is_container(obj: Any) -> bool:
    return isinstance(obj, (list, tuple, dict))


@dataclass(frozen=True, eq=False)
class MetricValue:
    """Open-shape metric payload.

    Wraps a JSON value together with its kind so that structural equality can
    tell an integer from a float or a boolean. List and object payloads hold
    MetricValue children; objects keep their key order. Conversion and
    comparison walk the tree with an explicit stack, so nesting depth is not
    limited by the interpreter's recursion limit.
    """
    kind: ValueKind
    data: Any = None

    @staticmethod
    def null():
        return MetricValue(kind=ValueKind.Null)

    @staticmethod
    def of(obj: Any):
        if isinstance(obj, MetricValue):
            return obj
        return MetricValue.from_json(obj)

    @staticmethod
    def from_json(obj: Any):
        root = _shell(obj)
        stack = [(obj, root)] if _is_container(obj) else []
        while stack:
            source, target = stack.pop()
            if isinstance(source, dict):
                for key, item in source.items():
                    if not isinstance(key, str):
                        raise TypeError(f"object keys must be strings, got {key!r}")
                    child = _shell(item)
                    target.data[key] = child
                    if _is_container(item):
                        stack.append((item, child))
            else:
                for item in source:
                    child = _shell(item)
                    target.data.append(child)
                    if _is_container(item):
                        stack.append((item, child))
        return root

    def to_json(self) -> Union[None, bool, int, float, str, List, Dict[str, Any]]:
        def plain(value: "MetricValue"):
            if value.kind == ValueKind.List:
                return []
            if value.kind == ValueKind.Object:
                return {}
            return value.data

        root = plain(self)
        stack = [(self, root)] if self.kind in (ValueKind.List, ValueKind.Object) else []
        while stack:
            source, target = stack.pop()
            if source.kind == ValueKind.Object:
                pairs = source.data.items()
            else:
                pairs = enumerate(source.data)
            for key, item in pairs:
                child = plain(item)
                if source.kind == ValueKind.Object:
                    target[key] = child
                else:
                    target.append(child)
                if item.kind in (ValueKind.List, ValueKind.Object):
                    stack.append((item, child))
        return root

    @property
    def is_null(self) -> bool:
        return self.kind == ValueKind.Null

    def __eq__(self, other):
        if not isinstance(other, MetricValue):
            return False
        stack = [(self, other)]
        while stack:
            left, right = stack.pop()
            if left.kind != right.kind:
                return False
            if left.kind == ValueKind.Object:
                if list(left.data.keys()) != list(right.data.keys()):
                    return False
                stack.extend((left.data[key], right.data[key]) for key in left.data)
            elif left.kind == ValueKind.List:
                if len(left.data) != len(right.data):
                    return False
                stack.extend(zip(left.data, right.data))
            elif left.data != right.data:
                return False
        return True

    def __hash__(self):
        return hash((self.kind, encode_value(self)))

    def __repr__(self):
        return f"MetricValue({self.kind.value}, {self.to_json()!r})"


def encode_value(value: MetricValue) -> str:
    try:
        return json.dumps(MetricValue.of(value).to_json())
    except RecursionError as err:
        raise ParseError("Metric value is nested too deeply to encode") from err


def decode_value(fragment: Union[str, bytes]) -> MetricValue:
    try:
        obj = json.loads(fragment)
    except (json.JSONDecodeError, UnicodeDecodeError) as err:
        raise ParseError(f"Malformed metric value: {err}") from err
    except RecursionError as err:
        raise ParseError("Metric value is nested too deeply to decode") from err
    return MetricValue.from_json(obj)
