from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional

from mzqc.constants import ROOT_KEY
from mzqc.interfaces.simple_enum import Severity


@dataclass
class ValidationError:
    severity: str        # "error" | "warning"
    entity: str          # e.g. "mzQC", "runQualities"
    field: str           # e.g. "version", "creationDate"
    message: str


class Validator(ABC):
    """A presence rule over a wire document, i.e. the decoded JSON dict."""

    def __init__(self, entity: str, field: str, message: str,
                 severity: str = Severity.Error.value):
        self.entity = entity
        self.field = field
        self.message = message
        self.severity = severity

    def _make_error(self, field: Optional[str] = None) -> ValidationError:
        return ValidationError(
            severity=self.severity,
            entity=self.entity,
            field=field or self.field,
            message=self.message,
        )

    def _entity_obj(self, data: Any) -> Optional[dict]:
        if not isinstance(data, dict):
            return None
        if self.entity == ROOT_KEY:
            obj = data.get(ROOT_KEY)
            return obj if isinstance(obj, dict) else None
        return data

    @abstractmethod
    def validate(self, data: Any) -> List[ValidationError]:
        raise NotImplementedError


class RootPresentValidator(Validator):
    def __init__(self, message: str = f"missing root '{ROOT_KEY}' object"):
        super().__init__(entity=ROOT_KEY, field=ROOT_KEY, message=message)

    def validate(self, data: Any) -> List[ValidationError]:
        if self._entity_obj(data) is None:
            return [self._make_error()]
        return []


class RequiredKeysValidator(Validator):
    """Every key in ``fields`` must be present; values are not inspected."""

    def __init__(self, fields: List[str], message: str, entity: str = ROOT_KEY):
        super().__init__(entity=entity, field=", ".join(fields), message=message)
        self.fields = fields

    def validate(self, data: Any) -> List[ValidationError]:
        entity_obj = self._entity_obj(data)
        if entity_obj is None:
            return [self._make_error()]
        return [self._make_error(field=f) for f in self.fields if f not in entity_obj]


class AnyOfKeysValidator(Validator):
    """At least one key in ``fields`` must be present."""

    def __init__(self, fields: List[str], message: str, entity: str = ROOT_KEY):
        super().__init__(entity=entity, field=" | ".join(fields), message=message)
        self.fields = fields

    def validate(self, data: Any) -> List[ValidationError]:
        entity_obj = self._entity_obj(data)
        if entity_obj is None:
            return [self._make_error()]
        if any(f in entity_obj for f in self.fields):
            return []
        return [self._make_error()]
