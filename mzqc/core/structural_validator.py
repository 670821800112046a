import json
import logging
import os
import threading
from typing import Any, List, Optional

from mzqc.core.exceptions import DocumentIOError, ParseError, SchemaError
from mzqc.core.validator import (
    AnyOfKeysValidator, RequiredKeysValidator, RootPresentValidator, ValidationError, Validator,
)

logger = logging.getLogger(__name__)


def default_validators() -> List[Validator]:
    return [
        RootPresentValidator(),
        RequiredKeysValidator(
            fields=['version', 'creationDate'],
            message="missing required properties in mzQC object"),
        AnyOfKeysValidator(
            fields=['runQualities', 'setQualities'],
            message="either runQualities or setQualities must be present"),
        RequiredKeysValidator(
            fields=['controlledVocabularies'],
            message="controlledVocabularies must be present"),
    ]


class StructuralValidator:
    """
    Presence-only checks for an mzQC wire document.

    This is NOT JSON-schema conformance: types, enumerations and metric
    values are never inspected. Rules run in order and the first rule that
    reports errors stops the run.

    An optional schema file is read on first use and kept on this instance
    until ``invalidate`` or ``reload`` is called.
    """

    def __init__(self, schema_path: Optional[str] = None, validators: Optional[List[Validator]] = None):
        self.schema_path = schema_path
        self.validators = validators if validators is not None else default_validators()
        self._schema = None
        self._lock = threading.Lock()

    @property
    def schema(self) -> Optional[dict]:
        if self.schema_path is None:
            return None
        with self._lock:
            if self._schema is None:
                self._schema = self._read_schema()
            return self._schema

    def _read_schema(self) -> Any:
        path = os.path.expanduser(self.schema_path)
        try:
            with open(path, 'r', encoding='utf-8') as schema_file:
                schema = json.load(schema_file)
        except OSError as err:
            raise DocumentIOError(f"Failed to open schema file: {self.schema_path}", path=self.schema_path) from err
        except (json.JSONDecodeError, UnicodeDecodeError) as err:
            raise ParseError(f"Error loading schema file {self.schema_path}: {err}") from err
        logger.debug(f"schema loaded from {self.schema_path}")
        return schema

    def invalidate(self):
        with self._lock:
            self._schema = None

    def reload(self) -> Optional[dict]:
        self.invalidate()
        return self.schema

    def check(self, data: Any) -> List[ValidationError]:
        # reading the schema surfaces a missing or broken schema file
        _ = self.schema
        for validator in self.validators:
            errors = validator.validate(data)
            if errors:
                return errors
        return []

    def validate(self, data: Any):
        errors = self.check(data)
        if not errors:
            return
        fields = ", ".join(e.field for e in errors)
        reason = f"{errors[0].message} ({fields})"
        logger.warning(f"Schema validation error: {reason}")
        raise SchemaError(reason, errors)

    def is_valid(self, data: Any) -> bool:
        try:
            self.validate(data)
        except SchemaError:
            return False
        return True
