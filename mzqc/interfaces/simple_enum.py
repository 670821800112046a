from enum import Enum


class SimpleEnum(str, Enum):
    def __str__(self):
        return self.value


class ValueKind(SimpleEnum):
    Null = "null"
    Boolean = "boolean"
    Integer = "integer"
    Float = "float"
    String = "string"
    List = "list"
    Object = "object"


class Severity(SimpleEnum):
    Error = "error"
    Warning = "warning"
