from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

SQLTypeName = Literal[
    "CHAR",
    "VARCHAR",
    "TIMESTAMP",
    "DATE",
    "INTEGER",
    "BIGINT",
    "FLOAT",
    "REAL",
    "DECIMAL",
    "DOUBLE",
    "TINYINT",
    "SMALLINT",
    "BOOLEAN",
    "OTHER",
]

SQL_TYPES: tuple[SQLTypeName, ...] = (
    "CHAR",
    "VARCHAR",
    "TIMESTAMP",
    "DATE",
    "INTEGER",
    "BIGINT",
    "FLOAT",
    "REAL",
    "DECIMAL",
    "DOUBLE",
    "TINYINT",
    "SMALLINT",
    "BOOLEAN",
    "OTHER",
)


@dataclass(frozen=True)
class SQLParameter:
    type: SQLTypeName
    value: Any

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "value": self.value}


# string types
def CHAR(value: str) -> SQLParameter:  # noqa: N802
    return SQLParameter("CHAR", value)


def VARCHAR(value: str) -> SQLParameter:  # noqa: N802
    return SQLParameter("VARCHAR", value)


def TIMESTAMP(value: str) -> SQLParameter:  # noqa: N802
    return SQLParameter("TIMESTAMP", value)


def DATE(value: str) -> SQLParameter:  # noqa: N802
    return SQLParameter("DATE", value)


# numeric types
def INTEGER(value: int) -> SQLParameter:  # noqa: N802
    return SQLParameter("INTEGER", value)


def BIGINT(value: int) -> SQLParameter:  # noqa: N802
    return SQLParameter("BIGINT", value)


def FLOAT(value: float) -> SQLParameter:  # noqa: N802
    return SQLParameter("FLOAT", value)


def REAL(value: float) -> SQLParameter:  # noqa: N802
    return SQLParameter("REAL", value)


def DECIMAL(value: float) -> SQLParameter:  # noqa: N802
    return SQLParameter("DECIMAL", value)


def DOUBLE(value: float) -> SQLParameter:  # noqa: N802
    return SQLParameter("DOUBLE", value)


def TINYINT(value: int) -> SQLParameter:  # noqa: N802
    return SQLParameter("TINYINT", value)


def SMALLINT(value: int) -> SQLParameter:  # noqa: N802
    return SQLParameter("SMALLINT", value)


def BOOLEAN(value: bool) -> SQLParameter:  # noqa: N802, FBT001
    return SQLParameter("BOOLEAN", value)


def OTHER(value: Any) -> SQLParameter:  # noqa: N802
    return SQLParameter("OTHER", value)


def is_sql_parameter(obj: object) -> bool:
    """Structural check: anything carrying both a ``type`` and a ``value``."""
    if isinstance(obj, SQLParameter):
        return True
    if isinstance(obj, Mapping):
        return "type" in obj and "value" in obj
    if isinstance(obj, (str, bytes, type)):
        return False
    return hasattr(obj, "type") and hasattr(obj, "value")


def parameter_to_dict(obj: Any) -> dict[str, Any]:
    match obj:
        case SQLParameter():
            return obj.to_dict()
        case Mapping():
            return dict(obj)
        case _:
            return {"type": obj.type, "value": obj.value}
