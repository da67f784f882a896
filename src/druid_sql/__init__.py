from ._compose import OMIT, InlineSQL, SQLQuery, inline, sql
from ._errors import (
    InvalidFunctionResultError,
    InvalidSubstitutionError,
    SQLCompositionError,
    TemplateShapeError,
)
from ._literal import is_sql_literal, render_literal
from ._request import (
    SQLQueryContext,
    SQLQueryOptions,
    build_request_body,
    is_sql_query,
    sql_request,
)
from ._types import (
    BIGINT,
    BOOLEAN,
    CHAR,
    DATE,
    DECIMAL,
    DOUBLE,
    FLOAT,
    INTEGER,
    OTHER,
    REAL,
    SMALLINT,
    SQL_TYPES,
    TIMESTAMP,
    TINYINT,
    VARCHAR,
    SQLParameter,
    is_sql_parameter,
)

__all__ = [
    "BIGINT",
    "BOOLEAN",
    "CHAR",
    "DATE",
    "DECIMAL",
    "DOUBLE",
    "FLOAT",
    "INTEGER",
    "OMIT",
    "OTHER",
    "REAL",
    "SMALLINT",
    "SQL_TYPES",
    "TIMESTAMP",
    "TINYINT",
    "VARCHAR",
    "InlineSQL",
    "InvalidFunctionResultError",
    "InvalidSubstitutionError",
    "SQLCompositionError",
    "SQLParameter",
    "SQLQuery",
    "SQLQueryContext",
    "SQLQueryOptions",
    "TemplateShapeError",
    "build_request_body",
    "inline",
    "is_sql_literal",
    "is_sql_parameter",
    "is_sql_query",
    "render_literal",
    "sql",
    "sql_request",
]
