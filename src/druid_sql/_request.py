from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ._compat import Template
from ._compose import SQLQuery, SubSQL, sql
from ._types import is_sql_parameter, parameter_to_dict

logger = logging.getLogger("druid_sql")

DEFAULT_RESULT_FORMAT = "object"


class SQLQueryContext(BaseModel):
    """Druid SQL connection context.

    The named fields affect SQL planning. Any other key is passed through
    untouched and attached to the native queries Druid plans.
    See https://druid.apache.org/docs/latest/querying/sql.html#connection-context
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    # approximate TopN instead of exact GroupBy where possible
    use_approximate_top_n: bool | None = Field(
        default=None, alias="useApproximateTopN"
    )
    use_approximate_count_distinct: bool | None = Field(
        default=None, alias="useApproximateCountDistinct"
    )
    # zone name ("America/Los_Angeles") or offset ("-08:00")
    sql_time_zone: str | None = Field(default=None, alias="sqlTimeZone")
    sql_query_id: str | None = Field(default=None, alias="sqlQueryId")


class SQLQueryOptions(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    context: SQLQueryContext | None = None
    header: bool | None = None
    result_format: str = Field(
        default=DEFAULT_RESULT_FORMAT, alias="resultFormat"
    )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def is_sql_query(obj: object) -> bool:
    if isinstance(obj, SQLQuery):
        return True
    if isinstance(obj, Mapping):
        return isinstance(obj.get("query"), str)
    return isinstance(getattr(obj, "query", None), str)


def _query_to_dict(query: Any) -> dict[str, Any]:
    if isinstance(query, SQLQuery):
        return query.to_dict()
    if isinstance(query, Mapping):
        body = dict(query)
    else:
        body = {"query": query.query}
        parameters = getattr(query, "parameters", None)
        if parameters:
            body["parameters"] = parameters
    if body.get("parameters"):
        for p in body["parameters"]:
            if not is_sql_parameter(p):
                msg = f"not an SQL parameter: {p!r}"
                raise TypeError(msg)
        body["parameters"] = [parameter_to_dict(p) for p in body["parameters"]]
    else:
        body.pop("parameters", None)
    return body


def build_request_body(
    query: SQLQuery | Mapping[str, Any],
    options: SQLQueryOptions | Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the JSON body posted to Druid's SQL endpoint."""
    if not is_sql_query(query):
        msg = f"not an SQL query: {query!r}"
        raise TypeError(msg)
    if options is not None and not isinstance(options, SQLQueryOptions):
        options = SQLQueryOptions.model_validate(options)

    body: dict[str, Any] = {"resultFormat": DEFAULT_RESULT_FORMAT}
    body.update(_query_to_dict(query))
    if options is not None:
        body.update(options.to_dict())

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "druid sql body: %s (%d parameter(s))",
            " ".join(body["query"].split()),
            len(body.get("parameters", ())),
        )
    return body


def sql_request(
    options: SQLQueryOptions | Mapping[str, Any] | None = None,
) -> Callable[..., dict[str, Any]]:
    """Return a template tag that composes a query into a request body.

    >>> tag = sql_request({"header": True})
    >>> tag(["SELECT ", " FROM wikipedia"], VARCHAR("page"))
    {'resultFormat': 'object', 'query': 'SELECT ? FROM wikipedia', ...}
    """
    if options is not None and not isinstance(options, SQLQueryOptions):
        options = SQLQueryOptions.model_validate(options)

    def tag(strings: Template | Sequence[str], *values: SubSQL) -> dict[str, Any]:
        return build_request_body(sql(strings, *values), options)

    return tag
