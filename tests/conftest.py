import sys

import pytest

import druid_sql as ds

if sys.version_info < (3, 14):
    collect_ignore = ["test_tstrings.py"]


@pytest.fixture
def wikipedia_options():
    return ds.SQLQueryOptions(
        header=True,
        context=ds.SQLQueryContext(
            sql_time_zone="UTC",
            sql_query_id="wiki-1",
        ),
    )


@pytest.fixture
def deep_nesting():
    # deeper than the default recursion limit
    depth = 2000
    value = ds.INTEGER(0)
    for _ in range(depth):
        value = (lambda inner: lambda s: s(["(", ")"], inner))(value)
    return depth, value
