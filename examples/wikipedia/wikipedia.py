import json
import logging
from typing import Optional

import typer

import druid_sql as ds

app = typer.Typer()


def edits_query(
    channel: str,
    page: Optional[str] = None,
    min_delta: Optional[int] = None,
    limit: int = 10,
) -> ds.SQLQuery:
    return ds.sql(
        [
            "SELECT __time, page, delta FROM wikipedia WHERE channel = ",
            " ",
            " ",
            " ORDER BY __time DESC LIMIT ",
            "",
        ],
        ds.VARCHAR(channel),
        lambda s: page and s(["AND page = ", ""], ds.VARCHAR(page)),
        lambda s: min_delta is not None and s(["AND delta >= ", ""], ds.BIGINT(min_delta)),
        limit,
    )


def top_pages_query(day: str, limit: int = 10) -> ds.SQLQuery:
    return ds.sql(
        [
            "SELECT page, COUNT(*) AS edits FROM wikipedia"
            " WHERE TIME_FLOOR(__time, 'P1D') = ",
            " GROUP BY page ORDER BY edits DESC LIMIT ",
            "",
        ],
        ds.TIMESTAMP(day),
        limit,
    )


def _print_body(query: ds.SQLQuery, header: bool, time_zone: Optional[str]) -> None:
    options = ds.SQLQueryOptions(
        header=header or None,
        context=ds.SQLQueryContext(sql_time_zone=time_zone) if time_zone else None,
    )
    print(json.dumps(ds.build_request_body(query, options), indent=2))


@app.command()
def edits(
    channel: str,
    page: Optional[str] = None,
    min_delta: Optional[int] = None,
    limit: int = 10,
    header: bool = False,
    time_zone: Optional[str] = None,
):
    """Print the request body for recent edits on a channel."""
    _print_body(edits_query(channel, page, min_delta, limit), header, time_zone)


@app.command()
def top(day: str, limit: int = 10, header: bool = False, time_zone: Optional[str] = None):
    """Print the request body for the most edited pages of a day."""
    _print_body(top_pages_query(day, limit), header, time_zone)


@app.callback()
def main(verbose: bool = False):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


if __name__ == "__main__":
    app()
