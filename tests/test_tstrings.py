from druid_sql import CHAR, INTEGER, VARCHAR, SQLQuery, inline, sql


def test_tstring_literals_and_parameters():
    assert sql(t"SELECT {CHAR('a')}, {1}, {'b'}") == SQLQuery(
        'SELECT ?, 1, "b"', (CHAR("a"),)
    )


def test_tstring_inline_function():
    q = sql(t"SELECT * FROM t {(lambda s: s(t'WHERE x = {INTEGER(1)}'))}")
    assert q == SQLQuery("SELECT * FROM t WHERE x = ?", (INTEGER(1),))


def test_tstring_returned_from_function():
    q = sql(t"SELECT * FROM t {(lambda _: t'LIMIT {10}')}")
    assert q == SQLQuery("SELECT * FROM t LIMIT 10")


def test_tstring_conditional_fragment():
    page = None
    q = sql(t"SELECT * FROM wikipedia {(lambda _: page and t'WHERE page = {VARCHAR(page)}')}")
    assert q == SQLQuery("SELECT * FROM wikipedia")


def test_tstring_nested_value_is_spliced():
    where = t"WHERE page = {VARCHAR('Main')}"
    q = sql(t"SELECT * FROM wikipedia {where} LIMIT {5}")
    assert q == SQLQuery(
        "SELECT * FROM wikipedia WHERE page = ? LIMIT 5", (VARCHAR("Main"),)
    )


def test_inline_tstring():
    assert inline(t"x = {1}") == (("x = ", ""), (1,))
