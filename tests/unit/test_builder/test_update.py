from sqlclause import lit, or_where, returning, set_, set_raw, update, where


def test_update_set_and_where() -> None:
    query = update("users", set_("email", "me@example.com"), where("id", "=", 1))
    assert query.build() == "UPDATE users SET email = $1 WHERE (id = $2)"
    assert query.args() == ["me@example.com", 1]


def test_where_before_set_still_renders_set_first() -> None:
    query = update("users", where("id", "=", 1), set_("email", "x"))
    assert query.build() == "UPDATE users SET email = $1 WHERE (id = $2)"
    assert query.args() == ["x", 1]


def test_set_raw() -> None:
    query = update("posts", set_raw("views", "views + 1"), where("id", "=", 3))
    assert query.build() == "UPDATE posts SET views = views + 1 WHERE (id = $1)"
    assert query.args() == [3]


def test_set_literal_null() -> None:
    query = update("users", set_("deleted_at", lit(None)), where("id", "=", 3))
    assert query.build() == "UPDATE users SET deleted_at = NULL WHERE (id = $1)"


def test_update_returning() -> None:
    query = update(
        "users",
        set_("active", False),
        where("id", "=", 1),
        or_where("id", "=", 2),
        returning("id", "active"),
    )
    assert query.build() == "UPDATE users SET active = $1 WHERE (id = $2 OR id = $3) RETURNING id, active"
    assert query.args() == [False, 1, 2]
