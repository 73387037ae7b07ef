from sqlclause import delete, limit, lit, returning, where, where_in


def test_delete_all_rows() -> None:
    assert delete("sessions").build() == "DELETE FROM sessions"


def test_delete_with_predicates() -> None:
    query = delete("sessions", where("user_id", "=", 5), where("expires_at", "<", lit("NOW()")))
    assert query.build() == "DELETE FROM sessions WHERE (user_id = $1 AND expires_at < NOW())"
    assert query.args() == [5]


def test_delete_returning() -> None:
    query = delete("sessions", where_in("id", 1, 2), returning("id"))
    assert query.build() == "DELETE FROM sessions WHERE (id IN ($1, $2)) RETURNING id"


def test_delete_limit() -> None:
    assert delete("jobs", limit(100)).build() == "DELETE FROM jobs LIMIT 100"
