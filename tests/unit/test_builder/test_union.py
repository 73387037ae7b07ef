from sqlclause import columns, from_, limit, order_asc, select, union, union_all, where


def test_union_concatenates_members_and_arguments() -> None:
    query = union(
        select(columns("id"), from_("users"), where("active", "=", True)),
        select(columns("id"), from_("admins"), where("level", ">", 2)),
    )
    assert query.build() == "SELECT id FROM users WHERE (active = $1) UNION SELECT id FROM admins WHERE (level > $2)"
    assert query.args() == [True, 2]


def test_union_all() -> None:
    query = union_all(select(columns("id"), from_("a")), select(columns("id"), from_("b")))
    assert query.build() == "SELECT id FROM a UNION ALL SELECT id FROM b"


def test_ordering_a_union() -> None:
    query = union(select(columns("id"), from_("a")), select(columns("id"), from_("b"))).apply(
        order_asc("id"), limit(5)
    )
    assert query.build() == "SELECT id FROM a UNION SELECT id FROM b ORDER BY id ASC LIMIT 5"


def test_union_of_one() -> None:
    assert union(select(columns("id"), from_("a"))).build() == "SELECT id FROM a"


def test_empty_union() -> None:
    query = union()
    assert query.build() == ""
    assert query.args() == []
