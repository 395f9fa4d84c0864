from kanban.services import positions


def test_dense_positions_follow_list_order():
    assert positions.dense_positions(["c", "a", "b"]) == {"c": 0, "a": 1, "b": 2}


def test_clamp_bounds():
    assert positions.clamp(-3, 4) == 0
    assert positions.clamp(2, 4) == 2
    assert positions.clamp(9, 4) == 4


def test_relocate_moves_item_and_clamps():
    order = ["c1", "c2", "c3", "c4"]

    assert positions.relocate(order, "c1", 2) == ["c2", "c3", "c1", "c4"]
    assert positions.relocate(order, "c4", 0) == ["c4", "c1", "c2", "c3"]
    assert positions.relocate(order, "c2", 99) == ["c1", "c3", "c4", "c2"]
    assert positions.relocate(order, "c3", -1) == ["c3", "c1", "c2", "c4"]
    assert positions.relocate(order, "c2", 1) == order


def test_insert_at_and_remove():
    assert positions.insert_at(["c3"], "c1", 0) == ["c1", "c3"]
    assert positions.insert_at(["c3"], "c1", 5) == ["c3", "c1"]
    assert positions.insert_at([], "c1", 3) == ["c1"]
    assert positions.remove(["c1", "c2", "c3"], "c2") == ["c1", "c3"]
    assert positions.remove(["c1"], "missing") == ["c1"]


def test_helpers_do_not_mutate_input():
    order = ["a", "b", "c"]
    positions.relocate(order, "a", 2)
    positions.insert_at(order, "d", 0)
    positions.remove(order, "b")
    assert order == ["a", "b", "c"]


class _Row:
    def __init__(self, position):
        self.position = position


def test_renumber_writes_dense_positions(db_session):
    a, b, c = _Row(4), _Row(0), _Row(9)

    positions.renumber(db_session, [a, b, c])

    assert [row.position for row in (a, b, c)] == [0, 1, 2]


def test_renumber_skips_scopes_already_in_place(db_session):
    rows = [_Row(0), _Row(1)]

    positions.renumber(db_session, rows, [])

    assert [row.position for row in rows] == [0, 1]
