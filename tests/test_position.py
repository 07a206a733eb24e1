from basic_lang.position import Position


def test_advance_moves_column():
    pos = Position(-1, 0, -1, "stdin", "12")
    pos.advance(' ')
    assert (pos.index, pos.line, pos.column) == (0, 0, 0)
    pos.advance('1')
    assert (pos.index, pos.line, pos.column) == (1, 0, 1)


def test_advance_past_newline_starts_next_line():
    pos = Position(3, 0, 3, "stdin", "1+2\n3")
    pos.advance('\n')
    assert (pos.index, pos.line, pos.column) == (4, 1, 0)


def test_copy_is_independent():
    pos = Position(0, 0, 0, "stdin", "1")
    snapshot = pos.copy()
    pos.advance('1')
    assert snapshot.index == 0
    assert pos.index == 1
