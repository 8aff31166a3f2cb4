import pytest

from fsnotify.op import Event, Op


@pytest.mark.parametrize(
    "event, want",
    [
        (Event(), '[no events]   ""'),
        (Event(name="/file", op=Op(0)), '[no events]   "/file"'),
        (Event(name="/file", op=Op.CHMOD | Op.CREATE), 'CREATE|CHMOD  "/file"'),
        (Event(name="/file", op=Op.RENAME), 'RENAME        "/file"'),
        (Event(name="/file", op=Op.REMOVE), 'REMOVE        "/file"'),
        (Event(name="/file", op=Op.WRITE | Op.CHMOD), 'WRITE|CHMOD   "/file"'),
    ],
)
def test_event_string(event, want):
    assert str(event) == want


@pytest.mark.parametrize(
    "o, h, want",
    [
        (Op.REMOVE, Op.REMOVE, True),
        (Op.REMOVE, Op.CREATE, False),
        (Op.REMOVE | Op.CREATE, Op.CREATE, True),
        (Op.REMOVE | Op.CREATE, Op.CHMOD, False),
    ],
)
def test_op_has(o, h, want):
    assert o.has(h) is want


def test_event_has_delegates_to_op():
    event = Event(name="/file", op=Op.REMOVE | Op.CREATE)
    assert event.has(Op.CREATE)
    assert not event.has(Op.CHMOD)


def test_op_string_order():
    op = Op(int(Op.CHMOD | Op.RENAME | Op.WRITE | Op.REMOVE | Op.CREATE))
    assert str(op) == "CREATE|REMOVE|WRITE|RENAME|CHMOD"


def test_unportable_op_strings():
    op = Op(
        int(
            Op.UNPORTABLE_OPEN
            | Op.UNPORTABLE_READ
            | Op.UNPORTABLE_CLOSE_WRITE
            | Op.UNPORTABLE_CLOSE_READ
        )
    )
    assert str(op) == "OPEN|READ|CLOSE_WRITE|CLOSE_READ"


def test_event_string_with_rename():
    event = Event(name="/tmp/rename", op=Op.CREATE, renamed_from="/tmp/file")
    assert str(event) == 'CREATE        "/tmp/rename" ← "/tmp/file"'


def test_event_coerces_int_op():
    event = Event(name="/file", op=int(Op.WRITE))
    assert event.op is Op.WRITE
    assert str(event) == 'WRITE         "/file"'


def test_event_name_is_quoted_with_escapes():
    event = Event(name='a"b\n', op=Op.CREATE)
    assert str(event) == 'CREATE        "a\\"b\\n"'