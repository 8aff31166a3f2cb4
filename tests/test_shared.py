import queue
import threading

import pytest

from fsnotify.op import Event, Op
from fsnotify.shared import Shared


def make_shared(maxsize=0):
    return Shared(queue.Queue(maxsize), queue.Queue(maxsize))


def test_send_event_delivers():
    shared = make_shared()
    event = Event(name="/file", op=Op.CREATE)
    assert shared.send_event(event) is True
    assert shared.events.get_nowait() == event


def test_empty_op_is_dropped():
    shared = make_shared()
    assert shared.send_event(Event(name="/file")) is True
    assert shared.events.empty()


def test_send_error_delivers_and_skips_none():
    shared = make_shared()
    err = OSError("boom")
    assert shared.send_error(None) is True
    assert shared.errors.empty()
    assert shared.send_error(err) is True
    assert shared.errors.get_nowait() is err


def test_close_reports_previous_state():
    shared = make_shared()
    assert shared.is_closed() is False
    assert shared.close() is False
    assert shared.is_closed() is True
    assert shared.close() is True


def test_send_after_close_fails():
    shared = make_shared()
    shared.close()
    assert shared.send_event(Event(name="/file", op=Op.WRITE)) is False
    assert shared.send_error(OSError("x")) is False
    assert shared.events.empty()
    assert shared.errors.empty()


def test_blocked_send_released_by_close():
    shared = make_shared(maxsize=1)
    shared.events.put(Event(name="/first", op=Op.CREATE))
    timer = threading.Timer(0.1, shared.close)
    timer.start()
    try:
        assert shared.send_event(Event(name="/second", op=Op.CREATE)) is False
    finally:
        timer.join()
    assert shared.events.qsize() == 1


def test_blocked_send_times_out():
    shared = make_shared(maxsize=1)
    shared.errors.put(OSError("first"))
    with pytest.raises(TimeoutError):
        shared.send_error(OSError("second"), timeout=0.1)


def test_concurrent_close_only_one_first():
    shared = make_shared()
    results = []
    lock = threading.Lock()

    def worker():
        r = shared.close()
        with lock:
            results.append(r)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert results.count(False) == 1
    assert len(results) == 8
    assert shared.is_closed() is True
    assert shared.close() is True