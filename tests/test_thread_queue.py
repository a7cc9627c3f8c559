import threading

import pytest

from baamboo.thread_queue import QueueClosed, ThreadQueue


def test_fifo_order():
    q = ThreadQueue()
    for value in ("a", "b", "c"):
        q.push(value)
    assert q.size() == 3
    assert [q.try_pop(), q.try_pop(), q.try_pop()] == ["a", "b", "c"]
    assert q.empty()


def test_try_pop_empty():
    assert ThreadQueue().try_pop() is None


def test_replace_drops_oldest():
    q = ThreadQueue()
    q.push(1)
    q.push(2)
    q.replace(3)
    assert q.size() == 2
    assert q.try_pop() == 2
    assert q.try_pop() == 3


def test_replace_on_empty_raises():
    with pytest.raises(IndexError):
        ThreadQueue().replace(1)


def test_clear():
    q = ThreadQueue()
    q.push(1)
    q.push(2)
    q.clear()
    assert len(q) == 0
    assert q.try_pop() is None


def test_blocking_pop_receives_value_from_other_thread():
    q = ThreadQueue()
    results = []
    consumer = threading.Thread(target=lambda: results.append(q.pop()))
    consumer.start()
    q.push("frame")
    consumer.join(timeout=5)
    assert results == ["frame"]
    assert q.size() == 0
    assert q.empty() is True


def test_pop_in_main_thread_returns_pushed_value():
    q = ThreadQueue()
    q.push("first")
    q.push("second")
    assert q.pop() == "first"
    assert q.size() == 1


def test_close_wakes_blocked_pop():
    q = ThreadQueue()
    errors = []

    def consume():
        try:
            q.pop()
        except QueueClosed as exc:
            errors.append(exc)

    consumer = threading.Thread(target=consume)
    consumer.start()
    q.close()
    consumer.join(timeout=5)
    assert len(errors) == 1
    with pytest.raises(QueueClosed):
        q.pop()