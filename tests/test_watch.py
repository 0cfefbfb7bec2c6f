import pytest

from instantshare.errors import SubscriptionError
from instantshare.watch import Watch


def test_initial_value():
    watch = Watch([1, 2])
    assert watch.get() == [1, 2]
    assert watch.version == 0


def test_send_replaces_value_and_bumps_version():
    watch = Watch("a")
    watch.send("b")
    watch.send("c")
    assert watch.get() == "c"
    assert watch.version == 2


def test_subscribers_receive_values_in_order():
    watch = Watch(0)
    seen_first, seen_second = [], []
    watch.subscribe(seen_first.append)
    watch.subscribe(seen_second.append)
    watch.send(5)
    watch.send(6)
    assert seen_first == [5, 6]
    assert seen_second == [5, 6]


def test_subscribe_does_not_replay_current_value():
    watch = Watch("start")
    seen = []
    watch.subscribe(seen.append)
    assert seen == []


def test_unsubscribe_stops_notifications():
    watch = Watch(0)
    seen = []
    unsubscribe = watch.subscribe(seen.append)
    watch.send(1)
    unsubscribe()
    watch.send(2)
    assert seen == [1]
    assert watch.get() == 2


def test_unsubscribe_twice_is_harmless():
    watch = Watch(0)
    seen = []
    unsubscribe = watch.subscribe(seen.append)
    unsubscribe()
    unsubscribe()
    watch.send(3)
    assert seen == []


def test_send_after_close_raises():
    watch = Watch(0)
    watch.close()
    assert watch.closed
    with pytest.raises(SubscriptionError):
        watch.send(1)
    assert watch.get() == 0


def test_subscribe_after_close_raises():
    watch = Watch(0)
    watch.close()
    with pytest.raises(SubscriptionError):
        watch.subscribe(lambda value: None)


def test_close_drops_subscribers():
    watch = Watch(0)
    seen = []
    watch.subscribe(seen.append)
    watch.close()
    with pytest.raises(SubscriptionError):
        watch.send(9)
    assert seen == []


def test_callback_may_read_watch_without_deadlock():
    watch = Watch(0)
    observed = []
    watch.subscribe(lambda value: observed.append(watch.get()))
    watch.send(4)
    assert observed == [4]