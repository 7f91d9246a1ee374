"""Unit tests for emitter subscription and delivery behavior."""

from dataclasses import dataclass, field

import pytest

from sigflow import Emitter, SimpleEmitter, make_emitter, make_simple_emitter


@dataclass
class Handler:
    name: str
    values: list = field(default_factory=list, compare=False)

    def __call__(self, value):
        self.values.append(value)


@pytest.fixture(params=[make_emitter, make_simple_emitter], ids=["emitter", "simple"])
def signal(request):
    """Run each test against both the counting and the bare emitter."""
    return request.param()


@pytest.mark.unit
@pytest.mark.signal
def test_emit_delivers_value_to_subscriber(signal, recorder):
    """Subscriber receives the emitted value"""
    signal.subscribe(recorder)

    signal.emit(10)

    assert recorder.values == [10]


@pytest.mark.unit
@pytest.mark.signal
def test_emit_without_value_notifies_subscriber(signal):
    """A signal carrying no data can be emitted without arguments"""
    called = False

    def callback(_):
        nonlocal called
        called = True

    signal.subscribe(callback)
    signal.emit()

    assert called


@pytest.mark.unit
@pytest.mark.signal
def test_emit_with_no_subscribers_is_harmless(signal):
    """Emitting on a signal nobody listens to does nothing"""
    signal.emit(10)

    assert signal.n_of_subscriptions == 0


@pytest.mark.unit
@pytest.mark.signal
def test_two_subscribers_both_receive_value(signal, make_recorder):
    """Every subscriber is notified"""
    first, second = make_recorder(), make_recorder()
    signal.subscribe(first)
    signal.subscribe(second)

    signal.emit(10)

    assert first.values == [10]
    assert second.values == [10]


@pytest.mark.unit
@pytest.mark.signal
def test_subscribers_are_notified_in_subscription_order(signal):
    """Delivery order follows subscription order"""
    order = []
    signal.subscribe(lambda v: order.append("a"))
    signal.subscribe(lambda v: order.append("b"))
    signal.subscribe(lambda v: order.append("c"))

    signal.emit(None)

    assert order == ["a", "b", "c"]


@pytest.mark.unit
@pytest.mark.signal
def test_same_subscriber_twice_is_deduplicated(signal):
    """Subscribing the same function twice keeps a single subscription"""
    count = 0

    def subscriber(_):
        nonlocal count
        count += 1

    assert signal.n_of_subscriptions == 0
    signal.subscribe(subscriber)
    assert signal.n_of_subscriptions == 1
    signal.subscribe(subscriber)
    assert signal.n_of_subscriptions == 1

    signal.emit(10)

    assert count == 1


@pytest.mark.unit
@pytest.mark.signal
def test_wrapped_subscriber_counts_as_distinct(signal, recorder):
    """Wrapping a function in a lambda subscribes it a second time"""
    unsubscribe_direct = signal.subscribe(recorder)
    unsubscribe_wrapped = signal.subscribe(lambda v: recorder(v))
    assert signal.n_of_subscriptions == 2

    signal.emit(1)
    assert recorder.values == [1, 1]

    unsubscribe_wrapped()
    assert signal.n_of_subscriptions == 1
    unsubscribe_direct()
    assert signal.n_of_subscriptions == 0


@pytest.mark.unit
@pytest.mark.signal
def test_unsubscribe_stops_delivery(signal, make_recorder):
    """An unsubscribed callback misses later emissions"""
    first, second = make_recorder(), make_recorder()
    signal.subscribe(first)
    unsubscribe_second = signal.subscribe(second)

    signal.emit(10)
    unsubscribe_second()
    signal.emit(20)

    assert first.values == [10, 20]
    assert second.values == [10]


@pytest.mark.unit
@pytest.mark.signal
def test_unsubscribe_handles_are_idempotent(signal):
    """Every handle removes the same membership and repeated calls do nothing"""
    subscriber = lambda v: None  # noqa: E731
    unsubscribe1 = signal.subscribe(subscriber)
    unsubscribe2 = signal.subscribe(subscriber)
    unsubscribe3 = signal.subscribe(subscriber)
    assert signal.n_of_subscriptions == 1

    unsubscribe3()
    assert signal.n_of_subscriptions == 0
    unsubscribe2()
    unsubscribe1()
    unsubscribe1()
    assert signal.n_of_subscriptions == 0


@pytest.mark.unit
@pytest.mark.signal
def test_unsubscribe_method_ignores_unknown_callback(signal):
    """Unsubscribing a callback that was never subscribed doesn't raise"""
    signal.subscribe(lambda v: None)

    signal.unsubscribe(lambda v: None)

    assert signal.n_of_subscriptions == 1


@pytest.mark.unit
@pytest.mark.signal
def test_number_of_subscriptions_is_up_to_date(signal):
    """n_of_subscriptions reflects every subscribe and unsubscribe"""
    sub1 = lambda v: None  # noqa: E731
    sub2 = lambda v: None  # noqa: E731
    sub3 = lambda v: None  # noqa: E731

    assert signal.n_of_subscriptions == 0
    unsub1a = signal.subscribe(sub1)
    assert signal.n_of_subscriptions == 1
    unsub1b = signal.subscribe(sub1)
    assert signal.n_of_subscriptions == 1

    unsub1a()
    assert signal.n_of_subscriptions == 0
    unsub1b()
    assert signal.n_of_subscriptions == 0

    unsub2 = signal.subscribe(sub2)
    assert signal.n_of_subscriptions == 1
    unsub3 = signal.subscribe(sub3)
    assert signal.n_of_subscriptions == 2
    unsub2()
    assert signal.n_of_subscriptions == 1
    unsub3()
    assert signal.n_of_subscriptions == 0


@pytest.mark.unit
@pytest.mark.signal
def test_emit_for_notifies_only_target(signal, make_recorder):
    """emit_for updates the targeted subscriber and leaves others untouched"""
    first, second = make_recorder(), make_recorder()
    signal.subscribe(first)
    signal.subscribe(second)

    signal.emit_for(second, 10)

    assert first.values == []
    assert second.values == [10]


@pytest.mark.unit
@pytest.mark.signal
def test_emit_for_after_unsubscribe_is_noop(signal, make_recorder):
    """emit_for does nothing for a callback that is no longer subscribed"""
    first, second = make_recorder(), make_recorder()
    signal.subscribe(first)
    unsubscribe_second = signal.subscribe(second)
    unsubscribe_second()

    signal.emit_for(second, 10)

    assert first.values == []
    assert second.values == []


@pytest.mark.unit
@pytest.mark.signal
def test_clear_subscriptions_removes_everyone(signal, recorder):
    """clear_subscriptions drops all subscribers"""
    signal.subscribe(recorder)
    signal.subscribe(lambda v: None)
    signal.subscribe(lambda v: None)
    assert signal.n_of_subscriptions == 3

    signal.clear_subscriptions()

    assert signal.n_of_subscriptions == 0
    signal.emit(10)
    assert recorder.values == []


@pytest.mark.unit
@pytest.mark.signal
def test_subscribe_rejects_non_callable(signal):
    """Subscribing something that cannot be called raises TypeError"""
    with pytest.raises(TypeError, match="callable"):
        signal.subscribe(42)


@pytest.mark.unit
@pytest.mark.signal
def test_subscriber_exception_propagates_to_emitter(signal, recorder):
    """An exception raised by a subscriber reaches the caller of emit"""

    def failing(_):
        raise RuntimeError("boom")

    signal.subscribe(failing)
    signal.subscribe(recorder)

    with pytest.raises(RuntimeError, match="boom"):
        signal.emit(1)

    assert recorder.values == []


@pytest.mark.unit
@pytest.mark.signal
def test_contains_reports_membership(signal):
    """The in operator checks whether a callback is subscribed"""
    subscriber = lambda v: None  # noqa: E731
    unsubscribe = signal.subscribe(subscriber)

    assert subscriber in signal
    unsubscribe()
    assert subscriber not in signal


@pytest.mark.unit
@pytest.mark.signal
def test_bound_methods_of_same_instance_are_deduplicated(signal, recorder):
    """Two accesses of the same bound method count as the same subscriber"""
    signal.subscribe(recorder.__call__)
    signal.subscribe(recorder.__call__)
    assert signal.n_of_subscriptions == 1

    signal.emit(5)
    signal.unsubscribe(recorder.__call__)

    assert recorder.values == [5]
    assert signal.n_of_subscriptions == 0


@pytest.mark.unit
@pytest.mark.signal
def test_equal_but_distinct_callables_are_separate_subscribers(signal):
    """Callables that compare equal are still tracked by identity"""
    first = Handler("x")
    second = Handler("x")
    assert first == second

    signal.subscribe(first)
    unsubscribe_second = signal.subscribe(second)
    assert signal.n_of_subscriptions == 2

    signal.emit(1)
    signal.emit_for(second, 2)
    unsubscribe_second()
    signal.emit(3)

    assert first.values == [1, 3]
    assert second.values == [1, 2]
    assert first in signal
    assert second not in signal


@pytest.mark.unit
@pytest.mark.signal
def test_key_and_repr():
    """Emitters carry a key used in their repr"""
    named = make_emitter("clicks")
    named.subscribe(lambda v: None)

    assert named.key == "clicks"
    assert repr(named) == "Emitter('clicks', subscribers=1)"
    assert make_simple_emitter().key == "<unnamed>"


@pytest.mark.unit
@pytest.mark.signal
def test_factories_return_expected_types():
    """make_emitter builds an Emitter, make_simple_emitter a bare SimpleEmitter"""
    assert isinstance(make_emitter(), Emitter)
    simple = make_simple_emitter()
    assert isinstance(simple, SimpleEmitter)
    assert not isinstance(simple, Emitter)
    assert not hasattr(simple, "n_of_subscriptions_signal")
