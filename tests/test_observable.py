import pytest

from wellmeter.observable import NotifyProperty, Observable, Signal


def _make_class(name, base, **props):
    return type(name, (base,), props)


def _sample_class():
    return _make_class(
        "Sample",
        Observable,
        count=NotifyProperty(0, int),
        label=NotifyProperty("0", str),
        raw=NotifyProperty(None),
    )


def test_signal_calls_slots_in_order_with_args():
    signal = Signal()
    calls = []
    signal.connect(lambda *a: calls.append(("first", a)))
    signal.connect(lambda *a: calls.append(("second", a)))
    signal.emit(1, "x")
    assert calls == [("first", (1, "x")), ("second", (1, "x"))]


def test_signal_connect_returns_slot():
    signal = Signal()

    def slot():
        pass

    assert signal.connect(slot) is slot
    assert len(signal) == 1


def test_signal_disconnect_stops_calls():
    signal = Signal()
    calls = []

    def slot():
        calls.append(1)

    signal.connect(slot)
    assert len(signal) == 1
    signal.disconnect(slot)
    assert len(signal) == 0
    signal.emit()
    assert calls == []


def test_signal_disconnect_unknown_raises():
    with pytest.raises(ValueError):
        Signal().disconnect(print)


def test_signal_connect_non_callable_raises():
    with pytest.raises(TypeError):
        Signal().connect(42)


def test_defaults_are_applied():
    sample_cls = _make_class(
        "Sample",
        Observable,
        count=NotifyProperty(0, int),
        label=NotifyProperty("0", str),
        raw=NotifyProperty(None),
    )
    obj = sample_cls()
    assert obj.count == 0
    assert obj.label == "0"
    assert obj.raw is None


def test_change_emits_once_and_same_value_is_silent():
    sample_cls = _make_class("Sample", Observable, count=NotifyProperty(0, int))
    obj = sample_cls()
    hits = []
    obj.count_changed.connect(lambda: hits.append(obj.count))
    obj.count = 7
    obj.count = 7
    assert hits == [7]


def test_kind_converts_values():
    sample_cls = _make_class(
        "Sample",
        Observable,
        count=NotifyProperty(0, int),
        label=NotifyProperty("0", str),
    )
    obj = sample_cls()
    obj.count = "12"
    obj.label = 3
    assert obj.count == 12
    assert obj.label == "3"


def test_kind_rejects_bad_values():
    sample_cls = _make_class("Sample", Observable, count=NotifyProperty(0, int))
    obj = sample_cls()
    with pytest.raises(ValueError):
        obj.count = "not a number"
    assert obj.count == 0


def test_instances_have_independent_state_and_signals():
    sample_cls = _make_class("Sample", Observable, count=NotifyProperty(0, int))
    first, second = sample_cls(), sample_cls()
    hits = []
    first.count_changed.connect(lambda: hits.append("first"))
    second.count = 3
    assert first.count == 0
    assert second.count == 3
    assert hits == []


def test_subclass_inherits_properties():
    base = _sample_class()
    extended = _make_class("Extended", base, extra=NotifyProperty(5, int))
    obj = extended()
    hits = []
    obj.count_changed.connect(lambda: hits.append("count"))
    obj.extra_changed.connect(lambda: hits.append("extra"))
    obj.count = 1
    obj.extra = 6
    assert hits == ["count", "extra"]
    assert [p.name for p in extended._notify_properties] == ["count", "label", "raw", "extra"]


def test_class_access_returns_descriptor():
    prop = NotifyProperty(0, int)
    sample_cls = _make_class("Sample", Observable, count=prop)
    assert sample_cls.count is prop
    assert sample_cls.count.signal_name == "count_changed"