import pytest

from wellmeter.tensionsafe import TensionSafe

FIELDS = [
    "well_type",
    "cable_weight",
    "tension_safe_factor",
    "weak_force",
    "current_tension_safe",
    "max_tension_safe",
    "cable_tension_trend",
    "ptime",
    "depth_loss",
    "current_depth1",
    "current_depth2",
    "current_depth3",
]


def test_defaults_are_text_zero():
    safe = TensionSafe()
    for name in FIELDS:
        assert getattr(safe, name) == "0"


def test_instance_is_shared():
    TensionSafe.instance().cable_weight = "shared-weight"
    assert TensionSafe.instance().cable_weight == "shared-weight"


@pytest.mark.parametrize("name", FIELDS)
def test_change_emits_once(name):
    safe = TensionSafe()
    calls = []
    getattr(safe, f"{name}_changed").connect(lambda: calls.append(name))
    setattr(safe, name, "12.5")
    setattr(safe, name, "12.5")
    assert getattr(safe, name) == "12.5"
    assert calls == [name]


def test_setting_default_does_not_emit():
    safe = TensionSafe()
    calls = []
    safe.depth_loss_changed.connect(lambda: calls.append(1))
    safe.depth_loss = "0"
    assert calls == []


def test_numbers_are_stored_as_text():
    safe = TensionSafe()
    safe.max_tension_safe = 42
    assert safe.max_tension_safe == "42"


def test_fields_are_independent():
    safe = TensionSafe()
    safe.current_depth1 = "100"
    assert safe.current_depth1 == "100"
    assert safe.current_depth2 == "0"
    assert safe.current_depth3 == "0"