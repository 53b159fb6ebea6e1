import pytest

from wellmeter.wellparameter import WellParameter

STRING_FIELDS = [
    "well_number",
    "area_block",
    "well_depth",
    "harness_weight",
    "sensor_weight",
    "harness_force",
    "user_name",
    "operator_type",
]
INT_FIELDS = ["well_type", "harness_type", "tension_unit", "work_type"]


@pytest.mark.parametrize("name", STRING_FIELDS)
def test_string_defaults_are_empty(name):
    assert getattr(WellParameter(), name) == ""


@pytest.mark.parametrize("name", INT_FIELDS)
def test_int_defaults_are_zero(name):
    assert getattr(WellParameter(), name) == 0


@pytest.mark.parametrize("name", STRING_FIELDS + INT_FIELDS)
def test_change_emits_once(name):
    params = WellParameter()
    calls = []
    getattr(params, f"{name}_changed").connect(lambda: calls.append(name))
    value = "W-1" if name in STRING_FIELDS else 3
    setattr(params, name, value)
    setattr(params, name, value)
    assert getattr(params, name) == value
    assert calls == [name]


def test_same_value_does_not_emit():
    params = WellParameter()
    calls = []
    params.well_type_changed.connect(lambda: calls.append(1))
    params.well_type = 0
    assert calls == []


def test_int_field_converts_text():
    params = WellParameter()
    params.work_type = "2"
    assert params.work_type == 2


def test_int_field_rejects_bad_text():
    params = WellParameter()
    with pytest.raises(ValueError):
        params.harness_type = "abc"
    assert params.harness_type == 0


def test_instances_are_independent():
    first = WellParameter()
    second = WellParameter()
    first.user_name = "alice"
    assert second.user_name == ""


def test_instance_is_shared():
    shared = WellParameter.instance()
    assert shared is WellParameter.instance()
    assert isinstance(shared, WellParameter)