import pytest

from wellmeter.depthsafe import DepthSafe

FIELDS = [
    "depth_preset",
    "well_warning",
    "brake",
    "velocity_limit",
    "depth_warning",
    "total_depth",
    "depth_brake",
    "depth_velocity_limit",
]


def test_instance_is_shared():
    value = DepthSafe.instance().depth_velocity_limit + 1
    DepthSafe.instance().depth_velocity_limit = value
    assert DepthSafe.instance().depth_velocity_limit == value


@pytest.mark.parametrize("field", FIELDS)
def test_field_notifies_on_change_only(field):
    safe = DepthSafe()
    assert getattr(safe, field) == 0
    hits = []
    getattr(safe, f"{field}_changed").connect(lambda: hits.append(field))
    setattr(safe, field, 80)
    setattr(safe, field, 80)
    assert getattr(safe, field) == 80
    assert hits == [field]


def test_total_depth_signal_is_its_own():
    safe = DepthSafe()
    hits = []
    safe.total_depth_changed.connect(lambda: hits.append("total"))
    safe.depth_brake_changed.connect(lambda: hits.append("brake"))
    safe.total_depth = 3000
    assert hits == ["total"]


def test_rejects_non_integer():
    safe = DepthSafe()
    with pytest.raises(ValueError):
        safe.brake = "soon"
    assert safe.brake == 0