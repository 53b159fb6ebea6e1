import pytest

from wellmeter.home import Home

FIELDS = [
    "depth",
    "speed",
    "tension",
    "tension_increment",
    "pulse",
    "max_tension",
    "target_depth",
    "max_speed",
    "max_tension_increment",
    "k_value",
    "harness_tension",
    "max_parameter_status",
    "network_status",
]


def test_instance_is_shared():
    value = Home.instance().network_status + 1
    Home.instance().network_status = value
    assert Home.instance().network_status == value


@pytest.mark.parametrize("field", FIELDS)
def test_fields_start_at_zero(field):
    assert getattr(Home(), field) == 0


@pytest.mark.parametrize("field", FIELDS)
def test_setting_a_field_notifies_once(field):
    home = Home()
    hits = []
    getattr(home, f"{field}_changed").connect(lambda: hits.append(field))
    setattr(home, field, 42)
    setattr(home, field, 42)
    assert getattr(home, field) == 42
    assert hits == [field]


def test_change_does_not_notify_other_fields():
    home = Home()
    hits = []
    home.speed_changed.connect(lambda: hits.append("speed"))
    home.depth = 100
    assert hits == []
    assert home.speed == 0


def test_values_are_integers():
    home = Home()
    home.tension = "250"
    assert home.tension == 250
    with pytest.raises(ValueError):
        home.tension = "heavy"
    assert home.tension == 250