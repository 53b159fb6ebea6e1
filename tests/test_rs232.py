import pytest

from wellmeter.rs232 import RS232

FIELDS = ["serial_port", "baud_rate", "data_bits", "serial_type"]


def test_defaults_are_zero():
    port = RS232()
    assert [getattr(port, name) for name in FIELDS] == [0, 0, 0, 0]


@pytest.mark.parametrize("name", FIELDS)
def test_change_emits_only_on_new_value(name):
    port = RS232()
    calls = []
    getattr(port, f"{name}_changed").connect(lambda: calls.append(name))
    setattr(port, name, 115200)
    setattr(port, name, 115200)
    assert getattr(port, name) == 115200
    assert calls == [name]


def test_setting_default_does_not_emit():
    port = RS232()
    calls = []
    port.baud_rate_changed.connect(lambda: calls.append(1))
    port.baud_rate = 0
    assert calls == []


def test_other_signals_stay_quiet():
    port = RS232()
    calls = []
    port.serial_port_changed.connect(lambda: calls.append("port"))
    port.data_bits = 8
    assert port.data_bits == 8
    assert calls == []


def test_rejects_non_numeric():
    port = RS232()
    with pytest.raises(ValueError):
        port.data_bits = "eight"
    assert port.data_bits == 0