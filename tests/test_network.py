import pytest

from wellmeter.network import Network

STRING_FIELDS = [
    "g_local_ip",
    "g_local_port",
    "g_remote_ip",
    "g_remote_port",
    "c_local_ip",
    "c_local_port",
    "c_remote_ip",
    "c_remote_port",
]


def test_defaults():
    net = Network()
    assert net.g_protocol == 0
    assert net.c_protocol == 0
    for name in STRING_FIELDS:
        assert getattr(net, name) == ""


@pytest.mark.parametrize("name", STRING_FIELDS)
def test_string_field_change_emits_once(name):
    net = Network()
    calls = []
    getattr(net, f"{name}_changed").connect(lambda: calls.append(name))
    setattr(net, name, "192.168.1.100")
    setattr(net, name, "192.168.1.100")
    assert getattr(net, name) == "192.168.1.100"
    assert calls == [name]


@pytest.mark.parametrize("name", ["g_protocol", "c_protocol"])
def test_protocol_change_emits(name):
    net = Network()
    calls = []
    getattr(net, f"{name}_changed").connect(lambda: calls.append(1))
    setattr(net, name, 2)
    setattr(net, name, 2)
    setattr(net, name, 1)
    assert getattr(net, name) == 1
    assert len(calls) == 2


def test_ground_and_cloud_are_independent():
    net = Network()
    net.g_remote_port = "1600"
    assert net.g_remote_port == "1600"
    assert net.c_remote_port == ""


def test_protocol_rejects_non_numeric():
    net = Network()
    with pytest.raises(ValueError):
        net.g_protocol = "tcp"
    assert net.g_protocol == 0


def test_instances_do_not_share_state():
    first, second = Network(), Network()
    first.c_local_ip = "10.0.0.1"
    assert second.c_local_ip == ""