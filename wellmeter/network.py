"""Ground gauge and cloud network settings."""

from __future__ import annotations

from wellmeter.observable import NotifyProperty, Observable


class Network(Observable):
    """Protocol, local and remote endpoints for the ground gauge and the cloud link."""

    g_protocol = NotifyProperty(0, int)
    g_local_ip = NotifyProperty("", str)
    g_local_port = NotifyProperty("", str)
    g_remote_ip = NotifyProperty("", str)
    g_remote_port = NotifyProperty("", str)

    c_protocol = NotifyProperty(0, int)
    c_local_ip = NotifyProperty("", str)
    c_local_port = NotifyProperty("", str)
    c_remote_ip = NotifyProperty("", str)
    c_remote_port = NotifyProperty("", str)