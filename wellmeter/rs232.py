"""Serial port settings."""

from __future__ import annotations

from wellmeter.observable import NotifyProperty, Observable


class RS232(Observable):
    """Port, baud rate, data bits and serial type of the ground serial link."""

    serial_port = NotifyProperty(0, int)
    baud_rate = NotifyProperty(0, int)
    data_bits = NotifyProperty(0, int)
    serial_type = NotifyProperty(0, int)