"""Observable screen state, SQLite settings storage and register helpers for a wireline depth and tension metering display."""

__version__ = "0.1.0"