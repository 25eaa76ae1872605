"""
Exception types shared across ulanzi-monitor.
"""


class MonitorError(Exception):
    """Base exception for ulanzi-monitor errors."""

    pass


class TransportError(MonitorError):
    """Raised when talking to GitHub or the display fails at the network level."""

    pass


class DecodeError(MonitorError):
    """Raised when a response body does not have the expected shape."""

    pass


class ConfigError(MonitorError, ValueError):
    """Raised when required settings are missing or invalid."""

    pass
