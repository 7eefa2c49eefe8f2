"""Netstat collector exceptions."""


class NetstatError(Exception):
    """Base exception for netstat collector errors."""


class EnumerationError(NetstatError):
    """Listing the OS network connections failed."""


class ResolutionError(NetstatError):
    """A metric namespace could not be resolved against a snapshot."""

    def __init__(self, reason: str, path=()):
        self.reason = reason
        self.path = tuple(path)
        msg = reason if not self.path else f"{reason} {{path {'/'.join(self.path)}}}"
        super().__init__(msg)


class ConfigError(NetstatError):
    """Configuration file missing or invalid."""
