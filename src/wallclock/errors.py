from __future__ import annotations


class WallclockError(Exception):
    """Base class for every error the widget reports at startup."""


class ConfigError(WallclockError, ValueError):
    pass


class TimezoneError(WallclockError):
    def __init__(self, name: str, cause: Exception):
        super().__init__(f"invalid timezone: {cause}")
        self.name = name


class SetupError(WallclockError):
    pass
