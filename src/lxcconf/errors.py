"""Configuration loading errors."""

from pathlib import Path
from typing import Optional, Union


class ConfigError(Exception):
    """Base error for a configuration file that cannot be loaded."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.path: Optional[Path] = None
        self.lineno: Optional[int] = None

    def locate(self, path: Union[str, Path], lineno: int) -> "ConfigError":
        """Attach the file position the error was raised at."""
        self.path = Path(path)
        self.lineno = lineno
        return self

    def __str__(self) -> str:
        if self.path is not None and self.lineno is not None:
            return f"{self.path}:{self.lineno}: {self.message}"
        return self.message


class ConfigReadError(ConfigError):
    """The configuration file could not be read."""
    pass


class MalformedLineError(ConfigError):
    """Line has no '=' separator."""
    pass


class UnknownDirectiveError(ConfigError):
    """No registered directive matches the key."""
    pass


class InvalidValueError(ConfigError):
    """Value is outside the accepted set or range."""
    pass


class OversizedFieldError(ConfigError):
    """Value exceeds a fixed length limit."""
    pass


class InvalidAddressError(ConfigError):
    """Address or broadcast text is not a valid IP address."""
    pass


class MissingContextError(ConfigError):
    """Directive needs context that is not there (no open device, bad cgroup key)."""
    pass
